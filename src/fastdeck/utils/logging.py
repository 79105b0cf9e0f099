"""
Logging configuration for fastdeck.

Parsing is silent until a caller (normally the CLI) runs setup_logger(). After
that, messages go to a file in a 'logs' subdirectory next to the deck being
read, and INFO and above are echoed to the console. Log filename format:
fastdeck_{deck_name}_{timestamp}.log

Only the 5 most recent 'fastdeck_' log files are kept in a logs directory.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


class FastDeckLogger:
    """Centralized logger for fastdeck operations."""

    LOGGER_NAME = "fastdeck"
    KEEP_LOGS = 5

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    @classmethod
    def _cleanup_old_logs(cls, logs_dir: Path, keep_count: int = KEEP_LOGS) -> None:
        """Remove old log files, keeping only the most recent ones."""
        log_files = sorted(
            logs_dir.glob("fastdeck_*.log"),
            key=lambda p: p.stat().st_mtime,
            reverse=True,
        )

        for old_log in log_files[keep_count:]:
            try:
                old_log.unlink()
            except OSError:
                # Another process may still hold it open (Windows)
                pass

    @classmethod
    def setup_logger(
        cls, file_path: str, log_level: int = logging.INFO, to_file: bool = True
    ) -> logging.Logger:
        """
        Setup logger for reading one deck.

        Args:
            file_path: Path to the deck being read
            log_level: Logging level (default: INFO)
            to_file: Write a log file in <deck dir>/logs (default: True)

        Returns:
            Configured logger instance
        """
        cls.cleanup()

        cls._logger = logging.getLogger(cls.LOGGER_NAME)
        cls._logger.setLevel(log_level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(max(log_level, logging.INFO))
        console_handler.setFormatter(formatter)
        cls._logger.addHandler(console_handler)

        if to_file:
            input_path = Path(file_path)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:17]

            logs_dir = input_path.parent / "logs"
            logs_dir.mkdir(exist_ok=True)
            log_path = logs_dir / f"fastdeck_{input_path.stem}_{timestamp}.log"

            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            cls._logger.addHandler(file_handler)
            cls._current_log_file = log_path

            cls._logger.info(f"fastdeck logging started for file: {file_path}")
            cls._logger.info(f"Log file: {log_path}")

            # after creating the new file so it counts towards the kept ones
            cls._cleanup_old_logs(logs_dir)

        return cls._logger

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        """Get the current logger instance."""
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the current log file path."""
        return cls._current_log_file

    @classmethod
    def info(cls, message: str) -> None:
        if cls._logger:
            cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        if cls._logger:
            cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        if cls._logger:
            cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        if cls._logger:
            cls._logger.debug(message)

    @classmethod
    def success(cls, message: str) -> None:
        """Log success message (using info level)."""
        if cls._logger:
            cls._logger.info(f"✅ {message}")

    @classmethod
    def cleanup(cls) -> None:
        """Detach and close handlers."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
            cls._logger = None
            cls._current_log_file = None
