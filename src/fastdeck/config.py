"""Configuration and data management for fastdeck"""

import os
import platform
import shutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .core.triggers import TableTrigger, triggers_from_data
from .utils.logging import FastDeckLogger

TRIGGERS_FILE = "table-triggers.yaml"


class DataManager:
    """Manages fastdeck data files with user override support"""

    def __init__(self):
        # Package data directory (built-in defaults)
        self.package_data_dir = Path(__file__).parent / "data"

        # User data directory (overrides); created on first write
        self.user_data_dir = self._get_user_data_dir()

    def _get_user_data_dir(self) -> Path:
        """Get user data directory based on OS or environment variable"""
        if custom_dir := os.environ.get("FASTDECK_DATA_DIR"):
            return Path(custom_dir).expanduser()

        system = platform.system()

        if system == "Darwin":
            return Path.home() / "Library" / "Application Support" / "fastdeck"
        elif system == "Windows":
            app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
            return Path(app_data) / "fastdeck"
        else:
            xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            return Path(xdg_config) / "fastdeck"

    def load_data_file(self, filename: str) -> Dict[str, Any]:
        """Load data file with user override priority"""
        user_file = self.user_data_dir / filename
        if user_file.exists():
            return self._load_file(user_file)

        package_file = self.package_data_dir / filename
        if package_file.exists():
            return self._load_file(package_file)

        return {}

    def _load_file(self, filepath: Path) -> Dict[str, Any]:
        """Load a YAML data file"""
        try:
            with open(filepath, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            FastDeckLogger.warning(f"Error loading {filepath}: {e}")
            return {}

        if not isinstance(data, dict):
            FastDeckLogger.warning(f"Ignoring {filepath}: expected a mapping at top level")
            return {}
        return data

    def save_user_data(self, filename: str, data: Dict[str, Any]) -> Path:
        """Save data to user directory"""
        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.user_data_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        FastDeckLogger.info(f"Saved to {filepath}")
        return filepath

    def reset_to_defaults(self, filename: Optional[str] = None) -> int:
        """Remove user override files; returns how many were removed"""
        if filename:
            user_file = self.user_data_dir / filename
            if user_file.exists():
                user_file.unlink()
                FastDeckLogger.info(f"Reset {filename} to defaults")
                return 1
            FastDeckLogger.info(f"{filename} was already using defaults")
            return 0

        count = 0
        if self.user_data_dir.exists():
            for user_file in self.user_data_dir.glob("*"):
                if user_file.is_file():
                    user_file.unlink()
                    count += 1
        FastDeckLogger.info(f"Reset {count} file(s) to defaults")
        return count

    def get_data_info(self) -> Dict[str, Any]:
        """Get information about data files"""
        package_files = []
        if self.package_data_dir.exists():
            package_files = [f.name for f in self.package_data_dir.glob("*") if f.is_file()]

        user_files = []
        if self.user_data_dir.exists():
            user_files = [f.name for f in self.user_data_dir.glob("*") if f.is_file()]

        return {
            "package_data_dir": str(self.package_data_dir),
            "user_data_dir": str(self.user_data_dir),
            "package_files": sorted(package_files),
            "user_files": sorted(user_files),
        }

    def copy_package_to_user(self, filename: str) -> bool:
        """Copy a package data file to user directory for editing"""
        package_file = self.package_data_dir / filename
        user_file = self.user_data_dir / filename

        if not package_file.exists():
            FastDeckLogger.error(f"Package file {filename} not found")
            return False

        if user_file.exists():
            FastDeckLogger.warning(f"User file {filename} already exists")
            return False

        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(package_file, user_file)
        FastDeckLogger.info(f"Copied {filename} to user directory")
        return True


# Singleton instance
_data_manager = None


def get_data_manager() -> DataManager:
    """Get or create the data manager singleton"""
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def load_table_triggers(data_manager: Optional[DataManager] = None) -> List[TableTrigger]:
    """Load table-triggers.yaml with user overrides, falling back to built-ins"""
    dm = data_manager or get_data_manager()
    return triggers_from_data(dm.load_data_file(TRIGGERS_FILE))
