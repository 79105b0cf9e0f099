"""
Forward-only line cursor shared by the scanner and the table parsers
"""

from typing import Iterable, Iterator, Optional


class LineCursor:
    """Hands out lines one at a time, without line endings; never rewinds"""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self.line_no = 0

    def readline(self) -> Optional[str]:
        """Next line, or None once the input is exhausted"""
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        self.line_no += 1
        return line.rstrip("\r\n")
