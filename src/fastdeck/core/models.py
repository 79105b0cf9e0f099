"""
Data models for fastdeck

This module contains the dataclasses representing a parsed FAST input deck.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Union

from .errors import EmptyOutputList


class FieldType(Enum):
    """Kind of value found on a scalar record line"""
    NUMERIC = "numeric"
    LOGICAL = "logical"
    CHARACTER = "character"
    COMMENT = "comment"


@dataclass
class RawRecord:
    """One tokenized scalar line: value, label and trailing description"""
    value: str
    label: str
    is_comment: bool
    descr: str = ""
    field_type: FieldType = FieldType.CHARACTER


@dataclass(frozen=True)
class NumberCell:
    """Mixed table cell that converted to a float"""
    value: float


@dataclass(frozen=True)
class TextCell:
    """Mixed table cell kept as raw text"""
    text: str


Cell = Union[NumberCell, TextCell]


@dataclass
class NumericTable:
    """Header names plus a rectangular matrix of floats"""
    headers: List[str]
    rows: List[List[float]] = field(default_factory=list)
    requested_rows: int = 0

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.headers)

    @property
    def is_complete(self) -> bool:
        """False when the input ended (or broke) before all rows were read"""
        return self.n_rows == self.requested_rows

    def column(self, header: str) -> List[float]:
        """Return one column by header name (case-insensitive)"""
        idx = _header_index(self.headers, header)
        return [row[idx] for row in self.rows]


@dataclass
class MixedTable:
    """Like NumericTable, but every cell is a NumberCell or a TextCell"""
    headers: List[str]
    rows: List[List[Cell]] = field(default_factory=list)
    requested_rows: int = 0

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.headers)

    @property
    def is_complete(self) -> bool:
        return self.n_rows == self.requested_rows

    def column(self, header: str) -> List[Cell]:
        idx = _header_index(self.headers, header)
        return [row[idx] for row in self.rows]


Table = Union[NumericTable, MixedTable]


@dataclass
class FileList:
    """Ordered file names, one per expected row (no headers)"""
    entries: List[str] = field(default_factory=list)
    requested_rows: int = 0

    @property
    def is_complete(self) -> bool:
        return len(self.entries) == self.requested_rows


@dataclass(frozen=True)
class OutputEntry:
    """One OutList variable with whatever followed it on the line"""
    name: str      # always wrapped in double quotes: "Wind1VelX"
    comment: str   # rest of the line, or a single space


@dataclass
class OutputList:
    """The trailing OutList section, terminated by END or end of input"""
    entries: List[OutputEntry] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    @property
    def comments(self) -> List[str]:
        return [entry.comment for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class FastDocument:
    """Complete parsed input deck"""
    hdr_lines: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    values: List[str] = field(default_factory=list)
    tables: Dict[str, Table] = field(default_factory=dict)  # TowProp, BldProp, DLLProp, BldNodes
    file_lists: Dict[str, FileList] = field(default_factory=dict)  # FoilNm
    out_list: Optional[OutputList] = None  # None: no OutList section at all
    warnings: List[EmptyOutputList] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)

    @property
    def foil_names(self) -> Optional[FileList]:
        return self.file_lists.get("FoilNm")

    def items(self) -> Iterator[Tuple[str, str]]:
        """Label/value pairs in file order"""
        return iter(zip(self.labels, self.values))

    def get_par(self, name: str) -> str:
        """Raw text value of the first record labelled ``name`` (case-insensitive)

        Raises:
            KeyError: If no record carries that label
        """
        wanted = name.lower()
        for label, value in self.items():
            if label.lower() == wanted:
                return value
        raise KeyError(name)


def _header_index(headers: List[str], header: str) -> int:
    wanted = header.strip('"').lower()
    for idx, name in enumerate(headers):
        if name.strip('"').lower() == wanted:
            return idx
    raise KeyError(header)
