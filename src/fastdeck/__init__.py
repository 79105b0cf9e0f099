"""
fastdeck - Reader for FAST wind turbine simulation input decks

Parses the line-oriented "value  label  - description" input files of FAST,
AeroDyn and ServoDyn, including the embedded tower, blade, DLL and blade node
tables, the airfoil file list and the trailing OutList section.
"""

__version__ = "1.0.0"

from .api import get_fast_par, parse_fast, read_fast_file
from .core.errors import EmptyOutputList, FastDeckError, StreamOpenFailure, UnresolvedReference
from .core.label_index import LabelIndex
from .core.models import (
    FastDocument,
    FieldType,
    FileList,
    MixedTable,
    NumberCell,
    NumericTable,
    OutputEntry,
    OutputList,
    RawRecord,
    TextCell,
)
from .core.triggers import DEFAULT_TRIGGERS, TableTrigger, TriggerTable
from .parsers.fast_parser import FastParser
from .parsers.line_tokenizer import LineTokenizer

# Public API
__all__ = [
    # Version
    "__version__",
    # Core models
    "FastDocument",
    "RawRecord",
    "FieldType",
    "NumericTable",
    "MixedTable",
    "NumberCell",
    "TextCell",
    "FileList",
    "OutputList",
    "OutputEntry",
    # Lookup
    "LabelIndex",
    # Triggers
    "TableTrigger",
    "TriggerTable",
    "DEFAULT_TRIGGERS",
    # Errors
    "FastDeckError",
    "StreamOpenFailure",
    "UnresolvedReference",
    "EmptyOutputList",
    # Parser and tokenizer
    "FastParser",
    "LineTokenizer",
    # Convenience functions
    "read_fast_file",
    "parse_fast",
    "get_fast_par",
]
