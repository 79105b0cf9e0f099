"""
fastdeck Public API

High-level functions for reading FAST input decks from other projects.
"""

from pathlib import Path
from typing import Optional, Union

from .core.label_index import LabelIndex
from .core.models import FastDocument
from .parsers.fast_parser import FastParser


def read_fast_file(
    filepath: Union[str, Path],
    hdr_lines: int = 0,
    document: Optional[FastDocument] = None,
    encoding: str = "latin-1",
) -> FastDocument:
    """
    Read a FAST input deck into a FastDocument.

    Args:
        filepath: Path to the deck (.fst, .dat, .ipt, ...)
        hdr_lines: Number of lines at the top to treat as header (default 0)
        document: Existing document to append this deck's records into
        encoding: Text encoding of the deck (default latin-1)

    Returns:
        The parsed document (``document`` itself when appending)

    Example:
        import fastdeck

        fst = fastdeck.read_fast_file("Test01.fst", hdr_lines=2)
        tip_rad = fastdeck.get_fast_par(fst, "TipRad")

        # Merge the platform file into the same document
        fastdeck.read_fast_file("Platform.dat", hdr_lines=3, document=fst)
    """
    parser = FastParser()
    return parser.parse_file(filepath, hdr_lines=hdr_lines, document=document, encoding=encoding)


def parse_fast(content: str, hdr_lines: int = 0) -> FastDocument:
    """Parse deck content held in a string"""
    parser = FastParser()
    return parser.parse(content, hdr_lines=hdr_lines)


def get_fast_par(document: FastDocument, name: str) -> float:
    """
    Numeric value of the first parameter labelled ``name`` (case-insensitive).

    Raises:
        UnresolvedReference: If the label is missing or its value is not numeric
    """
    return LabelIndex.from_document(document).lookup(name)
