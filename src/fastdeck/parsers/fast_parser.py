"""
FAST input deck parser

Reads a deck in one forward pass:

1. ``hdr_lines`` header lines are read (and kept, unless appending to an
   existing document).
2. Every following line is tokenized into a scalar record. Comment lines are
   dropped. A record whose value or label is a trigger token hands the cursor
   to a table parser sized by an earlier scalar. Other records go to the
   label index.
3. The first line mentioning OutList starts the output list, which is the last
   section read. End of input also ends the scan.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from ..config import load_table_triggers
from ..core.errors import EmptyOutputList, StreamOpenFailure
from ..core.label_index import LabelIndex
from ..core.models import FastDocument, RawRecord
from ..core.triggers import TableTrigger, TriggerTable
from ..utils.logging import FastDeckLogger
from .cursor import LineCursor
from .line_tokenizer import LineTokenizer
from .table_parsers import (
    parse_file_list,
    parse_mixed_table,
    parse_numeric_table,
    parse_output_list,
)

Tokenizer = Callable[[str], RawRecord]


class FastParser:
    """Parse FAST input decks into FastDocument"""

    OUTLIST_TOKEN = "OUTLIST"

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        triggers: Optional[Union[TriggerTable, Iterable[TableTrigger]]] = None,
    ):
        self.tokenizer = tokenizer or LineTokenizer()
        if triggers is None:
            triggers = load_table_triggers()
        if not isinstance(triggers, TriggerTable):
            triggers = TriggerTable(triggers)
        self.triggers = triggers

    def parse_file(
        self,
        filepath: Union[str, Path],
        hdr_lines: int = 0,
        document: Optional[FastDocument] = None,
        encoding: str = "latin-1",
    ) -> FastDocument:
        """Parse a deck file

        Args:
            filepath: Deck to read
            hdr_lines: Number of leading lines to treat as header
            document: Existing document to append into (header lines are then skipped, not stored)
            encoding: Text encoding of the deck

        Raises:
            StreamOpenFailure: If the file cannot be opened or read
            UnresolvedReference: If a table's size parameter is missing or not numeric
        """
        try:
            f = open(filepath, encoding=encoding)
        except OSError as e:
            raise StreamOpenFailure(str(filepath), e.strerror or str(e)) from e

        with f:
            try:
                return self.parse_lines(f, hdr_lines, document, source=str(filepath))
            except (OSError, UnicodeDecodeError) as e:
                raise StreamOpenFailure(str(filepath), str(e)) from e

    def parse(
        self, content: str, hdr_lines: int = 0, document: Optional[FastDocument] = None
    ) -> FastDocument:
        """Parse deck content held in a string"""
        return self.parse_lines(content.splitlines(), hdr_lines, document)

    def parse_lines(
        self,
        lines: Iterable[str],
        hdr_lines: int = 0,
        document: Optional[FastDocument] = None,
        source: str = "<string>",
    ) -> FastDocument:
        """Parse any iterable of lines (an open file, a list of strings, ...)"""
        if hdr_lines < 0:
            raise ValueError(f"hdr_lines must be non-negative, got {hdr_lines}")

        appending = document is not None
        if appending:
            index = LabelIndex.from_document(document)
        else:
            index = LabelIndex()

        # Results of this input; merged into ``document`` only after a clean scan
        scan = FastDocument()

        FastDeckLogger.info(f"Reading {source}" + (" (appending)" if appending else ""))
        cursor = LineCursor(lines)

        for _ in range(hdr_lines):
            line = cursor.readline()
            if line is None:
                break
            if not appending:
                scan.hdr_lines.append(line)

        while True:
            line = cursor.readline()
            if line is None:
                break

            if self.OUTLIST_TOKEN in line.upper():
                FastDeckLogger.debug(f"OutList starts at line {cursor.line_no}")
                scan.out_list = parse_output_list(cursor)
                if not scan.out_list.entries:
                    scan.warnings.append(
                        EmptyOutputList(f"{source}: no outputs found in OutList")
                    )
                break

            record = self.tokenizer(line)
            if record.is_comment:
                continue

            trigger = self.triggers.match(record.value, record.label)
            if trigger is not None:
                self._read_table(trigger, line, cursor, index, scan)
            else:
                index.record(record.label, record.value)

        scan.labels = index.labels
        scan.values = index.values
        scan.sources.append(source)

        FastDeckLogger.info(
            f"Read {len(index)} parameters and {len(scan.tables) + len(scan.file_lists)}"
            f" tables from {source}"
        )
        if not appending:
            return scan

        _merge_into(document, scan)
        return document

    def _read_table(
        self,
        trigger: TableTrigger,
        line: str,
        cursor: LineCursor,
        index: LabelIndex,
        document: FastDocument,
    ) -> None:
        n_rows = index.lookup_count(trigger.size)
        FastDeckLogger.debug(
            f"Line {cursor.line_no}: {trigger.target} ({trigger.kind}), "
            f"{n_rows} rows from {trigger.size}"
        )

        if trigger.kind == "numeric":
            document.tables[trigger.target] = parse_numeric_table(line, cursor, n_rows)
        elif trigger.kind == "mixed":
            document.tables[trigger.target] = parse_mixed_table(
                line, cursor, n_rows, units_line=trigger.units_line
            )
        elif trigger.kind == "file_list":
            document.file_lists[trigger.target] = parse_file_list(line, cursor, n_rows)
        else:
            raise ValueError(f"Unknown table kind {trigger.kind!r} for {trigger.token}")


def _merge_into(document: FastDocument, scan: FastDocument) -> None:
    """Fold a completed appending scan into the caller's document"""
    document.labels = scan.labels
    document.values = scan.values
    document.tables.update(scan.tables)
    document.file_lists.update(scan.file_lists)
    if scan.out_list is not None:
        document.out_list = scan.out_list
    document.warnings.extend(scan.warnings)
    document.sources.extend(scan.sources)
