"""
Table and list parsers for FAST input decks

Each parser is handed the line that triggered it (the table header, or the
first file name) and the shared cursor, and reads the rest of its block from
that cursor. Row counts come from the LabelIndex; nothing in the file marks
where a table ends.

Running out of input, or hitting a line that does not fit the table, stops a
parser quietly. The table it returns then holds fewer rows than requested and
``is_complete`` is False. Callers that need strict tables check that flag.
"""

from typing import List, Optional

from ..core.models import (
    Cell,
    FileList,
    MixedTable,
    NumberCell,
    NumericTable,
    OutputEntry,
    OutputList,
    TextCell,
)
from ..utils.logging import FastDeckLogger
from ..utils.numbers import to_float
from .cursor import LineCursor
from .line_tokenizer import first_token, split_tokens, unquote


def parse_numeric_table(header_line: str, cursor: LineCursor, n_rows: int) -> NumericTable:
    """Read a units line and up to ``n_rows`` rows of floats"""
    table = NumericTable(headers=header_line.split(), requested_rows=n_rows)
    nc = table.n_cols

    cursor.readline()  # units line

    while table.n_rows < n_rows:
        line = cursor.readline()
        if line is None:
            break
        row = _numeric_row(line, nc)
        if row is None:
            FastDeckLogger.debug(
                f"Line {cursor.line_no} is not a row of {nc} numbers; table stops here"
            )
            break
        table.rows.append(row)

    _report_short(table.headers, table.n_rows, n_rows)
    return table


def parse_mixed_table(
    header_line: str, cursor: LineCursor, n_rows: int, units_line: bool = True
) -> MixedTable:
    """Read up to ``n_rows`` rows whose cells are numbers or raw text"""
    table = MixedTable(headers=header_line.split(), requested_rows=n_rows)
    nc = table.n_cols

    if units_line:
        cursor.readline()

    while table.n_rows < n_rows:
        line = cursor.readline()
        if line is None:
            break
        tokens = split_tokens(line, limit=nc)
        if len(tokens) < nc:
            break
        table.rows.append([_cell(token) for token in tokens])

    _report_short(table.headers, table.n_rows, n_rows)
    return table


def parse_file_list(first_line: str, cursor: LineCursor, n_rows: int) -> FileList:
    """Collect the first token of the current line and of the next n-1 lines"""
    file_list = FileList(requested_rows=n_rows)
    line = first_line

    while len(file_list.entries) < n_rows:
        if line is None:
            break
        token, _ = first_token(line)
        if token is None:
            break
        file_list.entries.append(token)
        if len(file_list.entries) < n_rows:
            line = cursor.readline()

    if not file_list.is_complete:
        FastDeckLogger.warning(
            f"File list ended after {len(file_list.entries)} of {n_rows} entries"
        )
    return file_list


def parse_output_list(cursor: LineCursor) -> OutputList:
    """Read OutList entries until a line starting with END or the end of input"""
    out_list = OutputList()

    while True:
        line = cursor.readline()
        if line is None:
            break
        token, end = first_token(line)
        if token is None:  # blank lines are allowed inside the list
            continue

        name = unquote(token)
        if name.upper().startswith("END"):
            break

        comment = line[end:] if end < len(line) else " "
        out_list.entries.append(OutputEntry(name=f'"{name}"', comment=comment))

    if not out_list.entries:
        FastDeckLogger.warning("No outputs found in OutList")
    return out_list


def _numeric_row(line: str, nc: int) -> Optional[List[float]]:
    tokens = line.split()
    if len(tokens) < nc:
        return None
    row = []
    for token in tokens[:nc]:
        number = to_float(token)
        if number is None:
            return None
        row.append(number)
    return row


def _cell(token: str) -> Cell:
    number = to_float(token)
    if number is None:
        return TextCell(token)
    return NumberCell(number)


def _report_short(headers: List[str], got: int, wanted: int) -> None:
    if got < wanted:
        name = headers[0] if headers else "?"
        FastDeckLogger.warning(f"Table {name} has {got} of {wanted} rows")
