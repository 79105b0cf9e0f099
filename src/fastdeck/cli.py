#!/usr/bin/env python3
"""
fastdeck CLI
Command-line interface for inspecting FAST input decks
"""

import argparse
import logging
from pathlib import Path

from . import FastParser, NumberCell, NumericTable
from .core.errors import FastDeckError
from .utils.logging import FastDeckLogger


def _print_tables(doc) -> None:
    for name, table in doc.tables.items():
        kind = "numeric" if isinstance(table, NumericTable) else "mixed"
        status = "" if table.is_complete else f" (expected {table.requested_rows})"
        print(f"\n[{name}] {kind}, {table.n_rows} x {table.n_cols}{status}")
        print("  " + "  ".join(table.headers))
        for row in table.rows:
            print("  " + "  ".join(_format_cell(cell) for cell in row))

    for name, file_list in doc.file_lists.items():
        print(f"\n[{name}] {len(file_list.entries)} files")
        for entry in file_list.entries:
            print(f"  {entry}")


def _format_cell(cell) -> str:
    if isinstance(cell, NumberCell):
        cell = cell.value
    if isinstance(cell, float):
        return f"{cell:g}"
    return cell.text


def _non_negative_int(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {text!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {count}")
    return count


def main(argv=None):
    """Print a summary of a FAST input deck, or look up parameters"""
    parser = argparse.ArgumentParser(
        prog="fastdeck",
        description="Read a FAST input deck and show its parameters, tables and outputs.",
    )
    parser.add_argument("input", help="Input deck (.fst, .dat, .ipt, ...)")
    parser.add_argument(
        "--hdr-lines", type=_non_negative_int, default=0, metavar="N", help="Header lines at the top (default: 0)"
    )
    parser.add_argument(
        "--get", action="append", default=[], metavar="LABEL", help="Print one parameter value"
    )
    parser.add_argument("--tables", action="store_true", help="Print the tables in full")
    parser.add_argument("--outlist", action="store_true", help="Print the OutList entries")
    parser.add_argument("--encoding", default="latin-1", help="Text encoding (default: latin-1)")
    parser.add_argument("--no-log", action="store_true", help="Do not write a log file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log table dispatch details")

    args = parser.parse_args(argv)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: input file {input_path} does not exist")
        return 1

    log_level = logging.DEBUG if args.verbose else logging.INFO
    FastDeckLogger.setup_logger(str(input_path), log_level=log_level, to_file=not args.no_log)

    try:
        doc = FastParser().parse_file(input_path, hdr_lines=args.hdr_lines, encoding=args.encoding)

        if args.get:
            status = 0
            for label in args.get:
                try:
                    print(f"{label} = {doc.get_par(label)}")
                except KeyError:
                    FastDeckLogger.error(f"Parameter {label} not found")
                    status = 1
            return status

        for line in doc.hdr_lines:
            print(line)
        print(f"{len(doc.labels)} parameters")
        for label, value in doc.items():
            print(f"  {label:<16} {value}")

        if args.tables:
            _print_tables(doc)
        else:
            for name, table in doc.tables.items():
                print(f"[{name}] {table.n_rows} rows x {table.n_cols} columns")
            for name, file_list in doc.file_lists.items():
                print(f"[{name}] {len(file_list.entries)} files")

        if doc.out_list is not None:
            print(f"OutList: {len(doc.out_list)} variables")
            if args.outlist:
                for entry in doc.out_list.entries:
                    print(f"  {entry.name}{entry.comment}")

        for warning in doc.warnings:
            FastDeckLogger.warning(str(warning))

        FastDeckLogger.success(f"Read {input_path.name}")

    except FastDeckError as e:
        FastDeckLogger.error(f"Error reading {input_path}: {e}")
        return 1
    finally:
        log_path = FastDeckLogger.get_log_file_path()
        if log_path:
            print(f"\nLog file: {log_path}")
        FastDeckLogger.cleanup()

    return 0


if __name__ == "__main__":
    exit(main())
