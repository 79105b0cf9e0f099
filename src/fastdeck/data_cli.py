#!/usr/bin/env python3
"""CLI utility for managing fastdeck data files (table trigger overrides)"""

import argparse
import sys

from .config import TRIGGERS_FILE, get_data_manager, load_table_triggers


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="fastdeck-data", description="Manage fastdeck configuration data files"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show data file locations")
    subparsers.add_parser("path", help="Show user data directory path")
    subparsers.add_parser("triggers", help="List the table triggers in effect")

    reset_parser = subparsers.add_parser("reset", help="Reset data files to defaults")
    reset_parser.add_argument("--file", help=f"Specific file to reset (e.g., {TRIGGERS_FILE})")
    reset_parser.add_argument("--all", action="store_true", help="Reset all files")

    copy_parser = subparsers.add_parser(
        "copy", help="Copy package file to user directory for editing"
    )
    copy_parser.add_argument("file", help=f"File to copy (e.g., {TRIGGERS_FILE})")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    dm = get_data_manager()

    if args.command == "info":
        info = dm.get_data_info()
        print(f"\nPackage data directory:\n   {info['package_data_dir']}")
        print(f"\nUser data directory:\n   {info['user_data_dir']}")

        if info["user_files"]:
            print("\nUser files (override defaults):")
            for file in info["user_files"]:
                print(f"   • {file}")
        else:
            print("\nUser files: None")

        if info["package_files"]:
            print("\nPackage files (defaults):")
            for file in info["package_files"]:
                override = " (overridden)" if file in info["user_files"] else ""
                print(f"   • {file}{override}")

        print("\nTip: use 'fastdeck-data copy <file>' to copy a default file for editing")

    elif args.command == "path":
        print(dm.user_data_dir)

    elif args.command == "triggers":
        for trigger in load_table_triggers(dm):
            print(
                f"{trigger.match:<5} {trigger.token:<14} -> {trigger.target:<9} "
                f"{trigger.kind:<9} rows from {trigger.size}"
            )

    elif args.command == "reset":
        if args.file:
            removed = dm.reset_to_defaults(args.file)
        elif args.all:
            removed = dm.reset_to_defaults()
        else:
            print("Specify --file <filename> or --all")
            return 1
        print(f"Removed {removed} user file(s)")

    elif args.command == "copy":
        success = dm.copy_package_to_user(args.file)
        if success:
            print(f"You can now edit: {dm.user_data_dir / args.file}")
        else:
            print(f"Could not copy {args.file} (unknown file, or a user copy already exists)")
        return 0 if success else 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
