"""Command-line entry point: scan a folder, report duplicates, offer removal."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dupefind.duplicate_manager import handle_duplicate_removal
from dupefind.file_scanner import (
    InvalidFolderError,
    convert_to_path,
    get_all_files_and_directories,
)
from dupefind.hash_calculator import group_files_by_hash
from dupefind.input_handler import get_user_input
from dupefind.report_generator import process_duplicate_groups, reset_log_files, write_scan_log
from dupefind.utilities import print_unicode

SCAN_LOG_LIMIT = 1000


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dupefind", description="Find duplicate files in a directory."
    )
    parser.add_argument("folder", nargs="?", help="folder to scan; asked for when left out")
    return parser.parse_args(argv)


def _ask_for_folder(initial: str | None) -> Path:
    candidate = initial
    while True:
        if candidate is None:
            candidate = get_user_input("Enter folder path to scan: ")
        try:
            return convert_to_path(candidate)
        except InvalidFolderError as exc:
            print_unicode(str(exc), newline=True)
            print_unicode("Please enter a valid folder path: ", newline=True)
            candidate = None


def _run(folder_arg: str | None) -> None:
    folder = _ask_for_folder(folder_arg)

    found = get_all_files_and_directories(folder)
    print_unicode(
        f"\nScan completed. Found {len(found)} files and directories in: ", str(folder),
        newline=True,
    )
    write_scan_log(found, folder, SCAN_LOG_LIMIT)
    print_unicode("You can read about the found files in the log!", newline=True)

    print_unicode("\nChecking for duplicate files...", newline=True)
    groups = group_files_by_hash(found)
    if process_duplicate_groups(groups) > 0:
        handle_duplicate_removal(groups)


def main(argv: list[str] | None = None) -> int:
    """Run one interactive scan; returns the process exit status."""
    args = _parse_args(argv)
    reset_log_files()
    print_unicode("DupeFind is ready!", newline=True)

    try:
        _run(args.folder)
    except EOFError:
        print_unicode("\nInput ended before the scan was finished.", newline=True)
        return 1

    print_unicode("\nPress enter to exit...")
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())