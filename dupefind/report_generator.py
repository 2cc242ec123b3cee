"""Log files describing a scan, its duplicate groups and any removals."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Mapping, Sequence

from dupefind.utilities import format_file_size, print_unicode, write_unicode_to_file

SCAN_LOG = "scan_results.txt"
DUPLICATE_LOG = "duplicate_log.txt"
DELETION_LOG = "deletion_log.txt"
LOG_FILES = (SCAN_LOG, DUPLICATE_LOG, DELETION_LOG)

PathLike = str | os.PathLike[str]


def process_duplicate_groups(duplicate_groups: Mapping[str, Sequence[PathLike]]) -> int:
    """Summarise the groups holding more than one file and write the duplicate log.

    Returns the number of such groups.
    """
    group_count = 0
    total_duplicate_files = 0
    total_duplicate_size = 0
    details: list[str] = []

    for digest, files in duplicate_groups.items():
        if len(files) <= 1:
            continue
        group_count += 1
        total_duplicate_files += len(files) - 1
        first = Path(files[0])
        try:
            file_size = first.stat().st_size
        except OSError as exc:
            print_unicode(f"Error getting file size for {first}: {exc}", newline=True)
            continue
        total_duplicate_size += file_size * (len(files) - 1)

        details.append(
            f"Duplicate group #{group_count} ({len(files)} files, "
            f"{format_file_size(file_size)} each)\n"
        )
        details.append(f"SHA-256: {digest}\n")
        details.extend(f"  {Path(file)}\n" for file in files)
        details.append("\n")

    content = ["=== DUPLICATE FILES ANALYSIS ===\n"]
    if group_count == 0:
        content.append("No duplicate files found.\n")
        print_unicode("No duplicate files found.", newline=True)
    else:
        wasted = format_file_size(total_duplicate_size)
        content.append("=== SUMMARY ===\n")
        content.append(f"Total duplicate groups found: {group_count}\n")
        content.append(f"Total duplicate files: {total_duplicate_files}\n")
        content.append(f"Total wasted space: {wasted}\n\n")

        print_unicode("\n=== SUMMARY ===", newline=True)
        print_unicode(f"Total duplicate groups found: {group_count}", newline=True)
        print_unicode(f"Total duplicate files: {total_duplicate_files}", newline=True)
        print_unicode(f"Total wasted space: {wasted}", newline=True)

    content.extend(details)
    write_unicode_to_file("".join(content), DUPLICATE_LOG, newline=False, append=False)
    print_unicode(f"Duplicate analysis written to: {DUPLICATE_LOG}", newline=True)
    return group_count


def _tree_entry(path: Path, base_path: Path) -> str:
    relative = Path(os.path.relpath(path, base_path))
    depth = len(relative.parts)
    indent = " " * ((depth - 1) * 2) if depth > 1 else ""
    entry = indent + path.name
    if path.is_file():
        try:
            entry += f" ({format_file_size(path.stat().st_size)})"
        except OSError:
            entry += " (size unknown)"
    elif path.is_dir():
        entry += "/"
    return entry


def write_scan_log(
    paths: Sequence[PathLike], base_path: PathLike, max_entries: int = 1000
) -> None:
    """Append a summary and an indented tree of ``paths`` to the scan log."""
    base = Path(base_path)
    entries = [Path(path) for path in paths]

    file_count = 0
    dir_count = 0
    total_size = 0
    for path in entries:
        try:
            if path.is_file():
                file_count += 1
                total_size += path.stat().st_size
            elif path.is_dir():
                dir_count += 1
        except OSError:
            pass

    header = [
        "=== DUPEFIND SCAN RESULTS ===\n",
        f"Scan Date: {get_current_timestamp()}\n",
        f"Base Directory: {base}\n",
        f"Total Files/Directories Found: {len(entries)}\n",
        "\n",
        "\n=== SUMMARY STATISTICS ===\n",
        f"Directories: {dir_count}\n",
        f"Files: {file_count}\n",
    ]
    if total_size > 0:
        header.append(f"Total Size: {format_file_size(total_size)}\n")
    header.append("\n")
    header.append(f"\n=== FILE TREE (limited to {max_entries} entries) ===\n")
    write_unicode_to_file("".join(header), SCAN_LOG)

    for written, path in enumerate(entries):
        if written >= max_entries:
            remaining = len(entries) - written
            write_unicode_to_file(
                f"... (file tree truncated, {remaining} more entries not shown)", SCAN_LOG
            )
            break
        try:
            line = _tree_entry(path, base)
        except (OSError, ValueError) as exc:
            line = f"Error processing: {path} - {exc}"
            print_unicode(line, newline=True)
        write_unicode_to_file(line, SCAN_LOG)

    print_unicode(f"Scan results written to: {SCAN_LOG}", newline=True)


def write_deletion_log(
    deleted_files: Sequence[PathLike],
    kept_files: Sequence[PathLike],
    removal_type: str,
    success_count: int,
    total_size_deleted: int,
) -> None:
    """Append a record of one removal run to the deletion log."""
    header = [
        f"=== {removal_type} REMOVAL ===\n",
        f"Timestamp: {get_current_timestamp()}\n",
        f"Total files processed: {len(deleted_files)}\n",
        f"Successfully deleted: {success_count}\n",
    ]
    if total_size_deleted > 0:
        header.append(f"Total space freed: {format_file_size(total_size_deleted)}\n")
    header.append("\n")
    write_unicode_to_file("".join(header), DELETION_LOG, newline=False, append=True)

    if kept_files:
        write_unicode_to_file("Files kept:", DELETION_LOG)
        for file in kept_files:
            write_unicode_to_file(f"  KEEP: {Path(file)}", DELETION_LOG)
        write_unicode_to_file("", DELETION_LOG)

    write_unicode_to_file("Files moved to Recycle Bin:", DELETION_LOG)
    for file in deleted_files:
        write_unicode_to_file(f"  DELETE: {Path(file)}", DELETION_LOG)
    write_unicode_to_file("", DELETION_LOG)

    print_unicode("\n=== REMOVAL SUMMARY ===", newline=True)
    print_unicode(f"Total files moved to Recycle Bin: {success_count}", newline=True)
    if total_size_deleted > 0:
        print_unicode(
            f"Total space freed: {format_file_size(total_size_deleted)}", newline=True
        )


def get_current_timestamp() -> str:
    """Return the local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def reset_log_files() -> None:
    """Delete the log files left by an earlier run, warning on failure."""
    for log_file in LOG_FILES:
        path = Path(log_file)
        if not path.exists():
            continue
        try:
            path.unlink()
        except OSError as exc:
            print_unicode(
                f"Warning: Could not delete old log file: {log_file} - {exc}", newline=True
            )