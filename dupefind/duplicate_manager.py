"""Choosing which duplicates to keep and removing the rest."""

from __future__ import annotations

import itertools
import os
import shutil
import sys
from datetime import datetime
from pathlib import Path
from typing import Mapping, Sequence
from urllib.parse import quote

from dupefind.input_handler import get_user_choice_range, get_user_confirmation
from dupefind.report_generator import write_deletion_log
from dupefind.utilities import format_file_size, print_unicode

PathLike = str | os.PathLike[str]
AUTO_SELECT = -1


def _report_error(*parts: object) -> None:
    print("".join(str(part) for part in parts), file=sys.stderr, flush=True)


def _trash_directory() -> Path:
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "Trash"


def _reserve_trash_name(files_dir: Path, info_dir: Path, name: str) -> tuple[str, Path]:
    """Claim a free name in the trash by creating its info file exclusively."""
    stem, suffix = os.path.splitext(name)
    candidates = itertools.chain([name], (f"{stem}.{n}{suffix}" for n in itertools.count(1)))
    for candidate in candidates:
        if os.path.lexists(files_dir / candidate):
            continue
        info_path = info_dir / f"{candidate}.trashinfo"
        try:
            with info_path.open("x", encoding="utf-8"):
                pass
        except FileExistsError:
            continue
        return candidate, info_path
    raise RuntimeError("unreachable")  # pragma: no cover


def _move_to_trash(path: Path) -> None:
    """Move ``path`` into the user's trash, recording where it came from."""
    trash = _trash_directory()
    files_dir = trash / "files"
    info_dir = trash / "info"
    files_dir.mkdir(parents=True, exist_ok=True)
    info_dir.mkdir(parents=True, exist_ok=True)

    original = path.absolute()
    name, info_path = _reserve_trash_name(files_dir, info_dir, original.name)
    info = (
        "[Trash Info]\n"
        f"Path={quote(str(original))}\n"
        f"DeletionDate={datetime.now().strftime('%Y-%m-%dT%H:%M:%S')}\n"
    )
    try:
        info_path.write_text(info, encoding="utf-8")
        shutil.move(str(original), str(files_dir / name))
    except OSError:
        info_path.unlink(missing_ok=True)
        raise


def select_best_file_to_keep(files: Sequence[PathLike]) -> Path:
    """Return the file with the shortest path; the earliest wins a tie.

    Raises ValueError when ``files`` is empty.
    """
    if not files:
        raise ValueError("no files to choose from")
    return Path(min(files, key=lambda file: len(str(file))))


def safe_delete_file(file_path: PathLike, use_recycle_bin: bool = True) -> bool:
    """Remove a file, by default moving it to the trash.

    Returns True on success; failures are reported on the console.
    """
    path = Path(file_path)
    if not path.exists():
        print_unicode("Can't delete file. File does not exist: ", str(path), newline=True)
        return False

    if use_recycle_bin:
        try:
            _move_to_trash(path)
        except OSError:
            print_unicode("Failed to move file to Recycle Bin: ", str(path), newline=True)
            return False
        return True

    try:
        path.unlink()
    except OSError as exc:
        print_unicode("Error deleting file: ", str(exc), newline=True)
        return False
    return True


def handle_duplicate_removal(duplicate_groups: Mapping[str, Sequence[PathLike]]) -> list[Path]:
    """Ask how to treat the duplicates and carry it out.

    Returns the files that were removed.
    """
    print_unicode("\n=== DUPLICATE REMOVAL OPTIONS ===", newline=True)
    print_unicode("Would you like to remove duplicate files?", newline=True)
    print_unicode("[1] Keep all files", newline=True)
    print_unicode("[2] Interactive removal", newline=True)
    print_unicode("[3] Automatic removal (keeps the file with the shortest path)", newline=True)

    choice = get_user_choice_range("Please enter your choice (1-3): ", 1, 3)
    if choice == 2:
        return interactive_removal(duplicate_groups)
    if choice == 3:
        return automatic_removal(duplicate_groups)
    print_unicode("Keeping all files. No duplicates will be removed.", newline=True)
    return []


def interactive_removal(duplicate_groups: Mapping[str, Sequence[PathLike]]) -> list[Path]:
    """Let the user pick the file to keep in each group; return those removed."""
    print_unicode("\n=== INTERACTIVE DUPLICATE REMOVAL ===", newline=True)
    print_unicode(
        "For each duplicate group, you can choose which files to keep/delete.", newline=True
    )
    print_unicode("Files will be moved to recycle bin for safety.\n", newline=True)

    total_deleted = 0
    total_size_deleted = 0
    deleted: list[Path] = []
    kept: list[Path] = []

    groups = [[Path(file) for file in files] for files in duplicate_groups.values()]
    for group_number, files in enumerate((g for g in groups if len(g) > 1), start=1):
        print_unicode(f"--- Duplicate Group #{group_number} ---", newline=True)

        file_size = 0
        try:
            file_size = files[0].stat().st_size
            print_unicode(f"File size: {format_file_size(file_size)}", newline=True)
        except OSError as exc:
            _report_error("Error getting file size: ", exc)

        for number, file in enumerate(files, start=1):
            print_unicode(f"  {number}. ", str(file), newline=True)

        print_unicode("\nOptions:", newline=True)
        print_unicode("[0] Keep all files in this group", newline=True)
        print_unicode(
            f"[1-{len(files)}] Keep only the selected file (delete all others)", newline=True
        )
        print_unicode("Press enter or enter -1 to auto-select (keep shortest path)", newline=True)

        choice = get_user_choice_range(
            "Please enter your choice: ", 0, len(files), True, AUTO_SELECT
        )
        if choice == 0:
            print_unicode("Keeping all files in this group.\n", newline=True)
            continue

        if choice == AUTO_SELECT:
            file_to_keep = select_best_file_to_keep(files)
            print_unicode("Auto-selected: ", str(file_to_keep), newline=True)
        else:
            file_to_keep = files[choice - 1]
            print_unicode("Keeping file: ", str(file_to_keep), newline=True)

        to_delete = [file for file in files if file != file_to_keep]
        print_unicode("\nFiles to be moved to Recycle Bin:", newline=True)
        for file in to_delete:
            print_unicode("  ", str(file), newline=True)

        if get_user_confirmation("Are you sure you want to continue? "):
            removed_here = [file for file in to_delete if safe_delete_file(file, True)]
            total_deleted += len(removed_here)
            total_size_deleted += file_size * len(removed_here)
            deleted.extend(removed_here)
            kept.append(file_to_keep)
            print_unicode(
                f"Successfully moved {len(removed_here)} files to Recycle Bin.", newline=True
            )
        else:
            print_unicode("Skipping deletion for this group.", newline=True)
        print_unicode("", newline=True)

    if deleted or kept:
        write_deletion_log(deleted, kept, "INTERACTIVE", total_deleted, total_size_deleted)
    return deleted


def automatic_removal(duplicate_groups: Mapping[str, Sequence[PathLike]]) -> list[Path]:
    """Keep the shortest path in every group and remove the rest after one confirmation.

    Returns the files that were removed.
    """
    print_unicode("\n=== AUTOMATIC DUPLICATE REMOVAL ===", newline=True)
    print_unicode(
        "This will automatically keep the file with the shortest path in each duplicate group.",
        newline=True,
    )
    print_unicode("All other duplicates will be moved to the Recycle Bin.", newline=True)

    to_delete: list[Path] = []
    to_keep: list[Path] = []
    for group in duplicate_groups.values():
        files = [Path(file) for file in group]
        if len(files) <= 1:
            continue
        file_to_keep = select_best_file_to_keep(files)
        to_keep.append(file_to_keep)
        to_delete.extend(file for file in files if file != file_to_keep)

    if not to_delete:
        print_unicode("No files to delete.", newline=True)
        return []

    print_unicode("\nFiles to be kept (shortest paths):", newline=True)
    for file in to_keep:
        print_unicode("  KEEP: ", str(file), newline=True)
    print_unicode("\nFiles to be moved to Recycle Bin:", newline=True)
    for file in to_delete:
        print_unicode("  DELETE: ", str(file), newline=True)
    print_unicode(f"\nTotal files to delete: {len(to_delete)}", newline=True)

    if not get_user_confirmation("Are you sure you want to continue? (Y/n): "):
        print_unicode("Aborting automatic removal.", newline=True)
        return []

    removed: list[Path] = []
    total_size_deleted = 0
    for file in to_delete:
        try:
            file_size = file.stat().st_size
            if safe_delete_file(file, True):
                removed.append(file)
                total_size_deleted += file_size
                print_unicode("Moved to Recycle Bin: ", str(file), newline=True)
        except OSError as exc:
            _report_error("Error deleting file: ", file, ": ", exc)
        except Exception as exc:  # one bad file must not stop the rest
            _report_error("Unexpected error deleting file: ", file, ": ", exc)

    write_deletion_log(to_delete, to_keep, "AUTOMATIC", len(removed), total_size_deleted)
    return removed