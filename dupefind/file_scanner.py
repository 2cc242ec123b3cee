"""Locating the folder to scan and collecting the entries beneath it."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from dupefind.utilities import print_unicode

SKIPPED_EXTENSIONS = frozenset({".sys", ".log", ".tmp", ".bak", ".swp", ".dll"})
PROTECTED_DIRECTORIES = frozenset({"$recycle.bin", "system volume information"})
_SKIP_REPORT_LIMIT = 1000
_SKIP_ATTRIBUTES = (
    stat.FILE_ATTRIBUTE_SYSTEM
    | stat.FILE_ATTRIBUTE_ENCRYPTED
    | stat.FILE_ATTRIBUTE_HIDDEN
    | stat.FILE_ATTRIBUTE_REPARSE_POINT
)


class InvalidFolderError(ValueError):
    """The given text does not name an existing directory."""


def convert_to_path(text: str) -> Path:
    """Return the canonical path of the directory named by ``text``.

    Raises InvalidFolderError when it does not exist or is not a directory.
    """
    path = Path(text)
    try:
        if not text or not path.exists():
            raise InvalidFolderError(f"Error: Path does not exist: {path}")
        if not path.is_dir():
            raise InvalidFolderError(f"Error: Path is not a directory: {path}")
        return path.resolve(strict=True)
    except OSError as exc:
        raise InvalidFolderError(
            f"Filesystem error: {exc}\nFailed on path: {exc.filename or path}"
        ) from exc


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def get_all_files_and_directories(folder_path: str | os.PathLike[str]) -> list[Path]:
    """Walk ``folder_path`` depth first and return every entry not skipped.

    Recycle-bin and volume-information folders are left out with their
    contents; other skipped entries are left out but still descended into.
    Folders that cannot be read for lack of permission are passed over.
    """
    results: list[Path] = []
    try:
        stack = [iter(_sorted_entries(Path(folder_path)))]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            path = Path(entry.path)
            try:
                if entry.name.lower() in PROTECTED_DIRECTORIES:
                    continue
                if should_skip_file(path):
                    if len(results) < _SKIP_REPORT_LIMIT:
                        print_unicode("Skipping system file: ", entry.name, newline=True)
                else:
                    results.append(path)
                is_directory = entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                print_unicode("Failed to process: ", str(path), newline=True)
                print_unicode("Error processing entry: ", str(exc), newline=True)
                continue
            if is_directory:
                try:
                    stack.append(iter(_sorted_entries(path)))
                except PermissionError:
                    pass
    except OSError as exc:
        print_unicode("Error accessing directory: ", str(exc), newline=True)
    return results


def is_system_or_encrypted_file(file_path: str | os.PathLike[str]) -> bool:
    """Tell whether the entry is a system, encrypted, hidden or link entry.

    Where the platform reports no file attributes, dot-names count as hidden
    and symbolic links as reparse points. Unreadable entries count as plain.
    """
    path = Path(file_path)
    try:
        info = os.lstat(path)
    except OSError:
        return False
    attributes = getattr(info, "st_file_attributes", None)
    if attributes is not None:
        return bool(attributes & _SKIP_ATTRIBUTES)
    return stat.S_ISLNK(info.st_mode) or path.name.startswith(".")


def should_skip_file(file_path: str | os.PathLike[str]) -> bool:
    """Tell whether an entry is one the scan leaves out."""
    path = Path(file_path)
    if path.suffix.lower() in SKIPPED_EXTENSIONS:
        return True
    if is_system_or_encrypted_file(path):
        return True
    return path.name.lower() == "desktop.ini"