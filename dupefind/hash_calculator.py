"""Content hashing and grouping of files by their SHA-256 digest."""

from __future__ import annotations

import hashlib
import os
from collections import defaultdict
from pathlib import Path
from typing import Iterable

from dupefind.utilities import print_unicode

EMPTY_FILE_HASH = "empty_file"
MAX_FILE_SIZE = 2 * 1024 * 1024 * 1024
CHUNK_SIZE = 64 * 1024
_PROGRESS_EVERY = 100


def calculate_sha256(file_path: str | os.PathLike[str]) -> str | None:
    """Return the hex SHA-256 digest of a file.

    Missing and empty files give ``EMPTY_FILE_HASH``. Files that cannot be
    opened or are larger than ``MAX_FILE_SIZE`` give None.
    """
    path = Path(file_path)
    if not path.exists():
        return EMPTY_FILE_HASH

    print_unicode("Calculating hash for file: ", str(path), newline=True)

    try:
        handle = path.open("rb")
    except OSError as exc:
        print_unicode(
            "Error opening file: ", str(path), " (Error code: ", str(exc.errno), ")",
            newline=True,
        )
        return None

    with handle:
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError:
            print_unicode("Error getting file size: ", str(path), newline=True)
            return None
        if size == 0:
            return EMPTY_FILE_HASH
        if size > MAX_FILE_SIZE:
            print_unicode("Skipping large file (>2GB): ", str(path), newline=True)
            return None

        digest = hashlib.sha256()
        try:
            for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
                digest.update(chunk)
        except OSError as exc:
            print_unicode("Error reading file: ", str(path), ": ", str(exc), newline=True)
            return None
    return digest.hexdigest()


def group_files_by_hash(files: Iterable[str | os.PathLike[str]]) -> dict[str, list[Path]]:
    """Group the regular files among ``files`` by content hash.

    Keys come in sorted order; files keep their input order within a group.
    Files that cannot be hashed are left out.
    """
    regular = [Path(file) for file in files if Path(file).is_file()]
    total = len(regular)
    print_unicode(f"Processing {total} files for duplicate detection...", newline=True)

    groups: defaultdict[str, list[Path]] = defaultdict(list)
    for processed, file in enumerate(regular, start=1):
        try:
            if total <= _PROGRESS_EVERY or processed % _PROGRESS_EVERY == 0:
                print_unicode(
                    "Progress: ", str(processed), "/", str(total), " - ", str(file),
                    newline=True,
                )
            digest = calculate_sha256(file)
            if digest:
                groups[digest].append(file)
        except Exception as exc:  # keep scanning past any single bad file
            print_unicode("Error processing file ", str(file), str(exc), newline=True)

    print_unicode("Finished processing files.", newline=True)
    return dict(sorted(groups.items()))