"""Console and file output helpers shared by the scanner and reports."""

from __future__ import annotations

import os
import sys
from pathlib import Path

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
_BOM = "\ufeff".encode("utf-16-le")


def format_file_size(num_bytes: int) -> str:
    """Render a byte count with two decimals and a binary unit (B to TB)."""
    size = float(num_bytes)
    unit = 0
    while size >= 1024.0 and unit < len(_SIZE_UNITS) - 1:
        size /= 1024.0
        unit += 1
    return f"{size:.2f} {_SIZE_UNITS[unit]}"


def print_unicode(*args: object, newline: bool = False) -> None:
    """Write the concatenation of ``args`` to standard output."""
    text = "".join(str(arg) for arg in args)
    if newline:
        text += "\n"
    sys.stdout.write(text)
    sys.stdout.flush()


def write_unicode_to_file(
    text: str,
    file_path: str | os.PathLike[str],
    newline: bool = True,
    append: bool = True,
) -> bool:
    """Write ``text`` as UTF-16LE, adding a BOM when the file starts empty.

    Lines end in CRLF. Returns False, after reporting on the console, when the
    file cannot be opened.
    """
    path = Path(file_path)
    try:
        with path.open("ab" if append else "wb") as handle:
            handle.seek(0, os.SEEK_END)
            if handle.tell() == 0:
                handle.write(_BOM)
            handle.write(text.encode("utf-16-le", errors="surrogatepass"))
            if newline:
                handle.write("\r\n".encode("utf-16-le"))
    except OSError:
        print_unicode("Error: Could not open file for writing: ", str(path), newline=True)
        return False
    return True