# dupefind

An interactive console tool that scans a folder and finds duplicate files by
their SHA-256 content hash. It can then move the extra copies to the trash.

## Installation

```
pip install .
```

## Usage

```
dupefind [FOLDER]
```

If `FOLDER` is left out, or does not name an existing directory, dupefind
asks for one until it gets a valid folder.

1. The folder is walked recursively, in name order. Left out of the results are:
   - folders named `$RECYCLE.BIN` or `System Volume Information`, with everything in them
   - hidden, system, encrypted and link entries. Where the platform reports no
     file attributes, names starting with a dot count as hidden and symbolic
     links count as links.
   - `desktop.ini`
   - files with the extensions `.sys`, `.log`, `.tmp`, `.bak`, `.swp` and `.dll`

   A skipped folder other than the two named above is still descended into.
   Folders that cannot be read for lack of permission are passed over.
2. Every regular file is hashed. Empty files all share the hash `empty_file`
   and so form one group. Files larger than 2 GB and files that cannot be
   opened are left out.
3. If any group holds more than one file, a summary is printed: the number of
   groups, the number of extra copies and the space they take up. You are
   then offered three choices:
   - **Keep all files**: nothing is removed.
   - **Interactive removal**: for each group, enter `0` to keep every file,
     a number to keep only that file, or press enter (or `-1`) to keep the
     file with the shortest path. Each group's removal is confirmed first;
     an empty answer counts as yes.
   - **Automatic removal**: in every group the file with the shortest path is
     kept (the earliest one on a tie). All the others are removed after a
     single confirmation.

At the end dupefind waits for enter before exiting. If standard input ends
before the scan is finished, it exits with status 1.

## Where removed files go

Removed files are moved into the trash folder under `$XDG_DATA_HOME/Trash`,
or `~/.local/share/Trash` when that variable is unset. Each file is placed
in `files/`, with a `.trashinfo` record in `info/` holding its original path
and the time it was removed. Name clashes are resolved with a numeric suffix.
The same folder is used on every operating system. dupefind does not hand
files to the Windows Recycle Bin or the macOS Trash, and it has no command
for restoring files.

## Log files

dupefind writes three log files to the current directory and deletes any
left from an earlier run when it starts. They are written as UTF-16LE with a
byte-order mark.

- `scan_results.txt`: scan date, base folder, counts of files and folders,
  total size, and an indented tree of the entries found (up to 1000 entries)
- `duplicate_log.txt`: a summary followed by every duplicate group, with its
  hash, file size and paths
- `deletion_log.txt`: for each removal run, which files were kept and which
  were moved to the trash

## Library use

The building blocks can be imported directly:

```python
from dupefind.file_scanner import get_all_files_and_directories
from dupefind.hash_calculator import group_files_by_hash
from dupefind.duplicate_manager import select_best_file_to_keep
from dupefind.utilities import format_file_size

paths = get_all_files_and_directories("some/folder")
groups = group_files_by_hash(paths)
for digest, files in groups.items():
    if len(files) > 1:
        print(digest, "keep:", select_best_file_to_keep(files))

print(format_file_size(1536))  # "1.50 KB"
```

- `dupefind.file_scanner.convert_to_path` resolves a folder name and raises
  `InvalidFolderError` when the folder is missing or is not a directory.
- `dupefind.hash_calculator.calculate_sha256` returns a hex digest, or
  `None` for files that cannot be hashed.
- `dupefind.duplicate_manager.safe_delete_file(path, use_recycle_bin)`
  moves a file to the trash or, with `use_recycle_bin=False`, deletes it.
  It returns whether this succeeded.
- `dupefind.report_generator` writes the three log files described above.

## Running the tests

```
pip install .[test]
pytest
```