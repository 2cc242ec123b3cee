import io
import sys

import pytest

from dupefind.cli import main
from dupefind.report_generator import DELETION_LOG, DUPLICATE_LOG, SCAN_LOG


@pytest.fixture
def setup(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    folder = tmp_path / "scan"
    folder.mkdir()
    (folder / "a.txt").write_bytes(b"duplicate body")
    (folder / "b.txt").write_bytes(b"duplicate body")
    (folder / "c.txt").write_bytes(b"unique body")
    return {"work": work, "folder": folder, "trash": tmp_path / "data" / "Trash"}


def feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def read(path):
    return path.read_bytes().decode("utf-16")


def test_keep_all_writes_reports(setup, monkeypatch, capsys):
    feed(monkeypatch, f"{setup['folder']}\n1\n\n")
    assert main([]) == 0
    assert all((setup["folder"] / name).exists() for name in ("a.txt", "b.txt", "c.txt"))
    duplicate_log = read(setup["work"] / DUPLICATE_LOG)
    assert "Total duplicate groups found: 1" in duplicate_log
    assert "=== DUPEFIND SCAN RESULTS ===" in read(setup["work"] / SCAN_LOG)
    out = capsys.readouterr().out
    assert "DupeFind is ready!" in out
    assert "Found 3 files and directories in: " in out


def test_automatic_removal_moves_duplicate(setup, monkeypatch):
    feed(monkeypatch, f"{setup['folder']}\n3\ny\n\n")
    assert main([]) == 0
    assert (setup["folder"] / "a.txt").exists()
    assert not (setup["folder"] / "b.txt").exists()
    assert (setup["trash"] / "files" / "b.txt").read_bytes() == b"duplicate body"
    assert "=== AUTOMATIC REMOVAL ===" in read(setup["work"] / DELETION_LOG)


def test_invalid_folder_is_asked_again(setup, monkeypatch, capsys):
    missing = setup["folder"] / "nowhere"
    feed(monkeypatch, f"{missing}\n{setup['folder']}\n1\n\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please enter a valid folder path: " in out
    assert "Error: Path does not exist: " in out


def test_folder_given_as_argument(setup, monkeypatch, capsys):
    feed(monkeypatch, "1\n\n")
    assert main([str(setup["folder"])]) == 0
    assert "Enter folder path to scan: " not in capsys.readouterr().out


def test_no_duplicates(tmp_path, setup, monkeypatch, capsys):
    (setup["folder"] / "b.txt").write_bytes(b"other body")
    feed(monkeypatch, f"{setup['folder']}\n\n")
    assert main([]) == 0
    assert "No duplicate files found." in capsys.readouterr().out
    assert not (setup["work"] / DELETION_LOG).exists()


def test_input_ending_early_fails(setup, monkeypatch):
    feed(monkeypatch, "")
    assert main([]) == 1


def test_old_logs_are_reset(setup, monkeypatch):
    stale = setup["work"] / DELETION_LOG
    stale.write_text("stale")
    feed(monkeypatch, f"{setup['folder']}\n1\n\n")
    assert main([]) == 0
    assert not stale.exists()