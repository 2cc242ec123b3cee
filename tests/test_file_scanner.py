import pytest

from dupefind.file_scanner import (
    InvalidFolderError,
    convert_to_path,
    get_all_files_and_directories,
    is_system_or_encrypted_file,
    should_skip_file,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.log").write_text("b")
    (tmp_path / "Desktop.ini").write_text("ini")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c")
    nested = sub / "deeper"
    nested.mkdir()
    (nested / "d.bin").write_bytes(b"d")
    recycle = tmp_path / "$RECYCLE.BIN"
    recycle.mkdir()
    (recycle / "gone.txt").write_text("x")
    skipped_dir = tmp_path / "old.bak"
    skipped_dir.mkdir()
    (skipped_dir / "inside.txt").write_text("i")
    return tmp_path


def test_convert_to_path_returns_resolved_directory(tmp_path):
    assert convert_to_path(str(tmp_path)) == tmp_path.resolve()


def test_convert_to_path_missing(tmp_path):
    with pytest.raises(InvalidFolderError, match="does not exist"):
        convert_to_path(str(tmp_path / "nope"))


def test_convert_to_path_empty_text():
    with pytest.raises(InvalidFolderError, match="does not exist"):
        convert_to_path("")


def test_convert_to_path_file(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    with pytest.raises(InvalidFolderError, match="not a directory"):
        convert_to_path(str(target))


def test_scan_collects_expected_entries(tree):
    found = set(get_all_files_and_directories(tree))
    expected = {
        tree / "a.txt",
        tree / "sub",
        tree / "sub" / "c.txt",
        tree / "sub" / "deeper",
        tree / "sub" / "deeper" / "d.bin",
        tree / "old.bak" / "inside.txt",
    }
    assert found == expected


def test_scan_is_depth_first_and_sorted(tree):
    found = get_all_files_and_directories(tree)
    sub_index = found.index(tree / "sub")
    assert found[sub_index + 1] == tree / "sub" / "c.txt"
    assert found.index(tree / "a.txt") < sub_index


def test_scan_reports_skipped_files(tree, capsys):
    get_all_files_and_directories(tree)
    out = capsys.readouterr().out
    assert "Skipping system file: b.log" in out
    assert "Skipping system file: Desktop.ini" in out
    assert "gone.txt" not in out


def test_scan_missing_folder(tmp_path, capsys):
    assert get_all_files_and_directories(tmp_path / "missing") == []
    assert "Error accessing directory" in capsys.readouterr().out


@pytest.mark.parametrize("name", ["x.SYS", "a.log", "b.tmp", "c.Bak", "d.swp", "e.dll", "desktop.ini"])
def test_should_skip_file_by_name(tmp_path, name):
    assert should_skip_file(tmp_path / name) is True


def test_should_not_skip_plain_file(tmp_path):
    target = tmp_path / "photo.jpg"
    target.write_bytes(b"x")
    assert should_skip_file(target) is False


def test_missing_file_is_not_system(tmp_path):
    assert is_system_or_encrypted_file(tmp_path / "missing.txt") is False


def test_plain_file_is_not_system(tmp_path):
    target = tmp_path / "plain.txt"
    target.write_text("x")
    assert is_system_or_encrypted_file(target) is False