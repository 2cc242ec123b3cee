import pytest

from dupefind.utilities import format_file_size, print_unicode, write_unicode_to_file


@pytest.mark.parametrize(
    "num_bytes, expected",
    [(0, "0.00 B"), (1024, "1.00 KB"), (1536, "1.50 KB")],
)
def test_format_file_size_values(num_bytes, expected):
    assert format_file_size(num_bytes) == expected


@pytest.mark.parametrize(
    "num_bytes, unit",
    [(1, "B"), (1023, "B"), (1024**2, "MB"), (1024**3, "GB"), (1024**4, "TB")],
)
def test_format_file_size_units(num_bytes, unit):
    assert format_file_size(num_bytes).split(" ")[1] == unit


def test_format_file_size_stops_at_terabytes():
    assert format_file_size(1024**6).endswith(" TB")


def test_format_file_size_has_two_decimals():
    number = format_file_size(123456789).split(" ")[0]
    assert len(number.split(".")[1]) == 2


def test_print_unicode_concatenates(capsys):
    print_unicode("a", "ü", 3, newline=True)
    assert capsys.readouterr().out == "aü3\n"


def test_print_unicode_without_newline(capsys):
    print_unicode("x", "y")
    assert capsys.readouterr().out == "xy"


def test_write_creates_file_with_bom(tmp_path):
    target = tmp_path / "out.txt"
    assert write_unicode_to_file("héllo", target) is True
    data = target.read_bytes()
    assert data.startswith(b"\xff\xfe")
    assert data[2:].decode("utf-16-le") == "héllo\r\n"


def test_write_appends_single_bom(tmp_path):
    target = tmp_path / "out.txt"
    write_unicode_to_file("one", target)
    write_unicode_to_file("two", target, newline=False)
    data = target.read_bytes()
    assert data.count(b"\xff\xfe") == 1
    assert data.decode("utf-16") == "one\r\ntwo"


def test_write_overwrite_replaces_content(tmp_path):
    target = tmp_path / "out.txt"
    write_unicode_to_file("first", target)
    write_unicode_to_file("second", target, newline=False, append=False)
    assert target.read_bytes().decode("utf-16") == "second"


def test_write_reports_unopenable_path(tmp_path, capsys):
    target = tmp_path / "missing_dir" / "out.txt"
    assert write_unicode_to_file("x", target) is False
    assert "Could not open file for writing" in capsys.readouterr().out