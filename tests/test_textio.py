import pytest

from patsearch.textio import read_file, read_patterns


def test_read_file_round_trip(tmp_path):
    content = "first line\nsecond\r\nthird"
    path = tmp_path / "text.txt"
    path.write_bytes(content.encode("utf-8"))
    assert read_file(path) == content


def test_read_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert read_file(path) == ""


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_read_patterns_skips_empty_lines(tmp_path):
    path = tmp_path / "patterns.txt"
    path.write_text("alpha\n\nbeta\ngamma\n\n")
    assert read_patterns(path) == ["alpha", "beta", "gamma"]


def test_read_patterns_no_trailing_newline(tmp_path):
    path = tmp_path / "patterns.txt"
    path.write_text("one\ntwo")
    assert read_patterns(path) == ["one", "two"]


def test_read_patterns_keeps_carriage_return(tmp_path):
    path = tmp_path / "patterns.txt"
    path.write_bytes(b"one\r\ntwo\r\n")
    assert read_patterns(path) == ["one\r", "two\r"]


def test_read_patterns_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_patterns(tmp_path / "missing.txt")