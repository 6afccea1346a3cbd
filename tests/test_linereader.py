import io
import os

import pytest

from pipex.linereader import LineReader, read_lines


def test_lines_keep_newlines():
    data = b"ab\ncd\nef"
    assert list(read_lines(io.BytesIO(data))) == [b"ab\n", b"cd\n", b"ef"]


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7, 100])
def test_concatenation_reproduces_input(size):
    data = b"first line\n\nthird\nno newline at end"
    lines = list(read_lines(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert lines[1] == b"\n"


def test_text_source():
    lines = list(read_lines(io.StringIO("x\ny\n"), 3))
    assert lines == ["x\n", "y\n"]


def test_empty_source_returns_none():
    reader = LineReader(io.BytesIO(b""))
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_none_after_last_line():
    reader = LineReader(io.BytesIO(b"only\n"))
    assert reader.next_line() == b"only\n"
    assert reader.next_line() is None


def test_reset_discards_read_ahead():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"), buffer_size=100)
    assert reader.next_line() == b"ab\n"
    reader.reset()
    assert reader.next_line() is None


def test_file_descriptor(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"one\ntwo\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert list(read_lines(fd, 2)) == [b"one\n", b"two\n"]
    finally:
        os.close(fd)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b""), 0)


def test_negative_descriptor():
    with pytest.raises(ValueError):
        LineReader(-1)


class _Failing:
    def __init__(self):
        self.calls = 0

    def read(self, n):
        self.calls += 1
        if self.calls == 1:
            return b"ab\ncd"
        raise OSError("boom")


def test_read_error_propagates_and_clears_buffer():
    source = _Failing()
    reader = LineReader(source, 5)
    assert reader.next_line() == b"ab\n"
    with pytest.raises(OSError):
        reader.next_line()
    source.read = lambda n: b""
    assert reader.next_line() is None