import io

import pytest

from solong.lines import LineReader

SAMPLES = [
    "111111\n1P0C01\n1000E1\n111111\n",
    "first line\nsecond line\nno trailing newline",
    "\n\n\n",
    "single",
    "a\n\nb\n",
    "x" * 3000 + "\n" + "y" * 10,
]


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 1024])
@pytest.mark.parametrize("data", SAMPLES)
def test_text_lines_round_trip(data, buffer_size):
    lines = list(LineReader(io.StringIO(data), buffer_size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("buffer_size", [1, 4, 1024])
@pytest.mark.parametrize("data", SAMPLES)
def test_binary_lines_round_trip(data, buffer_size):
    raw = data.encode()
    lines = list(LineReader(io.BytesIO(raw), buffer_size))
    assert b"".join(lines) == raw
    assert all(isinstance(line, bytes) for line in lines)
    assert all(line.endswith(b"\n") for line in lines[:-1])


def test_read_line_step_by_step():
    reader = LineReader(io.StringIO("abc\ndef"), 2)
    assert reader.read_line() == "abc\n"
    assert reader.read_line() == "def"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream_gives_no_lines():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert list(LineReader(io.BytesIO(b""))) == []


def test_default_buffer_reads_whole_small_file():
    data = "1111\n1PE1\n1111\n"
    stream = io.StringIO(data)
    reader = LineReader(stream)
    assert reader.read_line() == "1111\n"
    assert stream.tell() == len(data)
    assert list(reader) == ["1PE1\n", "1111\n"]


def test_lines_are_read_from_a_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("11111\n1PCE1\n11111")
    with path.open() as handle:
        lines = list(LineReader(handle, 4))
    assert lines == ["11111\n", "1PCE1\n", "11111"]


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_buffer_size_must_be_positive(buffer_size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("data\n"), buffer_size)