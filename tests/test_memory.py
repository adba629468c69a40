import pytest

from solong.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("z"), 3)
    assert result is buf
    assert buf[:3] == b"zzz"
    assert buf[3:] == b"def"


def test_memset_takes_value_modulo_256():
    buf = bytearray(2)
    memset(buf, 256 + ord("A"), 2)
    assert buf == bytearray(b"AA")


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"xyzw")
    bzero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"zw"


@pytest.mark.parametrize("count,size", [(3, 4), (0, 5), (5, 0), (1, 1)])
def test_calloc_zeroed(count, size):
    block = calloc(count, size)
    assert len(block) == count * size
    assert all(byte == 0 for byte in block)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_missing_and_limited():
    data = b"hello"
    assert memchr(data, ord("q"), len(data)) is None
    assert memchr(data, ord("o"), 3) is None


def test_memchr_masks_value():
    assert memchr(b"\xff", -1, 1) == 0


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) == -1
    assert memcmp(b"b", b"a", 1) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    first, second = b"\x10\x20\x30", b"\x10\x90\x00"
    assert memcmp(first, second, 3) == -memcmp(second, first, 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"------")
    result = memcpy(dest, b"abcdef", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == b"---"


def test_memcpy_out_of_range_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


@pytest.mark.parametrize(
    "dest,src,n", [(2, 0, 4), (0, 2, 4), (1, 1, 3), (0, 5, 0), (3, 0, 3)]
)
def test_memmove_overlap(dest, src, n):
    original = b"abcdef"
    buf = bytearray(original)
    result = memmove(buf, dest, src, n)
    assert result is buf
    assert buf[dest:dest + n] == original[src:src + n]
    assert buf[:dest] == original[:dest]
    assert buf[dest + n:] == original[dest + n:]


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)