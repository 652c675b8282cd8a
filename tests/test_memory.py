import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert all(b == 0 for b in buf)
    assert len(buf) == len(calloc(4, 3)) == len(calloc(12, 1))


def test_calloc_zero_size_is_empty():
    assert len(calloc(0, 8)) == len(calloc(8, 0)) == 0


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_partial():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_wraps_value():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert set(buf) == {0x41}


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytearray(4)
    assert buf[4:] == bytearray(b"ef")


def test_memcpy_copies_prefix():
    dest = bytearray(b"..........")
    result = memcpy(dest, b"Bonjour", 7)
    assert result is dest
    assert dest[:7] == bytearray(b"Bonjour")
    assert dest[7:] == bytearray(b"...")


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"abc", 5)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"Hello, world!"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_missing_or_beyond_n():
    data = b"Hello, world!"
    assert memchr(data, ord("z"), len(data)) is None
    assert memchr(data, ord("w"), 5) is None


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff", b"\x00\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memccpy_stops_after_byte():
    dest = bytearray(10)
    end = memccpy(dest, b"abc:def", ord(":"), 7)
    assert end == b"abc:def".index(b":") + 1
    assert dest[:end] == bytearray(b"abc:")
    assert not any(dest[end:])


def test_memccpy_byte_absent_copies_n():
    dest = bytearray(10)
    assert memccpy(dest, b"abcdef", ord("z"), 4) is None
    assert dest[:4] == bytearray(b"abcd")


def test_strlcpy_truncates_and_terminates():
    dest = bytearray(b"Kiokoo\x00\x00\x00\x00")
    src = b"ouiqa"
    assert strlcpy(dest, src, 3) == len(src)
    assert dest[:3] == bytearray(b"ou\x00")


def test_strlcpy_full_copy_round_trip():
    dest = bytearray(16)
    src = b"hello\x00junk"
    assert strlcpy(dest, src, len(dest)) == src.index(0)
    assert bytes(dest).split(b"\x00", 1)[0] == src.split(b"\x00", 1)[0]


def test_strlcpy_size_zero_writes_nothing():
    dest = bytearray(b"abc")
    assert strlcpy(dest, b"xyz", 0) == 3
    assert dest == bytearray(b"abc")


def test_strlcat_appends():
    dest = bytearray(b"foo\x00\x00\x00\x00\x00\x00\x00")
    assert strlcat(dest, b"bar", len(dest)) == len(b"foobar")
    assert bytes(dest).split(b"\x00", 1)[0] == b"foo" + b"bar"


def test_strlcat_truncates():
    dest = bytearray(b"foo\x00\x00")
    result = strlcat(dest, b"barbaz", len(dest))
    assert result == len(b"foo") + len(b"barbaz")
    assert bytes(dest).split(b"\x00", 1)[0] == b"foob"


def test_strlcat_size_not_past_dest_string():
    dest = bytearray(b"foobar\x00\x00")
    assert strlcat(dest, b"xy", 3) == len(b"xy") + 3
    assert dest == bytearray(b"foobar\x00\x00")
    assert strlcat(dest, b"xy", 0) == len(b"xy")


def test_strlcat_size_beyond_buffer():
    with pytest.raises(IndexError):
        strlcat(bytearray(3), b"a", 4)