"""Byte-buffer helpers: filling, copying, searching, comparing, and bounded
NUL-terminated string copy and concatenation.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Sources can be any bytes-like object. A count that is
negative raises ``ValueError``. A count that reaches past the end of a
buffer raises ``IndexError``.
"""

from __future__ import annotations

from collections.abc import Sequence

Writable = bytearray | memoryview
Readable = bytes | bytearray | memoryview


def _check_count(n: int, name: str = "n") -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _check_fits(n: int, buf: Sequence[int], what: str) -> None:
    if n > len(buf):
        raise IndexError(f"{n} bytes do not fit in {what} of length {len(buf)}")


def _cstrlen(buf: Readable) -> int:
    """Length up to the first NUL byte, or the whole buffer if there is none."""
    pos = bytes(buf).find(0)
    return len(buf) if pos == -1 else pos


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes."""
    _check_count(count, "count")
    _check_count(size, "size")
    return bytearray(count * size)


def memset(buf: Writable, value: int, n: int) -> Writable:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n)
    _check_fits(n, buf, "buffer")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest: Writable, src: Readable, n: int) -> Writable:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n)
    _check_fits(n, src, "source")
    _check_fits(n, dest, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: Writable, dest: int, src: int, n: int) -> Writable:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the bytes were first
    copied to a temporary buffer.
    """
    _check_count(n)
    _check_count(dest, "dest")
    _check_count(src, "src")
    _check_fits(src + n, buf, "buffer")
    _check_fits(dest + n, buf, "buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: Readable, value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(n)
    _check_fits(n, buf, "buffer")
    pos = bytes(buf[:n]).find(value & 0xFF)
    return None if pos == -1 else pos


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n)
    _check_fits(n, a, "first buffer")
    _check_fits(n, b, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memccpy(dest: Writable, src: Readable, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dest`` until byte ``c`` has been copied.

    At most ``n`` bytes are copied. Returns the index in ``dest`` just after
    the copied ``c``, or None when ``c`` was not among the first ``n`` bytes.
    """
    _check_count(n)
    _check_fits(n, src, "source")
    chunk = bytes(src[:n])
    pos = chunk.find(c & 0xFF)
    count = n if pos == -1 else pos + 1
    _check_fits(count, dest, "destination")
    dest[:count] = chunk[:count]
    return None if pos == -1 else count


def strlcpy(dest: Writable, src: Readable, size: int) -> int:
    """Copy the NUL-terminated string in ``src`` into ``dest`` of capacity ``size``.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated
    whenever ``size`` is positive. Returns the length of the source string.
    """
    _check_count(size, "size")
    _check_fits(size, dest, "destination")
    src_len = _cstrlen(src)
    if size > 0:
        count = min(src_len, size - 1)
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def strlcat(dest: Writable, src: Readable, size: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dest`` of capacity ``size``.

    Returns the length the combined string would have had with unlimited
    room; when ``dest`` holds no NUL within ``size`` bytes, that is
    ``size`` plus the source length.
    """
    _check_count(size, "size")
    _check_fits(size, dest, "destination")
    src_len = _cstrlen(src)
    if size == 0:
        return src_len
    dest_len = _cstrlen(dest)
    if dest_len >= size:
        return src_len + size
    count = min(src_len, size - dest_len - 1)
    dest[dest_len:dest_len + count] = bytes(src[:count])
    dest[dest_len + count] = 0
    return src_len + dest_len