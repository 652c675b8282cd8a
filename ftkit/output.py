"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character (text or integer code); return the count written."""
    if isinstance(c, int) and not isinstance(c, bool):
        c = chr(c)
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` as is; ``None`` writes nothing. Return the count written."""
    if text is None:
        return 0
    _target(stream).write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> int:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return 0
    _target(stream).write(text + "\n")
    return len(text) + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write ``n`` in decimal; return the count written."""
    return put_str(str(int(n)), stream)


def check_base(base: str) -> bool:
    """True when ``base`` has no sign characters and no repeated symbol."""
    if "-" in base or "+" in base:
        return False
    return len(set(base)) == len(base)


def _digits_in_base(n: int, base: str) -> str:
    radix = len(base)
    if n == 0:
        return base[0]
    digits = []
    while n:
        n, rest = divmod(n, radix)
        digits.append(base[rest])
    return "".join(reversed(digits))


def put_nbr_base(n: int, base: str, stream: TextIO | None = None) -> int:
    """Write ``n`` using the symbols of ``base`` as digits.

    Negative numbers get a leading ``-``. Raises ``ValueError`` if the base
    has fewer than two symbols, a repeated symbol, or a sign character.
    """
    if not check_base(base) or len(base) < 2:
        raise ValueError(f"invalid base {base!r}")
    n = int(n)
    text = ("-" if n < 0 else "") + _digits_in_base(abs(n), base)
    return put_str(text, stream)