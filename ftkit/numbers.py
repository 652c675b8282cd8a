"""Conversions between integers and their decimal text."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading ASCII whitespace is skipped, then one optional ``+`` or ``-``,
    then as many digits as follow. Anything after them is ignored. Text
    with no digits in that place gives 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    end = 0
    while end < len(stripped) and stripped[end] in _DIGITS:
        end += 1
    return sign * int(stripped[:end]) if end else 0


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading ``-`` if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, not {type(n).__name__}")
    return str(n)


def int_len(n: int) -> int:
    """Number of characters in the decimal text of ``n``, sign included."""
    return len(itoa(n))