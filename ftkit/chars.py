"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Classification functions return ``bool``; case
conversion returns a value of the same kind as its argument.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", str, int)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of a character given as text or as an int."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def _is_digit_code(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _is_digit_code(_code(c))


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_digit_code(code) or _is_upper_code(code) or _is_lower_code(code)


def is_ascii(c: str | int) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper_code(code):
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower_code(code):
        return _same_kind(c, code - _CASE_OFFSET)
    return c