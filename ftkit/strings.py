"""String helpers: splitting, searching, comparing, trimming and mapping.

Positions are returned as indices rather than references. Searching for the
NUL character finds the implicit terminator, which sits at ``len(text)``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _check_char(c: str, name: str = "c") -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")


def _check_count(n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> int | None:
    """Index of the first ``c`` in ``text``, or None.

    Searching for NUL returns ``len(text)``.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    pos = text.find(c)
    return None if pos == -1 else pos


def strrchr(text: str, c: str) -> int | None:
    """Index of the last ``c`` in ``text``, or None.

    Searching for NUL returns ``len(text)``.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    pos = text.rfind(c)
    return None if pos == -1 else pos


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` on each element of ``chars`` in order.

    A non-None return value replaces the element in place.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return -1, 0 or 1.

    Comparison stops at the end of either string or at a NUL character.
    """
    _check_count(n, "n")
    for a, b in islice(zip_longest(first, second, fillvalue=_NUL), n):
        if a != b:
            return 1 if a > b else -1
        if a == _NUL:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when not found.
    """
    _check_count(length, "length")
    pos = haystack[:length].find(needle)
    return None if pos == -1 else pos


def strtrim(text: str, charset: str) -> str:
    """Remove every character in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    return text[start:start + length]