"""A small ``printf``-style formatter.

Supported conversions: ``%c`` ``%s`` ``%d`` ``%i`` ``%u`` ``%x`` ``%X``
``%p`` and ``%%``. There are no flags, widths or precisions. An unknown
conversion character is consumed and produces no output.

Integers follow fixed machine widths: ``%d`` and ``%i`` wrap to a signed
32-bit value, ``%u``, ``%x`` and ``%X`` to an unsigned 32-bit value, and
``%p`` to an unsigned 64-bit value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TextIO

from .output import put_str

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def _as_int(arg: Any, spec: str) -> int:
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise TypeError(f"%{spec} expects an int, not {type(arg).__name__}")
    return arg


def _signed32(n: int) -> int:
    n &= _MASK32
    return n - (1 << 32) if n >= 1 << 31 else n


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(_as_int(arg, "c") & 0xFF)


def _string(arg: Any) -> str:
    if arg is None:
        return "(null)"
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a str, not {type(arg).__name__}")
    return arg


def _decimal(arg: Any) -> str:
    return str(_signed32(_as_int(arg, "d")))


def _unsigned(arg: Any) -> str:
    return str(_as_int(arg, "u") & _MASK32)


def _hex_lower(arg: Any) -> str:
    return format(_as_int(arg, "x") & _MASK32, "x")


def _hex_upper(arg: Any) -> str:
    return format(_as_int(arg, "X") & _MASK32, "X")


def _pointer(arg: Any) -> str:
    value = 0 if arg is None else _as_int(arg, "p") & _MASK64
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the rendered ``args``.

    Raises ``ValueError`` if ``fmt`` ends with a lone ``%`` and
    ``TypeError`` if there are too few arguments. Extra arguments are
    ignored.
    """
    parts: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with an incomplete conversion")
        if spec == "%":
            parts.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            parts.append(convert(_next_arg(arg_iter, spec)))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    return put_str(format_string(fmt, *args), stream)