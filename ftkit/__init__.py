"""Helpers for characters, byte buffers, strings, numbers, formatted output, linked lists and line reading."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "output",
    "memory",
    "numbers",
    "strings",
    "printf",
    "linked_list",
    "line_reader",
]