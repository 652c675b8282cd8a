# ftkit

A small library of helpers for characters, byte buffers, strings, numbers,
formatted output, linked lists and line-by-line reading. It has no
dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion. The functions are
  `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`, `is_print`, `to_lower` and
  `to_upper`. Each one accepts a one-character string or an integer code. The
  `is_*` functions return `bool`. `to_lower` and `to_upper` return a value of
  the same kind as their argument.
- `ftkit.memory`: operations on byte buffers.
  - `calloc(count, size)` returns a zero-filled `bytearray`.
  - `bzero` and `memset` fill the start of a buffer.
  - `memcpy` copies the start of one buffer into another.
  - `memmove(buf, dest, src, n)` moves `n` bytes between two offsets of one
    buffer. The two regions may overlap.
  - `memchr` returns the index of a byte, or `None`.
  - `memcmp` returns the difference of the first pair of bytes that differ.
  - `memccpy` copies up to and including a given byte.
  - `strlcpy` and `strlcat` are bounded copy and concatenation of
    NUL-terminated data.

  A negative count raises `ValueError`. A count that runs past the end of a
  buffer raises `IndexError`.
- `ftkit.numbers`:
  - `atoi` parses a leading decimal integer. It skips leading whitespace and
    takes one optional sign.
  - `itoa` returns the decimal text of an integer.
  - `int_len` returns the length of that text, sign included.
- `ftkit.strings`:
  - `split` splits on a single character and drops empty pieces.
  - `strchr`, `strrchr` and `strnstr` return indices or `None`. Searching for
    `"\0"` gives `len(text)`.
  - `strncmp` returns -1, 0 or 1.
  - The other functions are `strjoin`, `strmapi`, `striteri`, `strtrim` and
    `substr`. `striteri` changes a mutable sequence of characters in place.
- `ftkit.output`:
  - `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
    which is stdout by default. Each returns the number of characters it
    wrote.
  - `put_nbr_base` writes an integer using the symbols of a base string as
    digits. It raises `ValueError` if the base is invalid.
  - `check_base` checks a base string.
- `ftkit.printf`: a formatter with the conversions `%c %s %d %i %u %x %X %p %%`.
  It has no flags, widths or precisions. `%d` and `%i` wrap to a signed 32-bit
  value. `%u`, `%x` and `%X` wrap to an unsigned 32-bit value. A `None` string
  prints `(null)` and a zero or `None` pointer prints `(nil)`. An unknown
  conversion produces nothing.
  - `format_string(fmt, *args)` returns the text. It raises `TypeError` if
    there are too few arguments, and `ValueError` if the format ends with a
    lone `%`.
  - `printf(fmt, *args, stream=None)` writes the text and returns how many
    characters it wrote.
- `ftkit.linked_list`: `Node` and `LinkedList`, a singly linked list. It
  provides:
  - `add_front` and `add_back`, which return the new node.
  - `last()`.
  - `len()` and iteration over the contents.
  - `iterate(func)`.
  - `map(func)`, which returns a new `LinkedList`.
  - `clear(delete=None)`.
- `ftkit.line_reader`: `LineReader(stream, buffer_size=5)` reads a text or
  binary stream in chunks of `buffer_size` and returns one line at a time.
  Each line keeps its trailing newline. `read_line()` returns `None` at the
  end of the stream. Iterating a reader yields every remaining line.

## Installation

```
pip install .
```

## Examples

```python
import io

from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format_string
from ftkit.linked_list import LinkedList
from ftkit.line_reader import LineReader

atoi("   -42abc")                 # -42
itoa(-2147483648)                 # "-2147483648"
split("  a b  c ", " ")           # ["a", "b", "c"]
strtrim("xxhixx", "x")            # "hi"
format_string("%d items, %x", 3, 255)   # "3 items, ff"

items = LinkedList([1, 2, 3])
items.add_front(0)
len(items)                        # 4
list(items.map(lambda v: v * 10)) # [0, 10, 20, 30]

reader = LineReader(io.StringIO("one\ntwo\n"), 5)
list(reader)                      # ["one\n", "two\n"]
```

## Scope

This is a library only. It installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```