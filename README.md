# ftlib

A small collection of everyday helpers, with no dependencies outside the
standard library.

## Modules

- `ftlib.chars`: ASCII character classification and case mapping:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`. Each accepts an integer code or a one-character string. The case
  mappers return a value of the same kind they were given.
- `ftlib.memory`: operations on byte buffers: `memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`, `strlcpy` and `strlcat`. Writing
  functions change a `bytearray` or `memoryview` in place and return it.
  `memchr` returns an index or `None`. A length that reaches past the end of
  a buffer raises `ValueError`.
- `ftlib.strings`: string helpers: `atoi`, `itoa`, `split`, `strchr`,
  `strrchr`, `strdup`, `strlen`, `striteri`, `strmapi`, `strjoin`, `strncmp`,
  `strnstr`, `strtrim` and `substr`. The search functions return an index, or
  `None` when nothing is found.
- `ftlib.output`: writing to a text stream, which is standard output by
  default: `put_char`, `put_str`, `put_endl` and `put_nbr`.
- `ftlib.linkedlist`: a singly linked list. `Node` holds `content` and
  `next`. `LinkedList` provides `push_front`, `push_back`, `last`, `clear`,
  `each` and `map`, and supports `len()` and iteration.
- `ftlib.format_flags`: the `FormatFlags` dataclass and the helpers
  `parse_flags`, `is_conversion`, `literal_length` and `pad`, which are used
  to read printf conversion specifications.
- `ftlib.conversions`: rendering of numeric conversions to strings:
  `format_int`, `format_unsigned`, `format_hex` and `format_pointer`. Integer
  values are reduced to 32 bits first.
- `ftlib.printf`: printf-style formatting with the `c s p d i u x X %`
  conversions and the `- 0 . # space +` flags, plus a field width and a
  precision. `format_string` returns the text. `printf` writes the text to
  standard output and returns its length. `format_char` and `format_str`
  render a single `%c` or `%s` conversion. Too few arguments raise
  `TypeError`.
- `ftlib.line_reader`: reads a stream one line at a time through a
  fixed-size read buffer: `LineReader`, with `read_line` and iteration, and
  `read_lines`. The stream may be an object with a `read(size)` method that
  returns text or bytes, or an integer file descriptor. Lines keep their
  newline. `read_line` returns `None` once the stream is exhausted.

## Installation

```
pip install .
```

## Examples

```python
import io

from ftlib.strings import split, strtrim, itoa
from ftlib.printf import format_string
from ftlib.linkedlist import LinkedList
from ftlib.line_reader import read_lines

split("  hello  world ", " ")        # ['hello', 'world']
strtrim("xxabcxx", "x")              # 'abc'
itoa(-42)                            # '-42'

format_string("%5d|%-4s|%#x", 42, "ab", 255)   # '   42|ab  |0xff'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2, None)
list(doubled)                        # [2, 4, 6]

list(read_lines(io.StringIO("one\ntwo\n"), 4))  # ['one\n', 'two\n']
```

## What it does not do

This is a library only. It has no command-line program. `printf` supports
only the conversions and flags listed above: there are no floating-point
conversions and no length modifiers.

## Running the tests

```
pip install .[test]
pytest
```