"""A printf supporting the conversions c, s, p, d, i, u, x, X and %.

Flags ``-``, ``0``, ``.``, ``#``, space and ``+`` are understood together
with a field width and a precision. A specification that runs to the end of
the format without a conversion character produces no output. Characters
inside a specification that are neither flags nor digits are skipped.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

from .conversions import format_hex, format_int, format_pointer, format_unsigned
from .format_flags import FormatFlags, literal_length, pad, parse_flags

_NULL_TEXT = "(null)"


def format_char(c: Any, flags: FormatFlags) -> str:
    """Render a ``%c`` conversion; an int is taken as a character code mod 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    elif isinstance(c, int) and not isinstance(c, bool):
        char = chr(c % 256)
    else:
        raise TypeError(f"expected a character, got {type(c).__name__}")
    padding = pad(flags.width, 1)
    return char + padding if flags.justify else padding + char


def format_str(text: Optional[str], flags: FormatFlags) -> str:
    """Render a ``%s`` conversion; None is shown as ``(null)``."""
    if text is None:
        text = _NULL_TEXT
    elif not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    if flags.precision and flags.precwidth < len(text):
        text = text[:flags.precwidth]
    padding = pad(flags.width, len(text))
    return text + padding if flags.justify else padding + text


def _next_argument(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(conversion: str, flags: FormatFlags, values: Iterator[Any]) -> str:
    if conversion == "%":
        return format_char("%", flags)
    value = _next_argument(values)
    if conversion == "c":
        return format_char(value, flags)
    if conversion == "s":
        return format_str(value, flags)
    if conversion == "u":
        return format_unsigned(value, flags)
    if conversion == "x":
        return format_hex(value, flags, upper=False)
    if conversion == "X":
        return format_hex(value, flags, upper=True)
    if conversion == "p":
        return format_pointer(value, flags)
    return format_int(value, flags)


def format_string(fmt: str, *args: Any) -> str:
    """The text that :func:`printf` would write for ``fmt`` and ``args``."""
    if not isinstance(fmt, str):
        raise TypeError(f"expected a str format, got {type(fmt).__name__}")
    values = iter(args)
    parts = []
    i = 0
    while True:
        count = literal_length(fmt, i)
        parts.append(fmt[i:i + count])
        i += count
        if i >= len(fmt):
            break
        flags, i = parse_flags(fmt, i + 1)
        if i >= len(fmt):
            break
        parts.append(_convert(fmt[i], flags, values))
        i += 1
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)