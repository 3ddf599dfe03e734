"""Parsing of printf-style conversion flags and field padding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

CONVERSIONS = frozenset("cspdiuxX%")
_DIGITS = frozenset("0123456789")


@dataclass
class FormatFlags:
    """The flags, field width and precision of one conversion specification."""

    zeros: bool = False
    justify: bool = False
    precision: bool = False
    precwidth: int = 0
    width: int = 0
    hash: bool = False
    space: bool = False
    plus: bool = False


def is_conversion(c: str) -> bool:
    """True when ``c`` is one of the supported conversion characters."""
    return isinstance(c, str) and len(c) == 1 and c in CONVERSIONS


def literal_length(fmt: str, start: int = 0) -> int:
    """Number of characters from ``start`` up to the next ``%`` or the end."""
    end = fmt.find("%", start)
    return (len(fmt) if end < 0 else end) - start


def pad(total: int, filled: int, zeros: bool = False) -> str:
    """Padding that brings ``filled`` characters up to ``total``.

    The padding is made of zeros or spaces and is empty when nothing is missing.
    """
    return ("0" if zeros else " ") * max(total - filled, 0)


def parse_flags(fmt: str, start: int = 0) -> Tuple[FormatFlags, int]:
    """Read the flags of a specification beginning at ``start`` (just past ``%``).

    Reading stops at the first conversion character or at the end of
    ``fmt``. Characters that are neither flags nor digits are skipped.
    Returns the flags and the index where reading stopped.
    """
    if start < 0 or start > len(fmt):
        raise ValueError(f"start {start} is outside the format string")
    flags = FormatFlags()
    i = start
    while i < len(fmt) and not is_conversion(fmt[i]):
        ch = fmt[i]
        if ch == "0" and not flags.justify and not flags.precision:
            flags.zeros = True
        elif ch in _DIGITS:
            end = i
            while end < len(fmt) and fmt[end] in _DIGITS:
                end += 1
            value = int(fmt[i:end])
            if flags.precision:
                flags.precwidth = value
            else:
                flags.width = value
            i = end
            continue
        elif ch == "-":
            flags.justify = True
            flags.zeros = False
        elif ch == ".":
            flags.precision = True
            flags.zeros = False
        elif ch == "#":
            flags.hash = True
        elif ch == " ":
            flags.space = True
        elif ch == "+":
            flags.plus = True
        i += 1
    return flags, i