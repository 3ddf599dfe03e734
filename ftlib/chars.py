"""Classification and case conversion of single ASCII characters.

Every function accepts either an integer character code or a one-character
string. The classifiers return a bool. The case converters return a value
of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_CASE_OFFSET = 32


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if not _is_lower(code):
        return c
    upper = code - _CASE_OFFSET
    return chr(upper) if isinstance(c, str) else upper


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if not _is_upper(code):
        return c
    lower = code + _CASE_OFFSET
    return chr(lower) if isinstance(c, str) else lower