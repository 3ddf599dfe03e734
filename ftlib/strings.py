"""String helpers with C-library semantics expressed on Python ``str`` values.

Searches return an index, or ``None`` when nothing is found. A search for
the NUL character finds the position just past the end of the text, where
a C string keeps its terminator.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, TypeVar

NUL = "\0"
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")

T = TypeVar("T")


def _single_char(c: str, name: str = "c") -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")
    return c


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one optional sign.

    Parsing stops at the first character that is not an ASCII digit; text
    with no digits gives 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        value = value * 10 + ord(ch) - ord("0")
    return sign * value


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Words of ``text`` separated by runs of ``sep``; empty words are dropped."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; ``len(text)`` when ``c`` is NUL."""
    _single_char(c)
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; ``len(text)`` when ``c`` is NUL."""
    _single_char(c)
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return str(text)


def striteri(
    buffer: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> MutableSequence[T]:
    """Call ``func(index, item)`` on each item of ``buffer`` up to a NUL.

    A value returned by ``func`` replaces the item in place; ``None`` leaves
    it unchanged. Returns ``buffer``.
    """
    for index, item in enumerate(buffer):
        if item == NUL or (isinstance(item, int) and item == 0):
            break
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement
    return buffer


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string made of ``func(index, char)`` for each character of ``text``."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def strjoin(first: str, second: str) -> str:
    """``second`` appended to ``first``."""
    return first + second


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the result is the difference of the
    first pair of unequal character codes, or 0.

    A string that ends early compares as if followed by NUL, and the
    comparison stops at a NUL common to both.
    """
    _non_negative(n, "n")
    for x, y in zip_longest(first[:n], second[:n], fillvalue=NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """``text`` with every leading and trailing character found in ``charset`` removed."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]