"""Writing characters, strings and integers to a text stream.

Every function writes to ``stream``, which defaults to standard output.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` as it is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))