"""Character, memory, string, output, linked-list, printf-style formatting and line-reading utilities."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "strings",
    "output",
    "linkedlist",
    "format_flags",
    "conversions",
    "printf",
    "line_reader",
]