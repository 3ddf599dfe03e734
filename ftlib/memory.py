"""Byte-buffer operations on mutable buffers such as bytearray or memoryview.

Functions that write into a buffer modify it in place and return it. Lengths
that reach past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(buf: ReadableBuffer, length: int, name: str = "length") -> None:
    if length < 0:
        raise ValueError(f"{name} must not be negative")
    if length > len(buf):
        raise ValueError(f"{name} {length} exceeds buffer size {len(buf)}")


def _c_len(data: ReadableBuffer) -> int:
    """Length up to the first NUL byte, or the whole buffer if there is none."""
    raw = bytes(data)
    end = raw.find(0)
    return len(raw) if end < 0 else end


def memset(buf: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken mod 256)."""
    _check_length(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: WritableBuffer, length: int) -> WritableBuffer:
    """Zero the first ``length`` bytes of ``buf``."""
    return memset(buf, 0, length)


def memcpy(dst: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    if dst is src:
        return dst
    return memmove(dst, src, length)


def memmove(dst: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy ``length`` bytes from ``src`` into ``dst``; overlapping views are safe."""
    _check_length(dst, length)
    _check_length(src, length)
    dst[:length] = bytes(src[:length])
    return dst


def memchr(data: ReadableBuffer, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) in the first ``length`` bytes."""
    _check_length(data, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, length: int) -> int:
    """Difference of the first unequal bytes within ``length``, or 0 if all match."""
    _check_length(a, length)
    _check_length(b, length)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def strlcpy(dst: WritableBuffer, src: ReadableBuffer, dstsize: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst``, writing at most ``dstsize`` bytes.

    The result is always NUL-terminated when ``dstsize`` is positive. Returns
    the length of ``src``, so a return value of ``dstsize`` or more means the
    copy was truncated.
    """
    _check_length(dst, dstsize, "dstsize")
    text = bytes(src[:_c_len(src)])
    if dstsize > 0:
        count = min(len(text), dstsize - 1)
        dst[:count] = text[:count]
        dst[count] = 0
    return len(text)


def strlcat(dst: WritableBuffer, src: ReadableBuffer, dstsize: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dst``, within ``dstsize`` bytes.

    Returns the length of the string it tried to build. When the existing
    string already fills ``dstsize``, nothing is written and the result is
    ``len(src) + dstsize``.
    """
    _check_length(dst, dstsize, "dstsize")
    text = bytes(src[:_c_len(src)])
    dst_len = _c_len(dst)
    if dst_len >= dstsize:
        return len(text) + dstsize
    count = min(len(text), dstsize - 1 - dst_len)
    dst[dst_len:dst_len + count] = text[:count]
    dst[dst_len + count] = 0
    return dst_len + len(text)