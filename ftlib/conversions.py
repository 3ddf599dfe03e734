"""Rendering of numeric printf conversions (d/i, u, x/X and p) to strings.

Integer arguments are reduced to 32 bits the way C passes an ``int`` or
``unsigned int``: signed conversions wrap into the signed range, unsigned
and hexadecimal ones are taken modulo 2**32.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from .format_flags import FormatFlags, pad

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _require_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def _to_signed(n: int) -> int:
    value = n & _MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


def _sign(negative: bool, flags: FormatFlags) -> str:
    if negative:
        return "-"
    if flags.plus:
        return "+"
    if flags.space:
        return " "
    return ""


def _null_precision(flags: FormatFlags) -> str:
    """A zero printed with an explicit precision of zero: only signs and padding."""
    lead = ("+" if flags.plus else "") + (" " if flags.space else "")
    padding = pad(flags.width, int(flags.plus) + int(flags.space))
    return lead + padding if flags.justify else padding + lead


def _decimal(digits: str, negative: bool, flags: FormatFlags) -> str:
    if flags.precision and flags.precwidth == 0 and digits == "0":
        return _null_precision(flags)
    f = replace(flags)
    if negative:
        f.plus = False
        f.space = False
    parts = []
    if f.zeros:
        if negative:
            parts.append("-")
        elif f.plus:
            parts.append("+")
        elif f.space:
            parts.append(" ")
            f.space = False
            f.width -= 1

    def body() -> str:
        sign = "" if f.zeros else _sign(negative, f)
        leading = pad(f.precwidth, len(digits), True) if f.precision and f.precwidth else ""
        return sign + leading + digits

    if f.justify:
        parts.append(body())
    if f.precision and f.precwidth < len(digits):
        f.precwidth = len(digits)
    if f.precision:
        width = f.width - f.precwidth
        if negative or f.plus or f.space:
            width -= 1
        parts.append(pad(width, 0))
    else:
        parts.append(
            pad(f.width - int(f.plus) - int(f.space), len(digits) + int(negative), f.zeros)
        )
    if not f.justify:
        parts.append(body())
    return "".join(parts)


def format_int(n: int, flags: FormatFlags) -> str:
    """Render ``n`` as a signed decimal conversion (``%d`` / ``%i``)."""
    value = _to_signed(_require_int(n))
    return _decimal(str(abs(value)), value < 0, flags)


def format_unsigned(n: int, flags: FormatFlags) -> str:
    """Render ``n`` as an unsigned decimal conversion (``%u``)."""
    value = _require_int(n) & _MASK
    return _decimal(str(value), False, flags)


def format_hex(n: int, flags: FormatFlags, upper: bool = False) -> str:
    """Render ``n`` as a hexadecimal conversion, ``%X`` when ``upper`` else ``%x``."""
    value = _require_int(n) & _MASK
    if flags.precision and flags.precwidth == 0 and value == 0:
        return pad(flags.width, 0)
    digits = format(value, "X" if upper else "x")
    prefix = ("0X" if upper else "0x") if flags.hash and value else ""
    dig = len(digits)
    f = replace(flags)
    if f.zeros:
        f.precision = True
        f.precwidth = f.width - 2 * int(f.hash)
    if f.precision and f.precwidth < dig:
        f.precwidth = dig
    if f.precision:
        f.width -= f.precwidth - dig
    leading = pad(f.precwidth, dig, True) if f.precision and f.precwidth else ""
    body = prefix + leading + digits
    padding = pad(f.width, dig + len(prefix), f.zeros)
    return body + padding if f.justify else padding + body


def format_pointer(address: Optional[int], flags: FormatFlags) -> str:
    """Render an address as ``0x`` followed by lower-case hex; None is address 0."""
    value = 0 if address is None else _require_int(address)
    if value < 0:
        raise ValueError("an address must not be negative")
    text = "0x" + format(value, "x")
    padding = pad(flags.width, len(text))
    return text + padding if flags.justify else padding + text