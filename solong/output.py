"""Writing characters, strings and numbers, and a small printf formatter."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT32_MASK = 0xFFFFFFFF


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _as_uint32(value: int) -> int:
    return value & _UINT32_MASK


def putchar(char: str, stream: Optional[TextIO] = None) -> int:
    """Write a single character to ``stream`` and return 1."""
    if len(char) != 1:
        raise ValueError("putchar expects exactly one character")
    _target(stream).write(char)
    return 1


def putstr(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` (or "(null)" for None) and return the number of characters."""
    shown = NULL_STRING if text is None else text
    _target(stream).write(shown)
    return len(shown)


def putendl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    _target(stream).write(text + "\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write the decimal form of ``n`` and return the number of characters."""
    text = str(n)
    _target(stream).write(text)
    return len(text)


def format_base(n: int, digits: str = LOWER_HEX) -> str:
    """Return non-negative ``n`` written with the digit set ``digits``."""
    if n < 0:
        raise ValueError("format_base expects a non-negative number")
    base = len(digits)
    if base < 2:
        raise ValueError("a digit set needs at least two digits")
    if n == 0:
        return digits[0]
    out = []
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_address(addr: Optional[int]) -> str:
    """Return an address as "0x" plus lower-case hex, or "(nil)" for zero."""
    if not addr:
        return NULL_POINTER
    return "0x" + format_base(addr, LOWER_HEX)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return NULL_STRING if value is None else str(value)
    if spec == "p":
        return format_address(value)
    if spec in "di":
        return str(_as_int32(int(value)))
    if spec == "u":
        return str(_as_uint32(int(value)))
    digits = LOWER_HEX if spec == "x" else UPPER_HEX
    return format_base(_as_uint32(int(value)), digits)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %p %d %i %u %x %X and %% in ``fmt``.

    Unknown conversions expand to nothing; a lone trailing '%' is kept.
    Raises TypeError when there are fewer arguments than conversions.
    """
    values = iter(args)
    parts = []
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char == "%" and pos + 1 < length:
            parts.append(_convert(fmt[pos + 1], values))
            pos += 2
        else:
            parts.append(char)
            pos += 1
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)