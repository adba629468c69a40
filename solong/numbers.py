"""Conversions between decimal text and 32-bit integers."""

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _parse(text: str) -> int:
    """Parse leading whitespace, an optional sign and digits; ignore the rest."""
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Convert the leading decimal number in ``text`` to a 32-bit int.

    Values outside the int range wrap around as a 32-bit int would.
    Text without a leading number gives 0.
    """
    return _wrap_int32(_parse(text))


def atol(text: str) -> int:
    """Convert the leading decimal number in ``text``, requiring it to fit an int.

    Raises OverflowError if the value lies outside the 32-bit int range.
    """
    value = _parse(text)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{text!r} does not fit in a 32-bit int")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading '-' when negative."""
    return f"{n:d}"