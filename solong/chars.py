"""Character classification and case conversion on integer character codes.

Only the ASCII ranges count: codes outside them are never letters, digits
or printable, and case conversion leaves them unchanged.
"""

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def isalpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return code in _UPPER or code in _LOWER


def isdigit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return code in _DIGITS


def isalnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return isalpha(code) or isdigit(code)


def isascii(code: int) -> bool:
    """Return True if ``code`` lies in the range 0 to 127."""
    return code in _ASCII


def isprint(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character, space included."""
    return code in _PRINTABLE


def toupper(code: int) -> int:
    """Return the upper-case code for a lower-case letter, else ``code``."""
    return code - _CASE_OFFSET if code in _LOWER else code


def tolower(code: int) -> int:
    """Return the lower-case code for an upper-case letter, else ``code``."""
    return code + _CASE_OFFSET if code in _UPPER else code