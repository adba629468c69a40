"""Searching, comparing and bounded copying of strings.

Each string behaves as if a terminating NUL follows its last character:
searching for "\\0" finds the end of the string, and a string that runs out
compares as a zero character.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple

NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected exactly one character")


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must be non-negative")


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for "\\0" returns ``len(text)``, the position of the terminator.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for "\\0" returns ``len(text)``, the position of the terminator.
    """
    _check_char(char)
    if char == NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def _difference(first: str, second: str) -> int:
    for a, b in zip_longest(first, second, fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strcmp(first: str, second: str) -> int:
    """Return the code-point difference at the first mismatch, or 0 if equal."""
    return _difference(first, second)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of the two strings, as :func:`strcmp`."""
    _check_size(n)
    return _difference(first[:n], second[:n])


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly inside ``haystack[:length]``.

    An empty needle is found at 0; None is returned when there is no match.
    """
    _check_size(length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the length
    of ``src``, the length the copy tried to reach.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result tried to reach.
    When ``size`` is no larger than ``dest`` nothing is appended and the
    length reported is ``size + len(src)``.
    """
    _check_size(size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)