"""Building new strings: copying, joining, slicing, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected exactly one character")


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strjoin(prefix: str, suffix: str) -> str:
    """Return ``prefix`` followed by ``suffix``."""
    return prefix + suffix


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    Returns None when ``text`` is None, when ``start`` lies past the end of
    ``text`` or when ``length`` is zero. A ``start`` equal to the length of
    ``text`` gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if text is None or start > len(text) or length == 0:
        return None
    return text[start:start + length]


def strtrim(text: str, chars: str) -> str:
    """Return ``text`` without the leading and trailing characters found in ``chars``."""
    return text.strip(chars) if chars else text


def split(text: str, sep: str) -> List[str]:
    """Return the non-empty pieces of ``text`` between occurrences of ``sep``."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(chars):
        replacement = func(index, char)
        _check_char(replacement)
        chars[index] = replacement


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))