"""Validated ASCII letter types with stable numeric conversions.

Lowercase letters ``'a'..'z'`` map to ``0..25`` and uppercase letters
``'A'..'Z'`` map to ``26..51``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = ["AlphaError", "Alpha", "LowerAlpha", "UpperAlpha"]


class AlphaError(ValueError):
    """Raised when a character is not valid for the requested letter type."""

    def __init__(self, char: object) -> None:
        self.char = char
        super().__init__(f"Invalid character: '{char}'")


def _letter_number(char: str) -> int:
    if char in string.ascii_lowercase:
        return ord(char) - ord("a")
    return ord(char) - ord("A") + 26


@dataclass(frozen=True, order=True)
class _AsciiLetter:
    char: str

    _allowed = string.ascii_letters

    def __post_init__(self) -> None:
        value = self.char
        if isinstance(value, _AsciiLetter):
            value = value.char
            object.__setattr__(self, "char", value)
        if not isinstance(value, str):
            raise TypeError(f"expected a single character, got {type(value).__name__}")
        if len(value) != 1 or value not in self._allowed:
            raise AlphaError(value)

    def __int__(self) -> int:
        return _letter_number(self.char)

    def __index__(self) -> int:
        return int(self)

    def __str__(self) -> str:
        return self.char


class Alpha(_AsciiLetter):
    """An ASCII letter from ``'a'..'z'`` or ``'A'..'Z'``.

    May also be built from a :class:`LowerAlpha` or :class:`UpperAlpha`.
    """

    _allowed = string.ascii_letters

    def __int__(self) -> int:
        return _letter_number(self.char)

    def __str__(self) -> str:
        return self.char


class LowerAlpha(_AsciiLetter):
    """An ASCII lowercase letter from ``'a'..'z'``, numbered ``0..25``."""

    _allowed = string.ascii_lowercase

    def __int__(self) -> int:
        return _letter_number(self.char)

    def __str__(self) -> str:
        return self.char


class UpperAlpha(_AsciiLetter):
    """An ASCII uppercase letter from ``'A'..'Z'``, numbered ``26..51``."""

    _allowed = string.ascii_uppercase

    def __int__(self) -> int:
        return _letter_number(self.char)

    def __str__(self) -> str:
        return self.char