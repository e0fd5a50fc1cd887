"""Operation values that are either literals or register references."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union

from aoctools.chars import AlphaError, LowerAlpha
from aoctools.registers import Registers, StandardValueParseError

__all__ = [
    "Literal",
    "Register",
    "parse_standard_value",
    "standard_value_from_str",
]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Literal:
    """A value given directly."""

    value: Any

    def get(self, registers: Registers) -> Any:
        """Return the literal value."""
        return self.value

    def __str__(self) -> str:
        return f"Lit: {self.value}"


@dataclass(frozen=True)
class Register:
    """A value read from the named register."""

    register: Any

    def get(self, registers: Registers) -> Any:
        """Return the value held by the referenced register."""
        return registers.get(self.register)

    def __str__(self) -> str:
        return f"Reg: {self.register}"


StandardValue = Union[Literal, Register]


def parse_standard_value(text: str) -> tuple[str, StandardValue]:
    """Parse a leading standard value from ``text``.

    Returns the unparsed remainder and the value. A 64-bit signed integer
    gives a :class:`Literal`; otherwise a single lowercase letter gives a
    :class:`Register`.
    """
    match = _INTEGER.match(text)
    if match:
        number = int(match.group())
        if _I64_MIN <= number <= _I64_MAX:
            return text[match.end():], Literal(number)
    if text:
        try:
            letter = LowerAlpha(text[0])
        except AlphaError:
            pass
        else:
            return text[1:], Register(letter)
    raise StandardValueParseError(text)


def standard_value_from_str(text: str) -> StandardValue:
    """Parse ``text`` as exactly one standard value."""
    rest, value = parse_standard_value(text)
    if rest:
        raise StandardValueParseError(text)
    return value