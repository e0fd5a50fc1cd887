"""Fixed-size register storage for small virtual machines."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from aoctools.chars import LowerAlpha

__all__ = [
    "VmError",
    "RegisterOutOfBoundsError",
    "StandardValueParseError",
    "register_index",
    "Registers",
    "standard_registers",
]

T = TypeVar("T")


class VmError(Exception):
    """Base class for virtual machine errors."""


class RegisterOutOfBoundsError(VmError, IndexError):
    """Raised when a register index lies outside the register set."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Register index out of bounds: {index}")


class StandardValueParseError(VmError, ValueError):
    """Raised when text is not a valid standard value."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"The input: '{text}' is not a valid StandardValue")


def register_index(register: int | LowerAlpha) -> int:
    """Convert an int or a :class:`LowerAlpha` to a register index."""
    if isinstance(register, LowerAlpha):
        return int(register)
    if isinstance(register, int) and not isinstance(register, bool):
        if register < 0:
            raise RegisterOutOfBoundsError(register)
        return register
    raise TypeError(f"cannot use {type(register).__name__} as a register index")


class Registers(Generic[T]):
    """A fixed number of registers, each holding a value."""

    def __init__(self, size: int, default: T = 0) -> None:  # type: ignore[assignment]
        if size < 0:
            raise ValueError("register count must not be negative")
        self._values: list[T] = [default] * size

    def _checked(self, register: int | LowerAlpha) -> int:
        index = register_index(register)
        if index >= len(self._values):
            raise RegisterOutOfBoundsError(index)
        return index

    def get(self, register: int | LowerAlpha) -> T:
        """Return the value held by ``register``."""
        return self._values[self._checked(register)]

    def set(self, register: int | LowerAlpha, value: T) -> None:
        """Store ``value`` in ``register``."""
        self._values[self._checked(register)] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registers):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Registers({self._values!r})"

    def __str__(self) -> str:
        lines = ["Registers:"]
        lines.extend(f"{idx:03}: {value}" for idx, value in enumerate(self._values))
        return "\n".join(lines)


def standard_registers(size: int) -> Registers[int]:
    """Return ``size`` integer registers, all zero."""
    return Registers(size, 0)