"""Concrete monoids over built-in Python types."""

from __future__ import annotations

from typing import Any

from morphic.kernel.monoid import Monoid


class Unit:
    """The one-element type. UNIT is its only value."""

    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "()"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[Any, ...]:
        return (Unit, ())


UNIT = Unit()


class IntAddition(Monoid[int]):
    name = "int (+, 0)"
    carrier = int

    def multiply(self, a: int, b: int) -> int:
        return a + b

    def unit(self) -> int:
        return 0


class IntMultiplication(Monoid[int]):
    name = "int (*, 1)"
    carrier = int

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def unit(self) -> int:
        return 1


class FloatAddition(Monoid[float]):
    """Addition on floats.

    Only associative up to rounding, so checks need an approximate equality.
    """

    name = "float (+, 0.0)"
    carrier = float

    def multiply(self, a: float, b: float) -> float:
        return a + b

    def unit(self) -> float:
        return 0.0


class StringConcat(Monoid[str]):
    """The free monoid on characters."""

    name = "str (+, '')"
    carrier = str

    def multiply(self, a: str, b: str) -> str:
        return a + b

    def unit(self) -> str:
        return ""


class TupleConcat(Monoid[tuple[Any, ...]]):
    name = "tuple (+, ())"
    carrier = tuple

    def multiply(self, a: tuple[Any, ...], b: tuple[Any, ...]) -> tuple[Any, ...]:
        return a + b

    def unit(self) -> tuple[Any, ...]:
        return ()


class BoolAnd(Monoid[bool]):
    name = "bool (and, True)"
    carrier = bool

    def multiply(self, a: bool, b: bool) -> bool:
        return a and b

    def unit(self) -> bool:
        return True


class BoolOr(Monoid[bool]):
    name = "bool (or, False)"
    carrier = bool

    def multiply(self, a: bool, b: bool) -> bool:
        return a or b

    def unit(self) -> bool:
        return False


class TrivialMonoid(Monoid[Unit]):
    """The monoid on the one-element set: UNIT is operand, result and unit."""

    name = "unit"
    carrier = Unit

    def multiply(self, a: Unit, b: Unit) -> Unit:
        return UNIT

    def unit(self) -> Unit:
        return UNIT


BOOLEANS: tuple[bool, bool] = (False, True)
