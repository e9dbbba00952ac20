"""Concrete instances of the kernel abstractions."""

from morphic.instances.categories import FunctionCategory, PreorderCategory
from morphic.instances.functors import ListFunctor, OptionalFunctor
from morphic.instances.monoids import (
    BOOLEANS,
    UNIT,
    BoolAnd,
    BoolOr,
    FloatAddition,
    IntAddition,
    IntMultiplication,
    StringConcat,
    TrivialMonoid,
    TupleConcat,
    Unit,
)

__all__ = [
    # Monoids
    "IntAddition",
    "IntMultiplication",
    "FloatAddition",
    "StringConcat",
    "TupleConcat",
    "BoolAnd",
    "BoolOr",
    "TrivialMonoid",
    "Unit",
    "UNIT",
    "BOOLEANS",
    # Categories
    "FunctionCategory",
    "PreorderCategory",
    # Functors
    "ListFunctor",
    "OptionalFunctor",
]
