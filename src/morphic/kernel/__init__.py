"""Kernel layer - pure abstractions for morphic."""

from morphic.kernel.category import Arrow, Category
from morphic.kernel.errors import LawViolation, MorphicError, TypeMismatch
from morphic.kernel.functor import Functor, compose, identity
from morphic.kernel.monoid import Monoid, MonoidCategory, ProductMonoid, mconcat
from morphic.kernel.objects import (
    FiniteObjects,
    LazyObjects,
    ObjectCollection,
    PredicateObjects,
    integers,
)
from morphic.kernel.trace import Evidence, Trace

__all__ = [
    "Category",
    "Arrow",
    "Monoid",
    "MonoidCategory",
    "ProductMonoid",
    "mconcat",
    "Functor",
    "compose",
    "identity",
    # Objects
    "ObjectCollection",
    "FiniteObjects",
    "LazyObjects",
    "PredicateObjects",
    "integers",
    # Errors
    "MorphicError",
    "TypeMismatch",
    "LawViolation",
    # Tracing
    "Evidence",
    "Trace",
]
