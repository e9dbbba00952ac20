"""Monoid abstraction and its lifting to a one-object category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from morphic.kernel.category import Category
from morphic.kernel.objects import FiniteObjects, ObjectCollection

T = TypeVar("T")
U = TypeVar("U")


class Monoid(ABC, Generic[T]):
    """A set with an associative binary operation and an identity element.

    Subclasses must guarantee:
    - multiply is total and closed over the carrier
    - multiply(multiply(a, b), c) == multiply(a, multiply(b, c))
    - multiply(unit(), a) == a == multiply(a, unit())
    """

    name: str = "monoid"
    carrier: Any = object

    @abstractmethod
    def multiply(self, a: T, b: T) -> T:
        pass

    @abstractmethod
    def unit(self) -> T:
        pass

    def as_category(self) -> MonoidCategory[T]:
        """Lift this monoid to a single-object category."""
        return MonoidCategory(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MonoidCategory(Category[Any, T]):
    """A monoid viewed as a category with exactly one object.

    The object is the monoid's carrier, the morphisms are its elements,
    composition is multiply and the identity morphism is unit().
    """

    def __init__(self, monoid: Monoid[T]) -> None:
        self.monoid = monoid
        self.name = f"{monoid.name} as category"
        self._objects = FiniteObjects.of(monoid.carrier)

    @property
    def objects(self) -> ObjectCollection:
        return self._objects

    def source(self, morphism: T) -> Any:
        return self.monoid.carrier

    def target(self, morphism: T) -> Any:
        return self.monoid.carrier

    def identity(self, obj: Any) -> T:
        self._require_object(obj)
        return self.monoid.unit()

    def _compose(self, outer: T, inner: T) -> T:
        return self.monoid.multiply(outer, inner)


def mconcat(monoid: Monoid[T], items: Iterable[T]) -> T:
    """Fold items left to right, starting from unit()."""
    result = monoid.unit()
    for item in items:
        result = monoid.multiply(result, item)
    return result


@dataclass(frozen=True)
class ProductMonoid(Monoid[tuple[T, U]]):
    """Componentwise monoid on pairs drawn from two monoids."""

    left: Monoid[T]
    right: Monoid[U]

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"{self.left.name} × {self.right.name}"

    @property
    def carrier(self) -> Any:  # type: ignore[override]
        return (self.left.carrier, self.right.carrier)

    def multiply(self, a: tuple[T, U], b: tuple[T, U]) -> tuple[T, U]:
        return (self.left.multiply(a[0], b[0]), self.right.multiply(a[1], b[1]))

    def unit(self) -> tuple[T, U]:
        return (self.left.unit(), self.right.unit())
