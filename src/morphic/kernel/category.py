"""Category abstraction - objects, arrows, composition and identity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from morphic.kernel.errors import TypeMismatch
from morphic.kernel.objects import ObjectCollection

Obj = TypeVar("Obj")
M = TypeVar("M")


@dataclass(frozen=True)
class Arrow:
    """A morphism between two objects.

    Arrows compare by endpoints and name only. The optional fn is the
    arrow's action on values, for categories whose arrows are functions.
    """

    source: Any
    target: Any
    name: str = ""
    fn: Callable[[Any], Any] | None = field(default=None, compare=False, repr=False)

    def __call__(self, value: Any) -> Any:
        if self.fn is None:
            raise TypeError(f"arrow {self.name or self!r} has no action on values")
        return self.fn(value)

    def agrees_with(self, other: Arrow, points: Iterable[Any]) -> bool:
        """Same endpoints, and same result on every point in the source.

        Points that are not instances of a type-valued source are skipped.
        """
        if self.source != other.source or self.target != other.target:
            return False
        for point in points:
            if isinstance(self.source, type) and not isinstance(point, self.source):
                continue
            if self(point) != other(point):
                return False
        return True

    def __str__(self) -> str:
        return f"{self.name}: {_label(self.source)} -> {_label(self.target)}"


def _label(obj: Any) -> str:
    return obj.__name__ if isinstance(obj, type) else repr(obj)


class Category(ABC, Generic[Obj, M]):
    """A collection of objects and composable morphisms.

    Subclasses must guarantee:
    - compose is associative
    - identity(obj) is a two-sided neutral element for compose
    """

    name: str = "category"

    @property
    @abstractmethod
    def objects(self) -> ObjectCollection:
        """Description of this category's objects."""
        pass

    @abstractmethod
    def source(self, morphism: M) -> Obj:
        pass

    @abstractmethod
    def target(self, morphism: M) -> Obj:
        pass

    @abstractmethod
    def identity(self, obj: Obj) -> M:
        """Return the neutral morphism for obj."""
        pass

    @abstractmethod
    def _compose(self, outer: M, inner: M) -> M:
        """Compose two morphisms already known to line up."""
        pass

    def equal(self, left: M, right: M) -> bool:
        """Equality of morphisms used when a law check is given no eq."""
        return left == right

    def composable(self, outer: M, inner: M) -> bool:
        return self.target(inner) == self.source(outer)

    def compose(self, outer: M, inner: M) -> M:
        """Return outer ∘ inner.

        Raises:
            TypeMismatch: If the target of inner is not the source of outer
        """
        if not self.composable(outer, inner):
            raise TypeMismatch.for_compose(
                outer, inner, expected=self.source(outer), actual=self.target(inner)
            )
        return self._compose(outer, inner)

    def compose_all(self, *morphisms: M) -> M:
        """Compose right to left: compose_all(h, g, f) == h ∘ g ∘ f."""
        if not morphisms:
            raise ValueError("compose_all needs at least one morphism")
        result = morphisms[-1]
        for outer in reversed(morphisms[:-1]):
            result = self.compose(outer, result)
        return result

    def _require_object(self, obj: Obj) -> None:
        if obj not in self.objects:
            raise TypeMismatch(
                f"{obj!r} is not an object of {self.name}", expected=self.objects, actual=obj
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
