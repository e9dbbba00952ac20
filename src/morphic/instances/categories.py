"""Concrete categories: Python types and functions, integer preorder."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from morphic.kernel.category import Arrow, Category
from morphic.kernel.errors import TypeMismatch
from morphic.kernel.functor import compose, identity
from morphic.kernel.objects import LazyObjects, ObjectCollection, PredicateObjects, integers


# Values used to compare arrows by behaviour when a check is given no eq.
DEFAULT_POINTS: tuple[Any, ...] = (0, 1, -7, 2.5, -0.5, "", "ab", "Xy", (), (1, 2), None)


class FunctionCategory(Category[type, Arrow]):
    """The category of Python types and functions.

    Objects are types, morphisms are Arrows wrapping a one-argument
    function. Composing with an identity returns the other arrow unchanged
    and composite names are flat ("h ∘ g ∘ f"). Arrows are equal when they
    agree on every point of their source drawn from points.
    """

    name = "Py"

    def __init__(self, points: Iterable[Any] = DEFAULT_POINTS) -> None:
        self.points = tuple(points)
        self._objects = PredicateObjects(
            lambda obj: isinstance(obj, type), description="python types"
        )

    @property
    def objects(self) -> ObjectCollection:
        return self._objects

    def arrow(
        self,
        fn: Callable[[Any], Any],
        source: type,
        target: type,
        name: str | None = None,
    ) -> Arrow:
        """Wrap fn as an arrow source -> target."""
        self._require_object(source)
        self._require_object(target)
        return Arrow(source, target, name or getattr(fn, "__name__", "f"), fn=fn)

    def source(self, morphism: Arrow) -> type:
        return morphism.source

    def target(self, morphism: Arrow) -> type:
        return morphism.target

    def identity(self, obj: type) -> Arrow:
        self._require_object(obj)
        return Arrow(obj, obj, f"id_{obj.__name__}", fn=identity)

    def _is_identity(self, morphism: Arrow) -> bool:
        return (
            morphism.fn is identity
            and morphism.source is morphism.target
            and morphism == self.identity(morphism.source)
        )

    def equal(self, left: Arrow, right: Arrow) -> bool:
        return left.agrees_with(right, self.points)

    def _compose(self, outer: Arrow, inner: Arrow) -> Arrow:
        if self._is_identity(inner):
            return outer
        if self._is_identity(outer):
            return inner
        return Arrow(
            inner.source,
            outer.target,
            f"{outer.name} ∘ {inner.name}",
            fn=compose(outer, inner),
        )


class PreorderCategory(Category[int, Arrow]):
    """The integers ordered by <=, as a thin category.

    There is exactly one arrow a -> b when a <= b and none otherwise.
    Objects form an infinite lazy sequence 0, 1, -1, 2, -2, ...
    """

    name = "(Z, <=)"
    label = "≤"

    def __init__(self) -> None:
        self._objects = LazyObjects(
            integers, member=lambda obj: isinstance(obj, int) and not isinstance(obj, bool)
        )

    @property
    def objects(self) -> ObjectCollection:
        return self._objects

    def arrow(self, a: int, b: int) -> Arrow:
        """The unique arrow a -> b.

        Raises:
            TypeMismatch: If a > b, since no such arrow exists
        """
        self._require_object(a)
        self._require_object(b)
        if a > b:
            raise TypeMismatch(f"no arrow {a} -> {b} since {a} > {b}", expected=b, actual=a)
        return Arrow(a, b, self.label)

    def source(self, morphism: Arrow) -> int:
        return morphism.source

    def target(self, morphism: Arrow) -> int:
        return morphism.target

    def identity(self, obj: int) -> Arrow:
        self._require_object(obj)
        return Arrow(obj, obj, self.label)

    def _compose(self, outer: Arrow, inner: Arrow) -> Arrow:
        return Arrow(inner.source, outer.target, self.label)
