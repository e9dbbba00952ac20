"""Functor abstraction over Python functions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def identity(value: A) -> A:
    return value


def compose(g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """Return g ∘ f."""

    def composed(value: A) -> C:
        return g(f(value))

    return composed


class Functor(ABC):
    """A structure-preserving map on containers.

    Subclasses must guarantee:
    - fmap(identity, fa) == fa
    - fmap(compose(g, f), fa) == fmap(g, fmap(f, fa))
    """

    name: str = "functor"

    @abstractmethod
    def fmap(self, f: Callable[[Any], Any], fa: Any) -> Any:
        """Apply f inside the container fa."""
        pass

    def lift(self, f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Turn f into a function between containers."""

        def lifted(fa: Any) -> Any:
            return self.fmap(f, fa)

        return lifted

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
