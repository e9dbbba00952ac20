"""Concrete functors over built-in containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from morphic.kernel.functor import Functor


class ListFunctor(Functor):
    """Maps over lists and tuples, preserving the container type."""

    name = "list"

    def fmap(self, f: Callable[[Any], Any], fa: list[Any] | tuple[Any, ...]) -> Any:
        if isinstance(fa, tuple):
            return tuple(f(x) for x in fa)
        if isinstance(fa, list):
            return [f(x) for x in fa]
        raise TypeError(f"ListFunctor expects a list or tuple, got {type(fa).__name__}")


class OptionalFunctor(Functor):
    """Maps over an optional value; None stays None and f is never called."""

    name = "optional"

    def fmap(self, f: Callable[[Any], Any], fa: Any) -> Any:
        if fa is None:
            return None
        return f(fa)
