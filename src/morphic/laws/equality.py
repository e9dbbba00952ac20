"""Equivalences for carriers where == is too strict or undefined."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any

from morphic.kernel.category import Arrow

Equivalence = Callable[[Any, Any], bool]


def approx_eq(rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> Equivalence:
    """Equality up to floating-point rounding, as math.isclose.

    The absolute tolerance covers results that land near zero, where a
    relative tolerance alone accepts nothing but exact zero.
    """

    def eq(left: float, right: float) -> bool:
        return math.isclose(left, right, rel_tol=rel_tol, abs_tol=abs_tol)

    return eq


def extensional_eq(points: Iterable[Any]) -> Equivalence:
    """Arrows are equal when endpoints match and they agree on every point.

    Only points that are instances of an arrow's source are applied, so a
    single pool of points can serve arrows with different domains.
    """
    pool = tuple(points)

    def eq(left: Arrow, right: Arrow) -> bool:
        return left.agrees_with(right, pool)

    return eq
