"""Drawing samples and law cases."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator, Sequence, Sized
from itertools import islice, product
from typing import Any, TypeVar

from morphic.laws.config import LawCheckConfig

T = TypeVar("T")

SampleGenerator = Callable[[random.Random], Any]
Samples = Iterable[Any] | SampleGenerator


def draw(samples: Samples, config: LawCheckConfig, rng: random.Random) -> tuple[Any, ...]:
    """Materialise samples into a tuple.

    A generator callable is called sample_size times with rng. A sized
    iterable is used in full; any other iterable (possibly infinite) is cut
    to sample_size values.
    """
    if callable(samples) and not isinstance(samples, Iterable):
        return tuple(samples(rng) for _ in range(config.sample_size))
    if isinstance(samples, Sized):
        return tuple(samples)
    return tuple(islice(samples, config.sample_size))


def is_exhaustive(values: Sequence[Any], config: LawCheckConfig, arity: int = 3) -> bool:
    """Whether every combination of values fits within the case budget."""
    return config.exhaustive or len(values) ** arity <= config.max_cases


def triples(
    values: Sequence[T],
    config: LawCheckConfig,
    rng: random.Random,
    before: Callable[[T], Sequence[T]] | None = None,
) -> Iterator[tuple[T, T, T]]:
    """Yield triples (x, y, z) such that x ∘ y ∘ z is defined.

    before(m) lists the values that may be composed on the right of m;
    when omitted every value may follow every other, as in a monoid.
    Small domains are enumerated in full, in lexicographic order; larger
    ones get up to max_cases random triples drawn from rng.
    """
    def candidates(m: T) -> Sequence[T]:
        return values if before is None else before(m)

    if not values:
        return

    if is_exhaustive(values, config):
        if before is None:
            yield from product(values, repeat=3)
            return
        for x in values:
            for y in candidates(x):
                for z in candidates(y):
                    yield (x, y, z)
        return

    for _ in range(config.max_cases):
        x = rng.choice(values)
        ys = candidates(x)
        if not ys:
            continue
        y = rng.choice(ys)
        zs = candidates(y)
        if not zs:
            continue
        yield (x, y, rng.choice(zs))


def pairs(
    left: Sequence[T],
    right: Sequence[Any],
    config: LawCheckConfig,
    rng: random.Random,
) -> Iterator[tuple[T, Any]]:
    """Yield pairs from left × right, in full or up to max_cases at random."""
    if not left or not right:
        return
    if config.exhaustive or len(left) * len(right) <= config.max_cases:
        yield from product(left, right)
        return
    for _ in range(config.max_cases):
        yield (rng.choice(left), rng.choice(right))
