"""Object collections - finite, lazy or predicate-described."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from itertools import count, islice
from typing import Any


class ObjectCollection(ABC):
    """Description of the objects of a category.

    Collections may be infinite. They are never materialised by the
    library; iterable collections are consumed with take().
    """

    @abstractmethod
    def __contains__(self, obj: object) -> bool:
        pass

    @property
    def iterable(self) -> bool:
        """Whether objects can be enumerated."""
        return True

    def __iter__(self) -> Iterator[Any]:
        raise TypeError(f"{type(self).__name__} cannot be enumerated")

    def take(self, n: int) -> tuple[Any, ...]:
        """Return the first n objects of an enumerable collection."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return tuple(islice(iter(self), n))


@dataclass(frozen=True)
class FiniteObjects(ObjectCollection):
    """A finite, materialised collection of objects."""

    items: tuple[Any, ...] = ()

    @staticmethod
    def of(*items: Any) -> FiniteObjects:
        return FiniteObjects(items=tuple(items))

    def __contains__(self, obj: object) -> bool:
        return obj in self.items

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class LazyObjects(ObjectCollection):
    """A restartable, possibly infinite sequence of objects.

    The factory is called afresh for every iteration, so the sequence can
    be walked any number of times. Membership needs an explicit predicate
    because scanning an infinite sequence would never terminate.
    """

    factory: Callable[[], Iterable[Any]]
    member: Callable[[Any], bool]

    def __contains__(self, obj: object) -> bool:
        return self.member(obj)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.factory())


@dataclass(frozen=True)
class PredicateObjects(ObjectCollection):
    """An opaque collection known only through a membership test."""

    member: Callable[[Any], bool]
    description: str = ""

    @property
    def iterable(self) -> bool:
        return False

    def __contains__(self, obj: object) -> bool:
        return self.member(obj)


def integers() -> Iterator[int]:
    """Enumerate all integers: 0, 1, -1, 2, -2, ..."""
    yield 0
    for n in count(1):
        yield n
        yield -n
