"""Error types for composition and law checking."""

from __future__ import annotations

from typing import Any


class MorphicError(Exception):
    """Base class for all morphic errors."""


class TypeMismatch(MorphicError, TypeError):
    """Error raised when morphisms are composed across misaligned objects.

    Carries both morphisms and the two objects that failed to line up,
    so callers can report exactly where the chain broke.
    """

    def __init__(
        self,
        message: str,
        outer: Any = None,
        inner: Any = None,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        self.outer = outer
        self.inner = inner
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @classmethod
    def for_compose(cls, outer: Any, inner: Any, expected: Any, actual: Any) -> TypeMismatch:
        return cls(
            f"cannot compose {outer!r} after {inner!r}: "
            f"target {actual!r} does not match source {expected!r}",
            outer=outer,
            inner=inner,
            expected=expected,
            actual=actual,
        )

    def __repr__(self) -> str:
        return (
            f"TypeMismatch({super().__repr__()}, "
            f"expected={self.expected!r}, actual={self.actual!r})"
        )


class LawViolation(MorphicError, AssertionError):
    """Error raised when a law check finds a counterexample.

    Attributes:
        law: Name of the violated law (e.g. "associativity")
        counterexample: The sample tuple that violated it
        instance: Name of the instance under test
        left: Evaluated left-hand side of the law equation
        right: Evaluated right-hand side of the law equation
    """

    def __init__(
        self,
        law: str,
        counterexample: tuple[Any, ...],
        instance: str = "",
        left: Any = None,
        right: Any = None,
    ) -> None:
        self.law = law
        self.counterexample = counterexample
        self.instance = instance
        self.left = left
        self.right = right
        subject = f" for {instance}" if instance else ""
        super().__init__(
            f"{law} law violated{subject}: counterexample {counterexample!r} "
            f"gives {left!r} != {right!r}"
        )

    def __repr__(self) -> str:
        return f"LawViolation(law={self.law!r}, counterexample={self.counterexample!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.law, self.counterexample, self.instance, self.left, self.right))
