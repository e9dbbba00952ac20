"""Law-check results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from morphic.kernel.errors import LawViolation


@dataclass(frozen=True)
class LawReport:
    """
    Outcome of checking an instance against its laws.

    Kinds:
    - pass: every evaluated case satisfied every law
    - fail: a counterexample was found; violation names the law and the sample

    Attributes:
        instance: Name of the checked instance
        laws: Laws evaluated, in order; a failing law is the last entry
        cases: Number of law cases evaluated
    """

    outcome: Literal["pass", "fail"]
    instance: str
    laws: tuple[str, ...] = ()
    cases: int = 0
    violation: LawViolation | None = None

    @staticmethod
    def Pass(instance: str, laws: tuple[str, ...], cases: int) -> LawReport:
        return LawReport(outcome="pass", instance=instance, laws=laws, cases=cases)

    @staticmethod
    def Fail(instance: str, laws: tuple[str, ...], cases: int, violation: LawViolation) -> LawReport:
        return LawReport(
            outcome="fail", instance=instance, laws=laws, cases=cases, violation=violation
        )

    @property
    def ok(self) -> bool:
        return self.outcome == "pass"

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_violation(self) -> None:
        """Raise the carried LawViolation if the check failed."""
        if self.violation is not None:
            raise self.violation

    def same_outcome(self, other: LawReport) -> bool:
        """Whether two reports agree on outcome, law and counterexample."""
        if self.outcome != other.outcome:
            return False
        if self.violation is None or other.violation is None:
            return self.violation is other.violation
        return (
            self.violation.law == other.violation.law
            and self.violation.counterexample == other.violation.counterexample
        )
