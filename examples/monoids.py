"""Check the built-in monoids, then a broken one, and print the verdicts."""

from __future__ import annotations

import logging
import random

from morphic import (
    BoolAnd,
    BoolOr,
    IntAddition,
    IntMultiplication,
    LawCheckConfig,
    Monoid,
    StringConcat,
    Trace,
    TrivialMonoid,
    UNIT,
    check_category_laws,
    check_monoid_laws,
)
from morphic.instances import BOOLEANS

logging.basicConfig(level=logging.INFO)


class Subtraction(Monoid[int]):
    name = "int (-, 0)"
    carrier = int

    def multiply(self, a: int, b: int) -> int:
        return a - b

    def unit(self) -> int:
        return 0


def ints(rng: random.Random) -> int:
    return rng.randint(-100, 100)


def words(rng: random.Random) -> str:
    return "".join(rng.choice("xyz") for _ in range(rng.randint(0, 3)))


def main() -> None:
    config = LawCheckConfig.from_env()
    checks = [
        (IntAddition(), ints),
        (IntMultiplication(), ints),
        (StringConcat(), words),
        (BoolAnd(), BOOLEANS),
        (BoolOr(), BOOLEANS),
        (TrivialMonoid(), [UNIT]),
        (Subtraction(), ints),
    ]

    for monoid, samples in checks:
        trace = Trace()
        report = check_monoid_laws(monoid, samples, config=config, trace=trace)
        lifted = check_category_laws(monoid.as_category(), samples, config=config)
        verdict = "lawful" if report.ok else f"broken ({report.violation})"
        print(f"{monoid.name:<20} {report.cases:>5} cases  {verdict}")
        print(f"{'':<20} as category agrees: {report.same_outcome(lifted)}")
        for ev in trace.find("law"):
            print(f"{'':<20} - {ev.info['law']}: {ev.info['cases']} cases, {ev.duration_ms:.2f}ms")


if __name__ == "__main__":
    main()
