"""Law checkers for monoids, categories and functors.

Each checker evaluates both sides of every law equation over a finite set
of cases and stops at the first counterexample. Checks are pure: the only
side effects are log records and, when a Trace is supplied, evidence.
"""

from __future__ import annotations

import logging
import operator
import random
from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import AbstractContextManager, nullcontext
from itertools import product
from typing import Any

from morphic.kernel.category import Category
from morphic.kernel.errors import LawViolation
from morphic.kernel.functor import Functor, compose, identity
from morphic.kernel.monoid import Monoid
from morphic.kernel.trace import Trace
from morphic.laws.config import LawCheckConfig
from morphic.laws.equality import Equivalence
from morphic.laws.report import LawReport
from morphic.laws.sampling import Samples, draw, pairs, triples

logger = logging.getLogger(__name__)

# A law case: the sample tuple, then the left and right sides of the equation.
Case = tuple[tuple[Any, ...], Any, Any]
# Each law may pin its own equivalence; None means the caller's eq.
Law = tuple[str, Callable[[], Iterator[Case]], Equivalence | None]


def check_monoid_laws(
    monoid: Monoid[Any],
    samples: Samples,
    eq: Equivalence | None = None,
    config: LawCheckConfig | None = None,
    trace: Trace | None = None,
    exhaustive: bool | None = None,
) -> LawReport:
    """Check associativity and two-sided identity of a monoid.

    Args:
        monoid: The monoid under test
        samples: Carrier values, or a callable drawing one value from a Random
        eq: Equivalence on the carrier; defaults to ==
        config: Case budget and seed; defaults to LawCheckConfig()
        trace: Optional trace receiving one event per law
        exhaustive: Overrides config.exhaustive when given

    Returns:
        LawReport with the first violation found, if any
    """
    config = _configure(config, exhaustive)
    rng = random.Random(config.seed)
    values = draw(samples, config, rng)
    multiply = monoid.multiply
    unit = monoid.unit()

    def associativity() -> Iterator[Case]:
        for x, y, z in triples(values, config, rng):
            yield (x, y, z), multiply(multiply(x, y), z), multiply(x, multiply(y, z))

    def left_identity() -> Iterator[Case]:
        for x in values:
            yield (x,), multiply(unit, x), x

    def right_identity() -> Iterator[Case]:
        for x in values:
            yield (x,), multiply(x, unit), x

    laws: list[Law] = [
        ("associativity", associativity, None),
        ("left identity", left_identity, None),
        ("right identity", right_identity, None),
    ]
    return _evaluate(monoid.name, laws, eq or operator.eq, trace)


def check_category_laws(
    category: Category[Any, Any],
    morphisms: Samples,
    objects: Samples | None = None,
    eq: Equivalence | None = None,
    config: LawCheckConfig | None = None,
    trace: Trace | None = None,
    exhaustive: bool | None = None,
) -> LawReport:
    """Check associativity and identity laws of a category.

    Associativity is evaluated only on composable triples, found through
    the category's source and target. Identity endpoints are checked for
    the given objects, or else for the first sample_size objects of an
    enumerable category, or else for the endpoints of the sampled morphisms.

    Raises:
        TypeMismatch: If compose rejects a triple that source/target
            declared composable
    """
    config = _configure(config, exhaustive)
    rng = random.Random(config.seed)
    arrows = draw(morphisms, config, rng)
    if objects is not None:
        objs = draw(objects, config, rng)
    elif category.objects.iterable:
        objs = category.objects.take(config.sample_size)
    else:
        objs = _endpoints(category, arrows)

    source, target = category.source, category.target
    comp = category.compose

    def before(m: Any) -> list[Any]:
        return [a for a in arrows if target(a) == source(m)]

    def associativity() -> Iterator[Case]:
        for x, y, z in triples(arrows, config, rng, before=before):
            yield (x, y, z), comp(comp(x, y), z), comp(x, comp(y, z))

    def left_identity() -> Iterator[Case]:
        for x in arrows:
            yield (x,), comp(category.identity(target(x)), x), x

    def right_identity() -> Iterator[Case]:
        for x in arrows:
            yield (x,), comp(x, category.identity(source(x))), x

    def identity_endpoints() -> Iterator[Case]:
        for obj in objs:
            unit = category.identity(obj)
            yield (obj,), (source(unit), target(unit)), (obj, obj)

    laws: list[Law] = [
        ("associativity", associativity, None),
        ("left identity", left_identity, None),
        ("right identity", right_identity, None),
        ("identity endpoints", identity_endpoints, operator.eq),
    ]
    return _evaluate(category.name, laws, eq or category.equal, trace)


def check_functor_laws(
    functor: Functor,
    values: Samples,
    functions: Sequence[Callable[[Any], Any]],
    eq: Equivalence | None = None,
    config: LawCheckConfig | None = None,
    trace: Trace | None = None,
    exhaustive: bool | None = None,
) -> LawReport:
    """Check fmap preserves identity and composition.

    The composition law is evaluated for every ordered pair (g, f) of the
    given functions against each container value, within max_cases.
    """
    config = _configure(config, exhaustive)
    rng = random.Random(config.seed)
    containers = draw(values, config, rng)
    fns = tuple(functions)
    fmap = functor.fmap

    def identity_law() -> Iterator[Case]:
        for fa in containers:
            yield (fa,), fmap(identity, fa), fa

    def composition_law() -> Iterator[Case]:
        for (g, f), fa in pairs(list(product(fns, repeat=2)), containers, config, rng):
            yield (g, f, fa), fmap(compose(g, f), fa), fmap(g, fmap(f, fa))

    laws: list[Law] = [
        ("identity", identity_law, None),
        ("composition", composition_law, None),
    ]
    return _evaluate(functor.name, laws, eq or operator.eq, trace)


def assert_lawful(instance: Monoid[Any] | Category[Any, Any] | Functor, *args: Any, **kwargs: Any) -> LawReport:
    """Run the matching checker and raise LawViolation on failure.

    Returns:
        The passing LawReport
    """
    if isinstance(instance, Monoid):
        report = check_monoid_laws(instance, *args, **kwargs)
    elif isinstance(instance, Category):
        report = check_category_laws(instance, *args, **kwargs)
    elif isinstance(instance, Functor):
        report = check_functor_laws(instance, *args, **kwargs)
    else:
        raise TypeError(f"no laws known for {type(instance).__name__}")
    report.raise_for_violation()
    return report


def _configure(config: LawCheckConfig | None, exhaustive: bool | None) -> LawCheckConfig:
    config = config or LawCheckConfig()
    if exhaustive is not None and exhaustive != config.exhaustive:
        config = config.model_copy(update={"exhaustive": exhaustive})
    return config


def _endpoints(category: Category[Any, Any], arrows: Iterable[Any]) -> tuple[Any, ...]:
    found: list[Any] = []
    for arrow in arrows:
        for obj in (category.source(arrow), category.target(arrow)):
            if obj not in found:
                found.append(obj)
    return tuple(found)


def _span(trace: Trace | None, kind: str, name: str) -> AbstractContextManager[dict[str, Any]]:
    if trace is None:
        return nullcontext({})
    return trace.check(name) if kind == "check" else trace.law(name)


def _evaluate(instance: str, laws: list[Law], eq: Equivalence, trace: Trace | None) -> LawReport:
    """Evaluate laws in order, stopping at the first counterexample."""
    evaluated: list[str] = []
    total = 0
    with _span(trace, "check", instance) as check_info:
        for law, cases, law_eq in laws:
            equal = law_eq or eq
            evaluated.append(law)
            count = 0
            violation: LawViolation | None = None
            with _span(trace, "law", law) as law_info:
                for case, left, right in cases():
                    count += 1
                    if not equal(left, right):
                        violation = LawViolation(law, case, instance=instance, left=left, right=right)
                        break
                law_info.update(cases=count, outcome="pass" if violation is None else "fail")
            total += count

            if violation is not None:
                logger.warning("%s", violation)
                check_info.update(outcome="fail", cases=total)
                return LawReport.Fail(instance, tuple(evaluated), total, violation)
            logger.debug("%s: %s law held over %d cases", instance, law, count)

        check_info.update(outcome="pass", cases=total)
        return LawReport.Pass(instance, tuple(evaluated), total)
