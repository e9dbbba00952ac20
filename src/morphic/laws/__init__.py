"""Law checking for monoids, categories and functors.

Checks sample the instance, evaluate both sides of each law equation and
report the first counterexample as a LawViolation inside a LawReport.
"""

from .checker import assert_lawful, check_category_laws, check_functor_laws, check_monoid_laws
from .config import LawCheckConfig
from .equality import Equivalence, approx_eq, extensional_eq
from .report import LawReport
from .sampling import Samples, draw, pairs, triples

__all__ = [
    "check_monoid_laws",
    "check_category_laws",
    "check_functor_laws",
    "assert_lawful",
    "LawReport",
    "LawCheckConfig",
    "Equivalence",
    "approx_eq",
    "extensional_eq",
    "Samples",
    "draw",
    "triples",
    "pairs",
]
