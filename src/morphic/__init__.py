import logging

from .instances import (
    UNIT,
    BoolAnd,
    BoolOr,
    FloatAddition,
    FunctionCategory,
    IntAddition,
    IntMultiplication,
    ListFunctor,
    OptionalFunctor,
    PreorderCategory,
    StringConcat,
    TrivialMonoid,
    TupleConcat,
    Unit,
)
from .kernel import (
    Arrow,
    Category,
    FiniteObjects,
    Functor,
    LawViolation,
    LazyObjects,
    Monoid,
    MorphicError,
    PredicateObjects,
    ProductMonoid,
    Trace,
    TypeMismatch,
    mconcat,
)
from .laws import (
    LawCheckConfig,
    LawReport,
    approx_eq,
    assert_lawful,
    check_category_laws,
    check_functor_laws,
    check_monoid_laws,
    extensional_eq,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Abstractions
    "Category",
    "Monoid",
    "Functor",
    "Arrow",
    "ProductMonoid",
    "mconcat",
    # Objects
    "FiniteObjects",
    "LazyObjects",
    "PredicateObjects",
    # Instances
    "IntAddition",
    "IntMultiplication",
    "FloatAddition",
    "StringConcat",
    "TupleConcat",
    "BoolAnd",
    "BoolOr",
    "TrivialMonoid",
    "Unit",
    "UNIT",
    "FunctionCategory",
    "PreorderCategory",
    "ListFunctor",
    "OptionalFunctor",
    # Laws
    "check_monoid_laws",
    "check_category_laws",
    "check_functor_laws",
    "assert_lawful",
    "LawReport",
    "LawCheckConfig",
    "approx_eq",
    "extensional_eq",
    # Errors
    "MorphicError",
    "TypeMismatch",
    "LawViolation",
    # Tracing
    "Trace",
]
