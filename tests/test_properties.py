"""Property-based checks with hypothesis-drawn samples."""

from hypothesis import given
from hypothesis import strategies as st

from morphic import (
    IntAddition,
    IntMultiplication,
    StringConcat,
    TupleConcat,
    check_category_laws,
    check_monoid_laws,
    mconcat,
)

from fakes import Subtraction, WrongUnitAddition


@given(st.lists(st.integers(), max_size=6))
def test_int_addition_holds_for_any_sample(xs):
    assert check_monoid_laws(IntAddition(), xs).ok


@given(st.lists(st.integers(min_value=-50, max_value=50), max_size=6))
def test_int_multiplication_holds_for_any_sample(xs):
    assert check_monoid_laws(IntMultiplication(), xs).ok


@given(st.lists(st.text(max_size=5), max_size=6))
def test_string_concat_holds_for_any_sample(xs):
    assert check_monoid_laws(StringConcat(), xs).ok


@given(st.lists(st.tuples(st.integers()), max_size=5))
def test_tuple_concat_holds_for_any_sample(xs):
    assert check_monoid_laws(TupleConcat(), xs).ok


@given(st.lists(st.integers()))
def test_mconcat_matches_sum(xs):
    assert mconcat(IntAddition(), xs) == sum(xs)


@given(st.lists(st.text()))
def test_mconcat_matches_join(xs):
    assert mconcat(StringConcat(), xs) == "".join(xs)


@given(st.lists(st.integers(min_value=-20, max_value=20), max_size=5))
def test_lifting_preserves_verdict(xs):
    for monoid in (IntAddition(), Subtraction(), WrongUnitAddition()):
        direct = check_monoid_laws(monoid, xs)
        lifted = check_category_laws(monoid.as_category(), xs)
        assert direct.same_outcome(lifted)
