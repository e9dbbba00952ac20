"""Tests for functors and their laws."""

import pytest

from morphic import ListFunctor, OptionalFunctor, check_functor_laws
from morphic.kernel import compose, identity

from fakes import ReversingFunctor

FUNCTIONS = [lambda x: x + 1, lambda x: x * 2, abs]


def test_compose_and_identity():
    inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
    assert inc_then_double(3) == 8
    assert identity("x") == "x"


class TestListFunctor:
    def test_preserves_container_type(self):
        functor = ListFunctor()

        assert functor.fmap(str, [1, 2]) == ["1", "2"]
        assert functor.fmap(str, (1, 2)) == ("1", "2")

    def test_rejects_other_containers(self):
        with pytest.raises(TypeError):
            ListFunctor().fmap(str, {1: 2})

    def test_lift(self):
        lifted = ListFunctor().lift(lambda x: x * 10)
        assert lifted([1, 2]) == [10, 20]

    def test_laws(self):
        report = check_functor_laws(ListFunctor(), [[], [1, -2, 3], (4, 5)], FUNCTIONS)

        assert report.ok
        assert report.laws == ("identity", "composition")
        # 3 identity cases, then 9 function pairs against 3 values
        assert report.cases == 3 + 27


class TestOptionalFunctor:
    def test_none_short_circuits(self):
        calls = []

        def spy(x):
            calls.append(x)
            return x

        assert OptionalFunctor().fmap(spy, None) is None
        assert calls == []
        assert OptionalFunctor().fmap(spy, 4) == 4
        assert calls == [4]

    def test_laws(self):
        report = check_functor_laws(OptionalFunctor(), [None, 0, -7, 12], FUNCTIONS)
        assert report.ok


def test_broken_functor_fails_identity():
    report = check_functor_laws(ReversingFunctor(), [[], [1, 2, 3]], FUNCTIONS)

    assert report.violation.law == "identity"
    assert report.violation.counterexample == ([1, 2, 3],)
    assert report.violation.left == [3, 2, 1]
