"""Tests for categories, arrows and object collections."""

import pytest

from morphic import (
    Arrow,
    FiniteObjects,
    FunctionCategory,
    IntAddition,
    LazyObjects,
    PredicateObjects,
    PreorderCategory,
    TypeMismatch,
    check_category_laws,
    extensional_eq,
)
from morphic.kernel import integers

from fakes import ConstantComposition


@pytest.fixture
def py() -> FunctionCategory:
    return FunctionCategory()


class TestFunctionCategory:
    """Python types and functions"""

    def test_compose_chains_functions(self, py):
        length = py.arrow(len, str, int)
        double = py.arrow(lambda n: n * 2, int, int, name="double")

        composed = py.compose(double, length)

        assert composed("abc") == 6
        assert composed.source is str
        assert composed.target is int
        assert composed.name == "double ∘ len"

    def test_misaligned_compose_raises(self, py):
        length = py.arrow(len, str, int)
        double = py.arrow(lambda n: n * 2, int, int, name="double")

        with pytest.raises(TypeMismatch) as exc_info:
            py.compose(length, double)

        assert exc_info.value.expected is str
        assert exc_info.value.actual is int
        assert isinstance(exc_info.value, TypeError)

    def test_identity_is_neutral(self, py):
        length = py.arrow(len, str, int)

        assert py.compose(py.identity(int), length) is length
        assert py.compose(length, py.identity(str)) is length
        assert py.identity(int)(7) == 7

    def test_compose_all(self, py):
        length = py.arrow(len, str, int)
        double = py.arrow(lambda n: n * 2, int, int, name="double")
        show = py.arrow(str, int, str, name="show")

        pipeline = py.compose_all(show, double, length)

        assert pipeline("abcd") == "8"
        assert pipeline.name == "show ∘ double ∘ len"

    def test_compose_all_needs_a_morphism(self, py):
        with pytest.raises(ValueError):
            py.compose_all()

    def test_objects_are_types(self, py):
        assert int in py.objects
        assert "int" not in py.objects
        assert not py.objects.iterable
        with pytest.raises(TypeMismatch):
            py.arrow(len, "str", int)

    def test_laws_hold_extensionally(self, py):
        arrows = [
            py.arrow(len, str, int),
            py.arrow(lambda n: n * 2, int, int, name="double"),
            py.arrow(str, int, str, name="show"),
            py.arrow(str.upper, str, str, name="upper"),
            py.identity(int),
        ]
        report = check_category_laws(py, arrows, eq=extensional_eq(["", "ab", 0, 3]))

        assert report.ok
        assert report.laws[-1] == "identity endpoints"


def test_arrow_without_action():
    arrow = Arrow(1, 2, "≤")
    with pytest.raises(TypeError):
        arrow(1)
    assert str(arrow) == "≤: 1 -> 2"


def test_arrows_compare_by_endpoints_and_name():
    assert Arrow(int, str, "f", fn=str) == Arrow(int, str, "f", fn=repr)
    assert Arrow(int, str, "f") != Arrow(int, str, "g")


class TestPreorderCategory:
    """Integers ordered by <="""

    def test_arrow_exists_only_upwards(self):
        order = PreorderCategory()

        assert order.arrow(1, 3) == Arrow(1, 3, "≤")
        assert order.arrow(2, 2) == order.identity(2)
        with pytest.raises(TypeMismatch):
            order.arrow(3, 1)

    def test_compose(self):
        order = PreorderCategory()

        assert order.compose(order.arrow(3, 5), order.arrow(1, 3)) == order.arrow(1, 5)
        with pytest.raises(TypeMismatch):
            order.compose(order.arrow(1, 3), order.arrow(3, 5))

    def test_objects_are_lazy_integers(self):
        order = PreorderCategory()

        assert 0 in order.objects
        assert -12 in order.objects
        assert True not in order.objects
        assert "a" not in order.objects
        assert order.objects.take(5) == (0, 1, -1, 2, -2)
        # restartable
        assert order.objects.take(3) == (0, 1, -1)

    def test_identity_of_non_object(self):
        with pytest.raises(TypeMismatch):
            PreorderCategory().identity("x")

    def test_laws(self):
        order = PreorderCategory()
        arrows = [order.arrow(a, b) for a in range(-2, 3) for b in range(a, 3)]

        report = check_category_laws(order, arrows)

        assert report.ok
        assert report.laws == (
            "associativity",
            "left identity",
            "right identity",
            "identity endpoints",
        )


class TestMonoidCategory:
    """A monoid lifted to a one-object category"""

    def test_single_object(self):
        category = IntAddition().as_category()

        assert list(category.objects) == [int]
        assert category.source(5) is int
        assert category.target(5) is int

    def test_compose_is_multiply(self):
        category = IntAddition().as_category()

        assert category.compose(2, 3) == 5
        assert category.identity(int) == 0

    def test_identity_of_foreign_object(self):
        with pytest.raises(TypeMismatch):
            IntAddition().as_category().identity(str)


class TestObjectCollections:
    """Finite, lazy and predicate-described objects"""

    def test_finite(self):
        objects = FiniteObjects.of("A", "B")

        assert "A" in objects
        assert "C" not in objects
        assert len(objects) == 2
        assert objects.take(1) == ("A",)

    def test_lazy_is_restartable(self):
        objects = LazyObjects(integers, member=lambda o: isinstance(o, int))

        assert list(objects.take(4)) == list(objects.take(4))

    def test_predicate_cannot_be_enumerated(self):
        objects = PredicateObjects(lambda o: o > 0, description="positive")

        assert 3 in objects
        assert -3 not in objects
        with pytest.raises(TypeError):
            objects.take(2)

    def test_take_rejects_negative(self):
        with pytest.raises(ValueError):
            FiniteObjects.of(1).take(-1)


class TestFunctionEquality:
    """Arrows of Py are compared by what they do"""

    def test_arrow_named_like_identity_keeps_its_function(self, py):
        double = py.arrow(lambda n: n * 2, int, int, name="double")
        impostor = py.arrow(lambda n: n + 1, int, int, name="id_int")

        assert py.compose(double, impostor)(3) == 8
        assert py.compose(impostor, double)(3) == 7

    def test_default_equality_compares_behaviour(self, py):
        inc = py.arrow(lambda n: n + 1, int, int, name="inc")
        also_inc = py.arrow(lambda n: 1 + n, int, int, name="inc")
        dec = py.arrow(lambda n: n - 1, int, int, name="inc")

        assert py.equal(inc, also_inc)
        assert not py.equal(inc, dec)

    def test_points_are_configurable(self):
        py = FunctionCategory(points=[10])
        inc = py.arrow(lambda n: n + 1, int, int, name="inc")
        clipped = py.arrow(lambda n: min(n + 1, 11), int, int, name="inc")

        assert py.equal(inc, clipped)

    def test_laws_hold_without_explicit_eq(self, py):
        arrows = [
            py.arrow(len, str, int),
            py.arrow(lambda n: n * 2, int, int, name="double"),
            py.arrow(str, int, str, name="show"),
        ]
        assert check_category_laws(py, arrows).ok

    def test_broken_composition_is_detected(self):
        py = ConstantComposition()
        double = py.arrow(lambda n: n * 2, int, int, name="double")
        inc = py.arrow(lambda n: n + 1, int, int, name="inc")

        report = check_category_laws(py, [double, inc])

        assert not report.ok
        assert report.violation.law == "left identity"
        assert report.violation.counterexample == (double,)
