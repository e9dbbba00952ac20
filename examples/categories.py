"""Compose Python functions as arrows and check the category laws."""

from __future__ import annotations

from morphic import (
    FunctionCategory,
    ListFunctor,
    PreorderCategory,
    TypeMismatch,
    check_category_laws,
    check_functor_laws,
    extensional_eq,
)


def main() -> None:
    py = FunctionCategory()
    length = py.arrow(len, str, int)
    double = py.arrow(lambda n: n * 2, int, int, name="double")
    show = py.arrow(str, int, str, name="show")

    pipeline = py.compose_all(show, double, length)
    print(f"{pipeline} applied to 'morphism' gives {pipeline('morphism')!r}")

    try:
        py.compose(length, double)
    except TypeMismatch as exc:
        print(f"rejected: {exc}")

    report = check_category_laws(
        py, [length, double, show], eq=extensional_eq(["", "arrow", 0, 7])
    )
    print(f"{py.name}: {report.outcome} over {report.cases} cases")

    order = PreorderCategory()
    arrows = [order.arrow(a, b) for a in range(-3, 4) for b in range(a, 4)]
    report = check_category_laws(order, arrows)
    print(f"{order.name}: {report.outcome} over {report.cases} cases")

    report = check_functor_laws(ListFunctor(), [[], [1, 2, 3]], [abs, lambda x: x - 1])
    print(f"list functor: {report.outcome} over {report.cases} cases")


if __name__ == "__main__":
    main()
