import math

import pytest

from shapecalc.geometry import (
    GOLDEN_RATIO,
    PI,
    Calculable,
    Circle,
    Rectangle,
    ShapeKind,
    Square,
    Triangle,
    format_plain,
)


def test_constants_are_fixed_approximations():
    assert PI == 3.14159265359
    assert GOLDEN_RATIO == 1.618033988749


def test_circle_measurements():
    circle = Circle(radius=5.0)
    assert circle.area() == pytest.approx(78.54, abs=0.005)
    assert circle.perimeter() == pytest.approx(31.42, abs=0.005)
    assert circle.describe() == "Circle with radius 5.00"


@pytest.mark.parametrize("radius", [0.5, 1.0, 5.0, 123.456, 1000.0])
def test_circle_uses_fixed_pi(radius):
    circle = Circle(radius=radius)
    assert circle.area() == pytest.approx(PI * radius ** 2)
    assert circle.perimeter() == pytest.approx(2 * PI * radius)


def test_rectangle_measurements():
    rect = Rectangle(width=10.0, height=6.0)
    assert rect.area() == 60.0
    assert rect.perimeter() == 32.0
    assert rect.describe() == "Rectangle 10x6"


def test_triangle_assumes_right_angle():
    tri = Triangle(base=8.0, height=12.0)
    assert tri.area() == 48.0
    assert tri.hypotenuse() == pytest.approx(math.sqrt(208))
    assert tri.perimeter() == pytest.approx(8 + 12 + math.sqrt(208))
    assert f"{tri.perimeter():.2f}" == "34.42"
    assert tri.describe() == "Triangle with base 8 and height 12"


def test_square_measurements():
    square = Square(side=7.0)
    assert square.area() == 49.0
    assert square.perimeter() == 28.0
    assert square.describe() == "Square with side 7"


def test_describe_keeps_fractional_digits():
    assert Square(side=2.5).describe() == "Square with side 2.5"
    assert Rectangle(width=1.25, height=3.0).describe() == "Rectangle 1.25x3"
    assert Circle(radius=1.0 / 3.0).describe() == "Circle with radius 0.33"


def test_format_plain():
    assert format_plain(10.0) == "10"
    assert format_plain(-5.0) == "-5"
    assert format_plain(0.1) == "0.1"
    assert format_plain(7) == "7"


def test_format_plain_never_uses_exponent_notation():
    assert format_plain(0.00001) == "0.00001"
    assert format_plain(1e16) == "10000000000000000"
    assert Rectangle(width=0.00001, height=1.0).describe() == "Rectangle 0.00001x1"
    assert Triangle(base=1e16, height=2.0).describe() == (
        "Triangle with base 10000000000000000 and height 2"
    )


def test_triangle_hypotenuse_overflows_for_huge_legs():
    tri = Triangle(base=1e200, height=1e200)
    assert math.isinf(tri.hypotenuse())
    assert math.isinf(tri.perimeter())


def test_construction_does_not_validate():
    circle = Circle(radius=-2.0)
    assert circle.area() == pytest.approx(PI * 4.0)
    assert circle.perimeter() < 0


def test_shapes_are_immutable():
    square = Square(side=3.0)
    with pytest.raises(AttributeError):
        square.side = 4.0


def test_shapes_compare_by_value():
    assert Rectangle(width=2.0, height=3.0) == Rectangle(width=2.0, height=3.0)
    assert Rectangle(width=2.0, height=3.0) != Rectangle(width=3.0, height=2.0)


@pytest.mark.parametrize("shape, kind, dimensions", [
    (Circle(radius=1.0), ShapeKind.CIRCLE, {"radius": 1.0}),
    (Rectangle(width=2.0, height=3.0), ShapeKind.RECTANGLE, {"width": 2.0, "height": 3.0}),
    (Triangle(base=4.0, height=5.0), ShapeKind.TRIANGLE, {"base": 4.0, "height": 5.0}),
    (Square(side=6.0), ShapeKind.SQUARE, {"side": 6.0}),
])
def test_kind_and_dimensions(shape, kind, dimensions):
    assert shape.kind is kind
    assert shape.dimensions() == dimensions
    assert isinstance(shape, Calculable)
