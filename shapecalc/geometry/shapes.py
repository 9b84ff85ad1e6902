"""
Geometric Shapes Module
=======================

Pure geometric representations - NO state, NO side effects.

Design:
- Closed set of variants (Circle, Rectangle, Triangle, Square)
- Immutable shapes (frozen dataclass pattern)
- Shared behavior through the Calculable protocol
- Construction does not validate: a Circle with a negative radius is
  representable, validation is an explicit pass (shapecalc.validation)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Protocol, runtime_checkable

import numpy as np

from shapecalc.geometry.constants import PI


class ShapeKind(str, Enum):
    """Shape variant enumeration."""
    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    SQUARE = "square"


@runtime_checkable
class Calculable(Protocol):
    """Protocol for shapes with measurable geometry (interface)."""

    def area(self) -> float:
        """Enclosed area."""
        ...

    def perimeter(self) -> float:
        """Length of the boundary."""
        ...

    def describe(self) -> str:
        """Human-readable one-line description."""
        ...


def format_plain(value: float) -> str:
    """
    Format a number with its shortest round-trip digits, never in
    exponent notation.

    Integral values drop the fractional part, so descriptions read
    "Rectangle 10x6" rather than "Rectangle 10.0x6.0".

    Example:
        >>> format_plain(10.0)
        '10'
        >>> format_plain(2.5)
        '2.5'
        >>> format_plain(0.00001)
        '0.00001'
    """
    return np.format_float_positional(float(value), trim="-")


@dataclass(frozen=True)
class Circle:
    """
    Circle defined by its radius.

    Attributes:
        radius: Distance from center to boundary
    """

    radius: float

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.CIRCLE

    def dimensions(self) -> Dict[str, float]:
        return {"radius": self.radius}

    def area(self) -> float:
        return PI * self.radius * self.radius

    def perimeter(self) -> float:
        return 2.0 * PI * self.radius

    def describe(self) -> str:
        return f"Circle with radius {self.radius:.2f}"


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle.

    Attributes:
        width: Horizontal extent
        height: Vertical extent
    """

    width: float
    height: float

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.RECTANGLE

    def dimensions(self) -> Dict[str, float]:
        return {"width": self.width, "height": self.height}

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2.0 * (self.width + self.height)

    def describe(self) -> str:
        return f"Rectangle {format_plain(self.width)}x{format_plain(self.height)}"


@dataclass(frozen=True)
class Triangle:
    """
    Right triangle given by its two legs.

    The perimeter assumes base and height are perpendicular and derives
    the hypotenuse from them. A general triangle would need a third side.
    Legs are squared directly, so very long legs overflow to an infinite
    perimeter.

    Attributes:
        base: First leg
        height: Second leg, perpendicular to base
    """

    base: float
    height: float

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.TRIANGLE

    def dimensions(self) -> Dict[str, float]:
        return {"base": self.base, "height": self.height}

    def area(self) -> float:
        return 0.5 * self.base * self.height

    def hypotenuse(self) -> float:
        """Length of the side opposite the right angle."""
        return float(np.sqrt(self.base * self.base + self.height * self.height))

    def perimeter(self) -> float:
        return self.base + self.height + self.hypotenuse()

    def describe(self) -> str:
        return (
            f"Triangle with base {format_plain(self.base)} "
            f"and height {format_plain(self.height)}"
        )


@dataclass(frozen=True)
class Square:
    """
    Square defined by its side length.

    Attributes:
        side: Length of each side
    """

    side: float

    @property
    def kind(self) -> ShapeKind:
        return ShapeKind.SQUARE

    def dimensions(self) -> Dict[str, float]:
        return {"side": self.side}

    def area(self) -> float:
        return self.side * self.side

    def perimeter(self) -> float:
        return 4.0 * self.side

    def describe(self) -> str:
        return f"Square with side {format_plain(self.side)}"


# Tagged union of every supported variant
Shape = Circle | Rectangle | Triangle | Square
