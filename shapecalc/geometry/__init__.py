"""
Geometry Layer
==============

Bounded Context: Pure shape data and the measurements derived from it.

Responsibilities:
- Shape representation (immutable)
- Area, perimeter and description via the Calculable protocol
- NO validation, NO output, NO logging

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Construction never fails (validation is a separate pass)
"""

from shapecalc.geometry.constants import PI, GOLDEN_RATIO
from shapecalc.geometry.shapes import (
    Calculable,
    Circle,
    Rectangle,
    Shape,
    ShapeKind,
    Square,
    Triangle,
    format_plain,
)

__all__ = [
    "PI",
    "GOLDEN_RATIO",
    "Calculable",
    "Circle",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Square",
    "Triangle",
    "format_plain",
]
