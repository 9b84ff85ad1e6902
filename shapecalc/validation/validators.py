"""
Shape Validators
================

Stateless checks applied to shapes before their measurements are trusted.

Design:
- Pure functions (no state, no logging)
- First failing rule wins, later rules never run
- Failures are returned as Err values, never raised
- Triangle has no upper bound, unlike the other variants
"""

from shapecalc.geometry.shapes import Circle, Rectangle, Shape, Square, Triangle
from shapecalc.validation.result import Err, Ok, Result

MAX_DIMENSION = 1000.0


def validate_shape(shape: Shape) -> Result:
    """
    Check that a shape's dimensions are usable.

    Args:
        shape: Any shape variant

    Returns:
        Ok(None) if every rule passes, otherwise Err with the message of
        the first rule that failed

    Raises:
        TypeError: If shape is not one of the known variants
    """
    if isinstance(shape, Circle):
        if shape.radius <= 0:
            return Err("Circle radius must be positive")
        if shape.radius > MAX_DIMENSION:
            return Err("Circle radius too large (max 1000)")

    elif isinstance(shape, Rectangle):
        if shape.width <= 0 or shape.height <= 0:
            return Err("Rectangle dimensions must be positive")
        if shape.width > MAX_DIMENSION or shape.height > MAX_DIMENSION:
            return Err("Rectangle dimensions too large (max 1000)")

    elif isinstance(shape, Triangle):
        if shape.base <= 0 or shape.height <= 0:
            return Err("Triangle dimensions must be positive")

    elif isinstance(shape, Square):
        if shape.side <= 0:
            return Err("Square side must be positive")
        if shape.side > MAX_DIMENSION:
            return Err("Square side too large (max 1000)")

    else:
        raise TypeError(f"Unsupported shape type: {type(shape).__name__}")

    return Ok()


def calculate_efficiency_ratio(width: float, height: float) -> Result:
    """
    Compute width / height for strictly positive dimensions.

    Args:
        width: Horizontal extent
        height: Vertical extent

    Returns:
        Ok(width / height), or Err naming the first non-positive argument
    """
    if width <= 0:
        return Err("Width must be positive")

    if height <= 0:
        return Err("Height must be positive")

    return Ok(width / height)
