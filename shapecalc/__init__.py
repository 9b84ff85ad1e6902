"""
shapecalc
=========

Bounded Context: Shape measurement and dimension validation demo.

Architecture:

    shapecalc/
    ├── geometry/          # Pure shape data (immutable, no validation)
    │   ├── constants.py   # PI, GOLDEN_RATIO
    │   └── shapes.py      # Circle, Rectangle, Triangle, Square, Calculable
    │
    ├── validation/        # Explicit checks returning Ok/Err
    │   ├── result.py      # Ok, Err, InvalidInputError
    │   └── validators.py  # validate_shape, calculate_efficiency_ratio
    │
    ├── rendering/         # Report formatting (stateless)
    │   └── report.py      # ReportRenderer
    │
    ├── logging/           # Structured JSON logs (stderr)
    ├── config.py          # DemoConfig
    └── pipeline.py        # Orchestration (DemoPipeline, main)

Usage:

    from shapecalc import Circle, validate_shape

    circle = Circle(radius=5.0)
    result = validate_shape(circle)
    if result.is_ok():
        print(circle.describe(), circle.area())
    else:
        print(result.message)
"""

# Geometry Layer (immutable, no validation)
from shapecalc.geometry import (
    PI,
    GOLDEN_RATIO,
    Calculable,
    Circle,
    Rectangle,
    Shape,
    ShapeKind,
    Square,
    Triangle,
)

# Validation Layer
from shapecalc.validation import (
    Ok,
    Err,
    Result,
    InvalidInputError,
    validate_shape,
    calculate_efficiency_ratio,
)

# Pipeline (orchestration)
from shapecalc.config import DemoConfig
from shapecalc.pipeline import DemoPipeline, DemoSummary, main

__all__ = [
    # Geometry
    "PI",
    "GOLDEN_RATIO",
    "Calculable",
    "Circle",
    "Rectangle",
    "Shape",
    "ShapeKind",
    "Square",
    "Triangle",
    # Validation
    "Ok",
    "Err",
    "Result",
    "InvalidInputError",
    "validate_shape",
    "calculate_efficiency_ratio",
    # Pipeline
    "DemoConfig",
    "DemoPipeline",
    "DemoSummary",
    "main",
]

__version__ = "1.0.0"
