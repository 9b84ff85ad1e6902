"""
Validation Layer
================

Bounded Context: Dimension checks and derived ratios.

Public API
----------
    Ok, Err, Result: Explicit success/failure values
    InvalidInputError: Raised only by Err.unwrap()
    validate_shape: Positivity and bound checks per shape variant
    calculate_efficiency_ratio: width / height for positive inputs
    MAX_DIMENSION: Upper bound for circles, rectangles and squares

Example:
    >>> from shapecalc.validation import calculate_efficiency_ratio
    >>> calculate_efficiency_ratio(10.0, 0.0)
    Err(message='Height must be positive')
"""

from .result import Ok, Err, Result, InvalidInputError
from .validators import MAX_DIMENSION, validate_shape, calculate_efficiency_ratio

__all__ = [
    'Ok',
    'Err',
    'Result',
    'InvalidInputError',
    'MAX_DIMENSION',
    'validate_shape',
    'calculate_efficiency_ratio',
]
