"""
Mathematical Constants
======================

Fixed-precision approximations, defined once and never recomputed.
"""

from typing import Final

PI: Final[float] = 3.14159265359
GOLDEN_RATIO: Final[float] = 1.618033988749
