"""
Shape Calculations Demo
=======================

Prints the shape measurement and efficiency ratio report.

Architecture:
- geometry: Circle, Rectangle, Triangle, Square (immutable shapes)
- validation: validate_shape, calculate_efficiency_ratio (Ok/Err results)
- rendering: ReportRenderer (formatting)
- pipeline: Orchestration
"""

import sys

from shapecalc import main

if __name__ == "__main__":
    sys.exit(main())
