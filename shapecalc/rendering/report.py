"""
Report Rendering Module
=======================

Stateless formatting of the demo report - turns shapes and results into
lines of text. Writing the lines is the caller's job.

Design:
- Every method returns a list of lines (no I/O)
- Formatting precision is fixed: 2 decimals for measurements,
  1 decimal for ratio inputs, 3 decimals for ratios
"""

from typing import List

from shapecalc.geometry.constants import GOLDEN_RATIO, PI
from shapecalc.geometry.shapes import Calculable
from shapecalc.validation.result import Result

KEYWORDS_DEMONSTRATED = [
    ("Final", "PI and GOLDEN_RATIO constants"),
    ("Enum", "ShapeKind with circle, rectangle, triangle, square members"),
    ("dataclass", "Circle, Rectangle, Triangle, Square shape variants"),
    ("Protocol", "Calculable protocol with area(), perimeter(), describe()"),
    ("import", "geometry, validation and rendering packages"),
    ("return", "Early returns in validate_shape() and calculate_efficiency_ratio()"),
]


class ReportRenderer:
    """
    Formats each block of the console report.

    Attributes:
        rule_width: Number of dashes in a separator rule
    """

    def __init__(self, rule_width: int = 60):
        self.rule_width = rule_width

    def banner(self) -> List[str]:
        return ["=== Python Keywords Demo ===", ""]

    def constants_block(self) -> List[str]:
        return [
            "Mathematical Constants:",
            f"  PI = {PI}",
            f"  Golden Ratio = {GOLDEN_RATIO}",
            "",
        ]

    def rule(self) -> List[str]:
        return ["-" * self.rule_width]

    def shape_block(self, shape: Calculable) -> List[str]:
        """
        Describe a validated shape with its area and perimeter.

        Args:
            shape: Any Calculable shape

        Returns:
            Description line, area line, perimeter line and a blank line
        """
        return [
            shape.describe(),
            f"  Area:      {shape.area():.2f}",
            f"  Perimeter: {shape.perimeter():.2f}",
            "",
        ]

    def invalid_shape(self, message: str) -> List[str]:
        return [f"Invalid shape: {message}", ""]

    def ratio_line(self, width: float, height: float, result: Result) -> List[str]:
        """
        Format one efficiency ratio outcome.

        Args:
            width: Ratio numerator as given
            height: Ratio denominator as given
            result: Ok(ratio) or Err(message)

        Returns:
            Single indented line
        """
        if result.is_ok():
            return [f"  {width:.1f} / {height:.1f} = {result.value:.3f}"]
        return [f"  {width:.1f} / {height:.1f} = Error: {result.message}"]

    def closing(self) -> List[str]:
        return ["", "=== Demo Complete ==="]

    def summary_block(self) -> List[str]:
        width = max(len(keyword) for keyword, _ in KEYWORDS_DEMONSTRATED)
        lines = ["", "Keywords Demonstrated:"]
        for keyword, description in KEYWORDS_DEMONSTRATED:
            lines.append(f"  ✓ {keyword:<{width}} - {description}")
        return lines
