"""
Demo Pipeline Module
====================

Bounded Context: Orchestration of the shape demo.

Design:
- Orchestrator: validation + measurement + rendering + logging
- Dependencies injected (config, renderer, logger, inputs)
- Every validation failure is printed and logged, never raised

Dependencies:
- shapecalc.geometry (shapes, constants)
- shapecalc.validation (validate_shape, calculate_efficiency_ratio)
- shapecalc.rendering (ReportRenderer)
- shapecalc.logging (StructuredLogger)
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple

from shapecalc.config import DemoConfig
from shapecalc.geometry.shapes import Circle, Rectangle, Shape, Square, Triangle
from shapecalc.logging import LogEvent, StructuredLogger, create_logger
from shapecalc.rendering.report import ReportRenderer
from shapecalc.validation.validators import calculate_efficiency_ratio, validate_shape

DEMO_SHAPES: Tuple[Shape, ...] = (
    Circle(radius=5.0),
    Rectangle(width=10.0, height=6.0),
    Triangle(base=8.0, height=12.0),
    Square(side=7.0),
)

DEMO_DIMENSIONS: Tuple[Tuple[float, float], ...] = (
    (16.0, 9.0),
    (4.0, 3.0),
    (-5.0, 10.0),  # negative width
    (10.0, 0.0),   # zero height
)


@dataclass(frozen=True)
class DemoSummary:
    """Outcome counts for one pipeline run."""

    valid_shapes: int
    invalid_shapes: int
    ratios_computed: int
    ratios_rejected: int


class DemoPipeline:
    """
    Runs shapes and dimension pairs through validation and prints a report.

    Usage:
        pipeline = DemoPipeline()
        summary = pipeline.run()
    """

    def __init__(
        self,
        config: Optional[DemoConfig] = None,
        renderer: Optional[ReportRenderer] = None,
        logger: Optional[StructuredLogger] = None,
        shapes: Sequence[Shape] = DEMO_SHAPES,
        dimensions: Sequence[Tuple[float, float]] = DEMO_DIMENSIONS,
    ):
        """
        Args:
            config: Driver configuration (default: DemoConfig())
            renderer: Report formatter (default: sized from config)
            logger: Structured logger (default: "pipeline" at config level)
            shapes: Shapes to validate and measure
            dimensions: (width, height) pairs for the ratio block
        """
        self.config = config or DemoConfig()
        self.renderer = renderer or ReportRenderer(rule_width=self.config.rule_width)
        self.logger = logger or create_logger("pipeline", level=self.config.logging_level)
        self.shapes = list(shapes)
        self.dimensions = list(dimensions)

    def run(self, out: Optional[TextIO] = None) -> DemoSummary:
        """
        Write the full report.

        Args:
            out: Destination stream (default: sys.stdout)

        Returns:
            Counts of accepted and rejected inputs
        """
        out = out or sys.stdout
        self.logger.info(
            event=LogEvent.DEMO_STARTED,
            message="Writing report",
            metadata={
                'shape_count': len(self.shapes),
                'dimension_count': len(self.dimensions),
            }
        )

        lines: List[str] = []
        lines += self.renderer.banner()
        lines += self.renderer.constants_block()

        lines.append("Shape Calculations (using protocol methods):")
        lines += self.renderer.rule()
        shape_lines, valid, invalid = self._shape_section()
        lines += shape_lines

        lines += self.renderer.rule()
        lines.append("Efficiency Ratio Calculations:")
        ratio_lines, computed, rejected = self._ratio_section()
        lines += ratio_lines

        lines += self.renderer.closing()
        if self.config.show_summary:
            lines += self.renderer.summary_block()

        out.write("\n".join(lines) + "\n")

        summary = DemoSummary(
            valid_shapes=valid,
            invalid_shapes=invalid,
            ratios_computed=computed,
            ratios_rejected=rejected,
        )
        self.logger.info(
            event=LogEvent.DEMO_COMPLETED,
            message="Report written",
            metadata={
                'valid_shapes': summary.valid_shapes,
                'invalid_shapes': summary.invalid_shapes,
                'ratios_computed': summary.ratios_computed,
                'ratios_rejected': summary.ratios_rejected,
            }
        )
        return summary

    def _shape_section(self) -> Tuple[List[str], int, int]:
        lines: List[str] = []
        valid = invalid = 0

        for shape in self.shapes:
            result = validate_shape(shape)
            metadata = {'kind': shape.kind.value, **shape.dimensions()}

            if result.is_err():
                invalid += 1
                lines += self.renderer.invalid_shape(result.message)
                self.logger.info(
                    event=LogEvent.SHAPE_REJECTED,
                    message=result.message,
                    metadata=metadata
                )
                continue

            valid += 1
            lines += self.renderer.shape_block(shape)
            self.logger.debug(
                event=LogEvent.SHAPE_VALIDATED,
                message=shape.describe(),
                metadata=metadata
            )

        return lines, valid, invalid

    def _ratio_section(self) -> Tuple[List[str], int, int]:
        lines: List[str] = []
        computed = rejected = 0

        for width, height in self.dimensions:
            result = calculate_efficiency_ratio(width, height)
            lines += self.renderer.ratio_line(width, height, result)
            metadata = {'width': width, 'height': height}

            if result.is_ok():
                computed += 1
                self.logger.debug(
                    event=LogEvent.RATIO_COMPUTED,
                    message="Efficiency ratio computed",
                    metadata={**metadata, 'ratio': result.value}
                )
            else:
                rejected += 1
                self.logger.info(
                    event=LogEvent.RATIO_REJECTED,
                    message=result.message,
                    metadata=metadata
                )

        return lines, computed, rejected


def main() -> int:
    """Run the demo with default configuration. Reads no arguments."""
    DemoPipeline().run(sys.stdout)
    return 0
