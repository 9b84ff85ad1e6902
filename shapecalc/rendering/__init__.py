"""
Rendering Layer
===============

Bounded Context: Console report formatting (stateless).
"""

from shapecalc.rendering.report import ReportRenderer, KEYWORDS_DEMONSTRATED

__all__ = [
    "ReportRenderer",
    "KEYWORDS_DEMONSTRATED",
]
