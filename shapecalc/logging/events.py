"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (category.action)

Event Naming Convention:
    <category>.<action>

    category: demo, shape, ratio
    action: started, validated, rejected, computed
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - demo.*: Driver lifecycle
    - shape.*: Shape validation outcomes
    - ratio.*: Efficiency ratio outcomes
    """

    # ========== Demo Events ==========
    DEMO_STARTED = "demo.started"
    """Driver started writing the report."""

    DEMO_COMPLETED = "demo.completed"
    """Driver finished writing the report."""

    # ========== Shape Events ==========
    SHAPE_VALIDATED = "shape.validated"
    """Shape passed validation and was measured."""

    SHAPE_REJECTED = "shape.rejected"
    """Shape failed validation."""

    # ========== Ratio Events ==========
    RATIO_COMPUTED = "ratio.computed"
    """Efficiency ratio computed."""

    RATIO_REJECTED = "ratio.rejected"
    """Efficiency ratio inputs were invalid."""


# Event categories for filtering
SHAPE_EVENTS = {
    LogEvent.SHAPE_VALIDATED,
    LogEvent.SHAPE_REJECTED,
}

RATIO_EVENTS = {
    LogEvent.RATIO_COMPUTED,
    LogEvent.RATIO_REJECTED,
}
