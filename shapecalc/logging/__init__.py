"""
Structured Logging for shapecalc
================================

Bounded Context: Observability

Design:
- JSON output, written to stderr so the report on stdout stays clean
- Typed events (enums prevent typos)
- Contextual metadata (shape kind, dimensions, ratio inputs)

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapecalc.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="pipeline")
    >>> logger.info(
    ...     event=LogEvent.DEMO_STARTED,
    ...     message="Writing report",
    ...     metadata={'shape_count': 4}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
