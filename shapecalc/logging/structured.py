"""
Structured JSON Logger
======================

One JSON object per log line, written to stderr unless a stream is given.

Each entry carries the component that emitted it, a LogEvent name, a
human-readable message and optional metadata such as the shape kind or
the ratio inputs:

    {"timestamp": "2026-10-19T15:30:45.123456+00:00", "level": "INFO",
     "component": "pipeline", "event": "shape.rejected",
     "message": "Circle radius must be positive",
     "metadata": {"kind": "circle", "radius": -1.0}}

Loggers are looked up by name in the logging registry, so two
StructuredLoggers with the same name share one handler. Passing a stream
points that shared handler at the new stream.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .events import LogEvent


class JSONFormatter(logging.Formatter):
    """Emit the record message unchanged; it is already a JSON document."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


class StructuredLogger:
    """
    Logger that writes LogEvent entries as JSON.

    Attributes:
        component: Name recorded in every entry (e.g., "pipeline")
        logger_name: Registry name of the underlying logger
        logger: Underlying logging.Logger
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None,
        stream: Optional[TextIO] = None
    ):
        """
        Args:
            component: Name recorded in every entry
            level: Minimum level written (default: INFO)
            logger_name: Registry name (default: shapecalc.<component>)
            stream: Destination for entries; replaces the stream of an
                already configured logger with the same name
        """
        self.component = component
        self.logger_name = logger_name or f"shapecalc.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        handler = self._json_handler()
        if handler is None:
            handler = logging.StreamHandler(stream)
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)
        elif stream is not None:
            handler.setStream(stream)

    def _json_handler(self) -> Optional[logging.StreamHandler]:
        for handler in self.logger.handlers:
            if isinstance(handler, logging.StreamHandler) and isinstance(handler.formatter, JSONFormatter):
                return handler
        return None

    def _log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': logging.getLevelName(level),
            'component': self.component,
            'event': event.value,
            'message': message,
        }
        if metadata:
            entry['metadata'] = metadata
        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(level, json.dumps(entry))

    def debug(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str, metadata: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """Log at ERROR, summarizing exc_info (type and message) in the entry."""
        self._log(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)


def create_logger(
    component: str,
    level: int = logging.INFO,
    stream: Optional[TextIO] = None
) -> StructuredLogger:
    """
    Build a StructuredLogger named shapecalc.<component>.

    Example:
        >>> logger = create_logger("pipeline", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level, stream=stream)
