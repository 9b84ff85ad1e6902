"""Pytest configuration and shared fixtures."""

import io
import json
import logging

import pytest

from shapecalc.logging import StructuredLogger


@pytest.fixture
def log_capture(request):
    """DEBUG-level StructuredLogger writing into a buffer, plus a reader for its entries."""
    stream = io.StringIO()
    logger = StructuredLogger(
        component="test",
        level=logging.DEBUG,
        logger_name=f"shapecalc.tests.{request.node.name}",
        stream=stream,
    )

    def entries():
        return [json.loads(line) for line in stream.getvalue().splitlines()]

    return logger, entries
