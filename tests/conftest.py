"""Pytest configuration and fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest
from structlog.testing import capture_logs


@pytest.fixture
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events emitted during the test.

    Yields:
        List of event dicts (``event``, ``log_level`` and bound keys)
    """
    with capture_logs() as events:
        yield events
