"""Shared pytest fixtures for Loggy tests."""

import logging
from datetime import datetime, timezone

import pytest
from loguru import logger as loguru_logger

from loggy import Loggy
from loggy.logging_config import InterceptHandler

FIXED_NOW = datetime(2026, 10, 19, 9, 5, 3, tzinfo=timezone.utc)


def fixed_clock(tz):
    """Always 2026-10-19 09:05:03 UTC, shown in the requested zone."""
    return FIXED_NOW.astimezone(tz)


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def make_loggy():
    """Build a Loggy with a frozen clock; keyword options go to RenderConfig."""

    def _make(**options):
        return Loggy(clock=fixed_clock, **options)

    return _make


@pytest.fixture
def sample_entries():
    return [
        ("ERROR", "disk full"),
        ("INFO", "backup started"),
        ("WARNING", "slow response"),
        ("INFO", "backup finished"),
        ("ERROR", "backup failed"),
    ]


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() so caplog keeps seeing loggy records."""
    yield
    package_logger = logging.getLogger("loggy")
    package_logger.handlers = []
    package_logger.propagate = True
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, InterceptHandler):
            root.removeHandler(handler)
    loguru_logger.remove()
