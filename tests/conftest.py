"""Shared pytest configuration for schemabus tests."""

import logging

import pytest

from schemabus.infrastructure.logging import NOISY_LOGGERS
from schemabus.testing.fixtures import (  # noqa: F401
    bus,
    envelope_builder,
    fake_transport,
    order_created,
)


@pytest.fixture(autouse=True)
def restore_loggers():
    """Undo level and handler changes made by setup_logging during a test."""
    loggers = [logging.getLogger(name) for name in ("schemabus", *NOISY_LOGGERS)]
    saved = [(lg, lg.level, list(lg.handlers)) for lg in loggers]
    yield
    for lg, level, handlers in saved:
        lg.setLevel(level)
        lg.handlers[:] = handlers
