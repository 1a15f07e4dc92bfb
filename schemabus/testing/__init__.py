"""
Testing Infrastructure - Test Support Utilities.

This module provides utilities for testing code that publishes events:
    - Fakes: Fake implementations of ports for testing
    - Builders: Test data builders for creating domain objects
    - Fixtures: pytest fixtures for common test setup
"""

from .builders import ORDER_SCHEMA, EnvelopeBuilder, EventDefinitionBuilder
from .fakes import FakeTransport

__all__ = [
    # Fakes
    "FakeTransport",
    # Builders
    "EnvelopeBuilder",
    "EventDefinitionBuilder",
    "ORDER_SCHEMA",
]
