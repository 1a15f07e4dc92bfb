"""pytest fixtures for schemabus testing."""

import pytest

from ..bus import Bus
from ..event import EventDefinition
from .builders import EnvelopeBuilder, EventDefinitionBuilder
from .fakes import FakeTransport

# ============================================================================
# Fake Fixtures
# ============================================================================


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Provide a fake transport that accepts everything."""
    return FakeTransport()


# ============================================================================
# Bus Fixtures
# ============================================================================


@pytest.fixture
def bus(fake_transport: FakeTransport) -> Bus:
    """Provide a bus backed by the fake transport."""
    return Bus("test-bus", fake_transport)


@pytest.fixture
def order_created(bus: Bus) -> EventDefinition:
    """Provide the OrderCreated event definition on the test bus."""
    return EventDefinitionBuilder.order_created(bus)


# ============================================================================
# Builder Fixtures
# ============================================================================


@pytest.fixture
def envelope_builder() -> EnvelopeBuilder:
    """Provide an envelope builder."""
    return EnvelopeBuilder()
