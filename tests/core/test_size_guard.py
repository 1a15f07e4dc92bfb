"""Tests for SizeGuard."""

import pytest

from schemabus.application.services.size_guard import DEFAULT_MAX_ENTRY_BYTES, SizeGuard
from schemabus.domain.exceptions import PayloadTooLargeError
from schemabus.testing import EnvelopeBuilder


class TestSizeGuard:
    def test_default_limit(self):
        assert SizeGuard().max_entry_bytes == DEFAULT_MAX_ENTRY_BYTES == 10 * 1024

    def test_small_envelope_passes(self):
        guard = SizeGuard()
        envelope = EnvelopeBuilder().build()

        guard.check(envelope)
        assert guard.fits(envelope)

    def test_oversized_envelope_raises(self):
        envelope = EnvelopeBuilder().with_detail_type("Big").with_padding(20_000).build()

        with pytest.raises(PayloadTooLargeError) as exc_info:
            SizeGuard().check(envelope)

        assert exc_info.value.size == envelope.size
        assert exc_info.value.limit == 10 * 1024
        assert exc_info.value.detail_type == "Big"

    def test_limit_is_inclusive(self):
        envelope = EnvelopeBuilder().build()

        SizeGuard(max_entry_bytes=envelope.size).check(envelope)
        with pytest.raises(PayloadTooLargeError):
            SizeGuard(max_entry_bytes=envelope.size - 1).check(envelope)

    def test_configurable_limit(self):
        envelope = EnvelopeBuilder().with_padding(20_000).build()
        assert SizeGuard(max_entry_bytes=256 * 1024).fits(envelope)

    def test_invalid_limit_raises(self):
        with pytest.raises(ValueError):
            SizeGuard(max_entry_bytes=0)
