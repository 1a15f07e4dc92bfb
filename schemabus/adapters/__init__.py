"""
Adapters Layer - External Integrations.

This layer contains adapters that translate between our domain
and external systems. Outbound adapters implement the EventTransport port.
"""

__all__ = []
