"""
Outbound Adapters - External Service Implementations.

Outbound adapters implement ports to connect to external services.
Each service gets its own cohesive module.

Modules:
    - eventbridge: Amazon EventBridge transport
"""

__all__ = []
