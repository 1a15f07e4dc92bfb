"""Amazon EventBridge adapter implementing the EventTransport port."""

from .transport import EventBridgeTransport

__all__ = ["EventBridgeTransport"]
