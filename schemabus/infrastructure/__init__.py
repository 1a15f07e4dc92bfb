"""
Infrastructure Layer - Cross-cutting Concerns.

    - Logging setup
"""

from .logging import BusContextFilter, LoggerAdapter, resolve_level, setup_logging

__all__ = [
    "BusContextFilter",
    "LoggerAdapter",
    "resolve_level",
    "setup_logging",
]
