"""Logging setup for schemabus."""

import logging
import sys
from typing import Any

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(event_bus_name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# AWS SDK loggers that drown out bus logs at DEBUG
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")

logger = logging.getLogger(__name__)


class BusContextFilter(logging.Filter):
    """Give every record an event_bus_name so the format string can use it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "event_bus_name"):
            record.event_bus_name = "-"
        return True


class _BusHandler(logging.StreamHandler):
    pass


def resolve_level(level: str | int) -> int:
    """
    Turn a level name or number into a logging level.

    Unknown names fall back to INFO with a warning, the same way get_env
    treats values it cannot cast.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        logger.warning(f"Invalid log level {level!r}, using default: INFO")
        return logging.INFO
    return value


def setup_logging(
    level: str | int = "INFO",
    format_string: str | None = None,
    logger_name: str = "schemabus",
) -> logging.Logger:
    """
    Set up logging for schemabus.

    Safe to call repeatedly: the level is updated every time but only one
    handler is ever attached. AWS SDK loggers are held at WARNING unless
    the application has already set their level.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        format_string: Optional custom format string
        logger_name: Name for the logger

    Returns:
        Configured logger

    Example:
        logger = setup_logging(level="DEBUG")
        logger.debug("Debug message")
    """
    target = logging.getLogger(logger_name)
    target.setLevel(resolve_level(level))

    if not any(isinstance(h, _BusHandler) for h in target.handlers):
        handler = _BusHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT, DATE_FORMAT))
        handler.addFilter(BusContextFilter())
        target.addHandler(handler)

    for name in NOISY_LOGGERS:
        noisy = logging.getLogger(name)
        if noisy.level == logging.NOTSET:
            noisy.setLevel(logging.WARNING)

    return target


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds context to log messages.

    Example:
        log = LoggerAdapter(logging.getLogger(__name__), {"event_bus_name": "orders"})
        log.info("Dispatching")  # record carries event_bus_name
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs
