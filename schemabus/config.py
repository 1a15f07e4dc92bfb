"""
Configuration management for schemabus.

Bus settings can be driven by environment variables instead of being
hardcoded in application code.

Example .env file:
    SCHEMABUS_BUS_NAME=orders
    SCHEMABUS_MAX_ENTRY_BYTES=262144
    AWS_REGION=eu-west-1

Example usage:
    from schemabus import Bus
    from schemabus.config import load_bus_config

    config = load_bus_config()
    bus = Bus.from_env()
"""

import logging
import os
from typing import Any

from .application.services.batcher import DEFAULT_MAX_BATCH_SIZE
from .application.services.size_guard import DEFAULT_MAX_ENTRY_BYTES

logger = logging.getLogger(__name__)


# ============================================================================
# Default Configuration
# ============================================================================

DEFAULT_BUS_NAME = "default"
DEFAULT_AWS_REGION = "us-east-1"

DEFAULTS = {
    "bus_name": DEFAULT_BUS_NAME,
    "max_batch_size": DEFAULT_MAX_BATCH_SIZE,
    "max_entry_bytes": DEFAULT_MAX_ENTRY_BYTES,
    "aws_region": DEFAULT_AWS_REGION,
    "log_level": "INFO",
}


# ============================================================================
# Environment Variable Names
# ============================================================================


class EnvVars:
    """Environment variable names used by schemabus."""

    BUS_NAME = "SCHEMABUS_BUS_NAME"
    MAX_BATCH_SIZE = "SCHEMABUS_MAX_BATCH_SIZE"
    MAX_ENTRY_BYTES = "SCHEMABUS_MAX_ENTRY_BYTES"
    LOG_LEVEL = "SCHEMABUS_LOG_LEVEL"

    # AWS
    AWS_PROFILE = "AWS_PROFILE"
    AWS_REGION = "AWS_REGION"


# ============================================================================
# Configuration Loading
# ============================================================================


def get_env(key: str, default: Any = None, cast: type = str) -> Any:
    """
    Get environment variable with type casting.

    Args:
        key: Environment variable name
        default: Default value if not set
        cast: Type to cast to (str, int, float, bool)

    Returns:
        Value from environment or default
    """
    value = os.getenv(key)

    if value is None:
        return default

    if cast is bool:
        return value.lower() in ("true", "1", "yes", "on")
    elif cast in (int, float):
        try:
            return cast(value)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid {cast.__name__} value for {key}: {value}, using default: {default}"
            )
            return default

    return value


def load_bus_config(name: str | None = None, **overrides: Any) -> dict[str, Any]:
    """
    Load bus configuration from environment variables.

    Args:
        name: Override bus name (default: from SCHEMABUS_BUS_NAME)
        **overrides: Any other value to override

    Returns:
        Dictionary with bus_name, max_batch_size, max_entry_bytes,
        aws_region, log_level and, when set, aws_profile

    Environment Variables:
        SCHEMABUS_BUS_NAME - Event bus name
        SCHEMABUS_MAX_BATCH_SIZE - Entries per transport call
        SCHEMABUS_MAX_ENTRY_BYTES - Per-entry size ceiling
        SCHEMABUS_LOG_LEVEL - Logging level
        AWS_REGION - AWS region
        AWS_PROFILE - AWS credentials profile name
    """
    config: dict[str, Any] = {}

    config["bus_name"] = name or get_env(EnvVars.BUS_NAME) or DEFAULTS["bus_name"]
    config["max_batch_size"] = get_env(
        EnvVars.MAX_BATCH_SIZE, DEFAULTS["max_batch_size"], cast=int
    )
    config["max_entry_bytes"] = get_env(
        EnvVars.MAX_ENTRY_BYTES, DEFAULTS["max_entry_bytes"], cast=int
    )
    config["aws_region"] = get_env(EnvVars.AWS_REGION, DEFAULTS["aws_region"])
    config["log_level"] = get_env(EnvVars.LOG_LEVEL, DEFAULTS["log_level"])

    if profile := get_env(EnvVars.AWS_PROFILE):
        config["aws_profile"] = profile

    config.update(overrides)

    _log_config(config)

    return config


def _log_config(config: dict[str, Any]) -> None:
    """Log configuration without sensitive values."""
    safe_config = {
        k: v for k, v in config.items() if k not in ("aws_access_key", "aws_secret_key")
    }

    if "aws_profile" in safe_config:
        safe_config["aws_profile"] = "***"

    logger.info(f"Loaded bus configuration: {safe_config}")

