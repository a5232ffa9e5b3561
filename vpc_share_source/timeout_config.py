"""
Centralized timeout configuration for remote calls.

The share fetch and both tag lookups run under an ``asyncio`` deadline taken
from this module. Values are configurable via environment variables, with
defaults sized for the IBM Cloud VPC and Global Tagging APIs.

Usage:
    from vpc_share_source.timeout_config import Timeouts

    share = await asyncio.wait_for(fetch(), timeout=Timeouts.SHARE_FETCH)

Environment Variables:
    - VPC_SHARE_TIMEOUT_FETCH: Share source fetch (default: 60s)
    - VPC_SHARE_TIMEOUT_TAGS: Each global tagging query (default: 30s)
    - VPC_SHARE_TIMEOUT_HTTP: SDK HTTP client timeout (default: 60s)
"""

import logging
import os
from typing import Final

logger = logging.getLogger(__name__)


def _get_timeout(env_var: str, default: float) -> float:
    """Get timeout value from environment variable or use default.

    Args:
        env_var: Environment variable name
        default: Default timeout in seconds

    Returns:
        Timeout value in seconds
    """
    value = os.environ.get(env_var)
    if value is not None:
        try:
            timeout = float(value)
            if timeout <= 0:
                logger.warning(
                    f"Invalid timeout value for {env_var}: {value}. "
                    f"Must be positive. Using default: {default}s"
                )
                return default
            return timeout
        except ValueError:
            logger.warning(
                f"Invalid timeout value for {env_var}: {value}. "
                f"Must be a number. Using default: {default}s"
            )
            return default
    return default


class Timeouts:
    """Timeout constants for remote operations, in seconds."""

    SHARE_FETCH: Final[float] = _get_timeout("VPC_SHARE_TIMEOUT_FETCH", 60)
    TAG_LOOKUP: Final[float] = _get_timeout("VPC_SHARE_TIMEOUT_TAGS", 30)
    HTTP: Final[float] = _get_timeout("VPC_SHARE_TIMEOUT_HTTP", 60)


def log_timeout_event(
    operation: str,
    timeout_value: float,
    level: str = "warning",
) -> None:
    """Log a timeout event with consistent formatting.

    Args:
        operation: Name of the operation that timed out
        timeout_value: Timeout value that was exceeded
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level, logger.warning)
    log_func(f"Operation '{operation}' timed out after {timeout_value} seconds")
