"""
Centralized logging configuration for the storefront client.

The package logs under "storefront" and stays silent until the application
configures logging, either its own way or with configure_logging().

Usage:
    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart created")
    logger.error("Mutation failed", exc_info=True)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Loggers of the HTTP stack that are too chatty at INFO
_NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11", "httpcore.connection")

logging.getLogger("storefront").addHandler(logging.NullHandler())


def _get_log_level() -> int:
    """Get log level from environment or default to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(quiet_http: bool = True) -> None:
    """
    Attach a stdout handler to the package logger (scripts, local runs).

    Honors LOG_LEVEL and LOG_FORMAT=simple. Calling it twice is a no-op.

    Args:
        quiet_http: Raise httpx/httpcore loggers to WARNING
    """
    package_logger = logging.getLogger("storefront")

    if any(not isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        return

    package_logger.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    # Compact format when LOG_FORMAT=simple (containers usually stamp time)
    simple = os.environ.get("LOG_FORMAT", "").lower() == "simple"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if simple else LOG_FORMAT))

    package_logger.addHandler(handler)

    if quiet_http:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape control characters that could forge log lines (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None, keep: int = 32) -> str:
    """
    Shorten an opaque identifier (cart id, line id) for logs.

    Storefront ids look like "gid://shopify/Cart/<token>?key=<secret>"; the
    secret query is dropped and only the last path segment is kept.

    Args:
        id_value: ID value to sanitize (can be None)
        keep: Maximum number of characters to keep

    Returns:
        Sanitized ID string or "N/A" if empty
    """
    if not id_value:
        return "N/A"
    tail = str(id_value).split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if not tail:
        return "N/A"
    safe_value = _escape_log_injection(tail)
    return safe_value[:keep] if len(safe_value) > keep else safe_value


def sanitize_string_for_logging(value: str | None, max_length: int = 120) -> str:
    """
    Truncate server-provided text (error messages, notes) for logging.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep

    Returns:
        Sanitized string or "N/A" if empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
