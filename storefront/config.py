"""
Client configuration from environment variables.

    STOREFRONT_DOMAIN           shop domain, e.g. "example.myshopify.com"
    STOREFRONT_API_VERSION      API version segment of the endpoint URL
    STOREFRONT_API_URL          full endpoint URL (overrides domain + version)
    STOREFRONT_ACCESS_TOKEN     public Storefront access token
    STOREFRONT_TIMEOUT          request timeout in seconds
    STOREFRONT_LINES_PAGE_SIZE  page size used when paging cart lines
"""

import os
from dataclasses import dataclass
from functools import cache

from storefront.errors import ConfigurationError
from storefront.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_VERSION = "2024-04"
DEFAULT_TIMEOUT = 10.0
# Largest `first:` the Storefront API accepts on a connection
DEFAULT_LINES_PAGE_SIZE = 250


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %s", name, raw, default)
        return default
    if value < 1:
        logger.warning("%s must be positive, using %s", name, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    """Resolved client settings."""

    domain: str = ""
    api_version: str = DEFAULT_API_VERSION
    api_url: str = ""
    access_token: str = ""
    timeout: float = DEFAULT_TIMEOUT
    lines_page_size: int = DEFAULT_LINES_PAGE_SIZE

    @property
    def endpoint(self) -> str:
        """GraphQL endpoint URL.

        Raises:
            ConfigurationError: neither api_url nor domain is set
        """
        if self.api_url:
            return self.api_url
        if not self.domain:
            raise ConfigurationError()
        domain = self.domain.removeprefix("https://").removeprefix("http://").rstrip("/")
        return f"https://{domain}/api/{self.api_version}/graphql.json"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the current environment."""
        return cls(
            domain=os.environ.get("STOREFRONT_DOMAIN", ""),
            api_version=os.environ.get("STOREFRONT_API_VERSION", DEFAULT_API_VERSION),
            api_url=os.environ.get("STOREFRONT_API_URL", ""),
            access_token=os.environ.get("STOREFRONT_ACCESS_TOKEN", ""),
            timeout=_env_float("STOREFRONT_TIMEOUT", DEFAULT_TIMEOUT),
            lines_page_size=_env_int("STOREFRONT_LINES_PAGE_SIZE", DEFAULT_LINES_PAGE_SIZE),
        )


@cache
def get_settings() -> Settings:
    """Get settings singleton (read once from the environment)."""
    return Settings.from_env()


__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_LINES_PAGE_SIZE",
    "DEFAULT_TIMEOUT",
    "Settings",
    "get_settings",
]
