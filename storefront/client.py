"""Storefront client facade wiring resources to one GraphQL client."""
from typing import Optional

from storefront.config import DEFAULT_LINES_PAGE_SIZE, Settings, get_settings
from storefront.graphql.client import GraphQLClient
from storefront.logging import get_logger
from storefront.resources.cart import CartResource

logger = get_logger(__name__)


class StorefrontClient:
    """
    Entry point for API resources.

    Usage:
        async with StorefrontClient.from_settings() as client:
            cart = await client.cart.fetch(cart_id)
    """

    def __init__(
        self,
        graphql_client: GraphQLClient,
        lines_page_size: int = DEFAULT_LINES_PAGE_SIZE,
    ):
        self.graphql_client = graphql_client
        self.cart = CartResource(graphql_client, page_size=lines_page_size)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StorefrontClient":
        """
        Build a client from settings (environment by default).

        Raises:
            ConfigurationError: no endpoint configured
        """
        settings = settings or get_settings()
        graphql_client = GraphQLClient(
            settings.endpoint,
            settings.access_token or None,
            timeout=settings.timeout,
        )
        logger.info("Storefront client configured for %s", settings.endpoint)
        return cls(graphql_client, lines_page_size=settings.lines_page_size)

    async def aclose(self) -> None:
        await self.graphql_client.aclose()

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


# Singleton instance
_client: Optional[StorefrontClient] = None


def get_client() -> StorefrontClient:
    """Get StorefrontClient singleton built from the environment."""
    global _client
    if _client is None:
        _client = StorefrontClient.from_settings()
    return _client


async def close_client() -> None:
    """Close and forget the singleton client."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
