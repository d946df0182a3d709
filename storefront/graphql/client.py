"""GraphQL Client - httpx transport for the Storefront API.

Sends documents, returns decoded responses untouched and pages through
connections. Interpreting `errors`/`userErrors` is the resolvers' job.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from storefront.errors import (
    ERROR_HTTP_REQUEST,
    ERROR_HTTP_STATUS,
    ERROR_INVALID_JSON,
    ERROR_PAGE_CURSOR_REPEATED,
    ERROR_PAGE_MISSING,
    ERROR_PAGE_NO_CURSOR,
    PaginationError,
    TransportError,
)
from storefront.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)

ACCESS_TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"

# fetch_next_page(after, first) -> next connection dict, None if the parent entity is gone
NextPageFetcher = Callable[[str, int], Awaitable[dict[str, Any] | None]]


def connection_nodes(connection: dict[str, Any] | None) -> list[Any]:
    """Nodes of one connection page, in edge order."""
    if not connection:
        return []
    return [edge.get("node") for edge in connection.get("edges") or []]


def _next_cursor(connection: dict[str, Any]) -> str | None:
    page_info = connection.get("pageInfo") or {}
    if page_info.get("endCursor"):
        return page_info["endCursor"]
    edges = connection.get("edges") or []
    if edges:
        return edges[-1].get("cursor")
    return None


class GraphQLClient:
    """Minimal async GraphQL client over a shared httpx.AsyncClient."""

    def __init__(
        self,
        url: str,
        access_token: str | None = None,
        *,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.access_token = access_token
        self.timeout = timeout

        # HTTP client (lazy init unless injected)
        self._http_client = http_client
        self._owns_http_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of shared httpx client with timeouts."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=5.0),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
            self._owns_http_client = True
        return self._http_client

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.access_token:
            headers[ACCESS_TOKEN_HEADER] = self.access_token
        return headers

    async def send(self, document: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        POST a document and return the decoded response body.

        Args:
            document: GraphQL query or mutation text
            variables: Variable values for the document

        Returns:
            Response body, typically {"data": ..., "errors": ...}

        Raises:
            TransportError: request failed, non-2xx status or non-JSON body
        """
        client = await self._get_http_client()
        payload = {"query": document, "variables": variables or {}}

        try:
            response = await client.post(self.url, json=payload, headers=self._headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                "GraphQL request failed with HTTP %s: %s",
                status,
                sanitize_string_for_logging(e.response.text),
            )
            raise TransportError(
                ERROR_HTTP_STATUS.format(status=status), status_code=status, raw_error=e
            ) from e
        except httpx.HTTPError as e:
            logger.error("GraphQL request error: %s", e)
            raise TransportError(ERROR_HTTP_REQUEST.format(error=e), raw_error=e) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                ERROR_INVALID_JSON, status_code=response.status_code, raw_error=e
            ) from e

        if not isinstance(body, dict):
            raise TransportError(ERROR_INVALID_JSON, status_code=response.status_code)
        return body

    async def fetch_all_pages(
        self,
        connection: dict[str, Any] | None,
        *,
        page_size: int,
        fetch_next_page: NextPageFetcher,
    ) -> list[Any]:
        """
        Collect the nodes of a connection and all of its following pages.

        Pages are requested one after another, each starting after the
        previous page's end cursor, until `pageInfo.hasNextPage` is false.

        Args:
            connection: First page as returned by the server ({edges, pageInfo})
            page_size: `first:` value for every following page
            fetch_next_page: Coroutine returning the page after a cursor

        Returns:
            All nodes in server order

        Raises:
            PaginationError: a page promised to follow could not be read
        """
        nodes = connection_nodes(connection)
        page = connection
        seen_cursors: set[str] = set()

        while page and (page.get("pageInfo") or {}).get("hasNextPage"):
            cursor = _next_cursor(page)
            if not cursor:
                raise PaginationError(ERROR_PAGE_NO_CURSOR)
            if cursor in seen_cursors:
                raise PaginationError(ERROR_PAGE_CURSOR_REPEATED)
            seen_cursors.add(cursor)

            page = await fetch_next_page(cursor, page_size)
            if page is None:
                raise PaginationError(ERROR_PAGE_MISSING)
            nodes.extend(connection_nodes(page))

        return nodes

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
        self._http_client = None

    async def __aenter__(self) -> "GraphQLClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
