"""Tests for the httpx GraphQL transport"""
import json
from typing import Any, Dict, List
from unittest.mock import AsyncMock

import httpx
import pytest

from storefront.errors import PaginationError, TransportError
from storefront.graphql.client import ACCESS_TOKEN_HEADER, GraphQLClient, connection_nodes
from tests.payloads import make_connection, make_line

URL = "https://test-shop.myshopify.com/api/2024-04/graphql.json"


def _client_with(handler, access_token: str | None = "test_token") -> GraphQLClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GraphQLClient(URL, access_token, http_client=http_client)


class TestSend:
    """Tests for GraphQLClient.send."""

    @pytest.mark.asyncio
    async def test_posts_query_and_variables(self):
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"data": {"cart": None}})

        client = _client_with(handler)
        body = await client.send("query { cart }", {"id": "1"})

        assert body == {"data": {"cart": None}}
        request = requests[0]
        assert request.method == "POST"
        assert str(request.url) == URL
        assert request.headers[ACCESS_TOKEN_HEADER] == "test_token"
        assert json.loads(request.content) == {"query": "query { cart }", "variables": {"id": "1"}}

    @pytest.mark.asyncio
    async def test_no_token_header_without_token(self):
        seen: Dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["headers"] = request.headers
            return httpx.Response(200, json={"data": {}})

        client = _client_with(handler, access_token=None)
        await client.send("query { shop { name } }")

        assert ACCESS_TOKEN_HEADER not in seen["headers"]

    @pytest.mark.asyncio
    async def test_graphql_errors_are_returned_not_raised(self):
        """Interpreting `errors` is left to resolvers."""
        errors = [{"message": "Throttled"}]
        client = _client_with(lambda request: httpx.Response(200, json={"errors": errors}))

        assert await client.send("query { cart }") == {"errors": errors}

    @pytest.mark.asyncio
    async def test_http_status_error(self):
        client = _client_with(lambda request: httpx.Response(401, text="Unauthorized"))

        with pytest.raises(TransportError) as exc_info:
            await client.send("query { cart }")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client_with(handler)

        with pytest.raises(TransportError) as exc_info:
            await client.send("query { cart }")

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.raw_error, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        client = _client_with(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(TransportError):
            await client.send("query { cart }")

    @pytest.mark.asyncio
    async def test_aclose_keeps_injected_client_open(self):
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        )
        async with GraphQLClient(URL, http_client=http_client):
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_aclose_closes_own_client(self):
        client = GraphQLClient(URL)
        http_client = await client._get_http_client()

        await client.aclose()

        assert http_client.is_closed


class TestFetchAllPages:
    """Tests for GraphQLClient.fetch_all_pages."""

    def test_connection_nodes(self):
        assert connection_nodes(None) == []
        assert connection_nodes({"edges": []}) == []
        assert connection_nodes(make_connection([make_line(1)])) == [make_line(1)]

    @pytest.mark.asyncio
    async def test_single_page_does_not_fetch(self):
        fetch_next_page = AsyncMock()
        client = GraphQLClient(URL)

        nodes = await client.fetch_all_pages(
            make_connection([make_line(1), make_line(2)]),
            page_size=5,
            fetch_next_page=fetch_next_page,
        )

        assert nodes == [make_line(1), make_line(2)]
        fetch_next_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_follows_cursors_until_last_page(self):
        pages = [
            make_connection([make_line(3), make_line(4)], has_next_page=True),
            make_connection([make_line(5)]),
        ]
        fetch_next_page = AsyncMock(side_effect=pages)
        client = GraphQLClient(URL)

        nodes = await client.fetch_all_pages(
            make_connection([make_line(1), make_line(2)], has_next_page=True),
            page_size=2,
            fetch_next_page=fetch_next_page,
        )

        assert [node["id"] for node in nodes] == [make_line(i)["id"] for i in range(1, 6)]
        assert [call.args for call in fetch_next_page.await_args_list] == [
            ("cursor-gid://shopify/CartLine/2", 2),
            ("cursor-gid://shopify/CartLine/4", 2),
        ]

    @pytest.mark.asyncio
    async def test_falls_back_to_last_edge_cursor(self):
        first = make_connection([make_line(1)], has_next_page=True)
        first["pageInfo"]["endCursor"] = None
        fetch_next_page = AsyncMock(return_value=make_connection([make_line(2)]))
        client = GraphQLClient(URL)

        await client.fetch_all_pages(first, page_size=1, fetch_next_page=fetch_next_page)

        fetch_next_page.assert_awaited_once_with("cursor-gid://shopify/CartLine/1", 1)

    @pytest.mark.asyncio
    async def test_raises_without_cursor(self):
        """hasNextPage on an empty page with no cursor cannot be followed."""
        fetch_next_page = AsyncMock()
        client = GraphQLClient(URL)

        with pytest.raises(PaginationError):
            await client.fetch_all_pages(
                make_connection([], has_next_page=True),
                page_size=1,
                fetch_next_page=fetch_next_page,
            )

        fetch_next_page.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_raises_when_next_page_missing(self):
        fetch_next_page = AsyncMock(return_value=None)
        client = GraphQLClient(URL)

        with pytest.raises(PaginationError):
            await client.fetch_all_pages(
                make_connection([make_line(1)], has_next_page=True),
                page_size=1,
                fetch_next_page=fetch_next_page,
            )

    @pytest.mark.asyncio
    async def test_raises_when_cursor_repeats(self):
        """A server that keeps returning the same page does not loop forever."""
        page = make_connection([make_line(1)], has_next_page=True)
        fetch_next_page = AsyncMock(return_value=page)
        client = GraphQLClient(URL)

        with pytest.raises(PaginationError) as exc_info:
            await client.fetch_all_pages(page, page_size=1, fetch_next_page=fetch_next_page)

        assert exc_info.value.code == "PAGINATION"
        fetch_next_page.assert_awaited_once()
