"""Pytest configuration and fixtures"""
import os
from unittest.mock import AsyncMock

import pytest

# Set test environment variables
os.environ.setdefault("STOREFRONT_DOMAIN", "test-shop.myshopify.com")
os.environ.setdefault("STOREFRONT_ACCESS_TOKEN", "test_token")


@pytest.fixture
def graphql_client():
    """Real GraphQLClient with `send` replaced by an AsyncMock."""
    from storefront.graphql.client import GraphQLClient

    client = GraphQLClient("https://test-shop.myshopify.com/api/2024-04/graphql.json", "test_token")
    client.send = AsyncMock()
    return client


@pytest.fixture
def cart_resource(graphql_client):
    """CartResource with a small page size so paging is easy to exercise."""
    from storefront.resources.cart import CartResource

    return CartResource(graphql_client, page_size=2)
