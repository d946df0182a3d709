"""
Storefront - async cart client for a GraphQL commerce API

This package contains:
- client: StorefrontClient facade and get_client singleton
- resources: CartResource and the shared response resolvers
- graphql: httpx transport and query/mutation documents
- models: Pydantic input payloads
- errors: exception hierarchy

Note: Imports are lazy so `import storefront` stays cheap and does not
read configuration.
"""

__version__ = "0.1.0"

__all__ = [
    "StorefrontClient",
    "get_client",
    "close_client",
    "CartResource",
    "GraphQLClient",
    "StorefrontError",
    "CartUserError",
    "GraphQLResponseError",
    "MutationError",
    "TransportError",
    "ConfigurationError",
]

_LAZY = {
    "StorefrontClient": "storefront.client",
    "get_client": "storefront.client",
    "close_client": "storefront.client",
    "CartResource": "storefront.resources.cart",
    "GraphQLClient": "storefront.graphql.client",
    "StorefrontError": "storefront.errors",
    "CartUserError": "storefront.errors",
    "GraphQLResponseError": "storefront.errors",
    "MutationError": "storefront.errors",
    "TransportError": "storefront.errors",
    "ConfigurationError": "storefront.errors",
}


def __getattr__(name):
    """Lazy attribute access for the public API."""
    module_name = _LAZY.get(name)
    if module_name is None:
        raise AttributeError(f"module 'storefront' has no attribute '{name}'")
    import importlib

    return getattr(importlib.import_module(module_name), name)
