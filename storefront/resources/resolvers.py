"""
Response resolvers shared by resources.

A resolver turns a raw GraphQL response into the value a resource method
returns, raising when the server reported errors.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from storefront.errors import CartUserError, GraphQLResponseError, MutationError
from storefront.graphql.client import GraphQLClient
from storefront.graphql.documents import CART_LINES_PAGE_QUERY
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

Response = dict[str, Any]


def raise_for_errors(response: Response) -> None:
    """Raise GraphQLResponseError if the response carries top-level errors."""
    errors = response.get("errors")
    if errors:
        raise GraphQLResponseError(errors)


def default_resolver(path: str) -> Callable[[Response], Any]:
    """
    Build a resolver returning the value at a dotted path under `data`.

    Missing keys along the path resolve to None.
    """
    keys = path.split(".")

    def resolve(response: Response) -> Any:
        raise_for_errors(response)
        value: Any = response.get("data")
        for key in keys:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value

    return resolve


async def flatten_cart_lines(
    cart: dict[str, Any],
    graphql_client: GraphQLClient,
    page_size: int,
) -> dict[str, Any]:
    """Return a copy of `cart` with its lines connection replaced by all line nodes."""
    cart_id = cart["id"]

    async def fetch_next_page(after: str, first: int) -> dict[str, Any] | None:
        response = await graphql_client.send(
            CART_LINES_PAGE_QUERY, {"id": cart_id, "first": first, "after": after}
        )
        page_cart = default_resolver("cart")(response)
        if page_cart is None:
            return None
        return page_cart.get("lines")

    lines = await graphql_client.fetch_all_pages(
        cart.get("lines"), page_size=page_size, fetch_next_page=fetch_next_page
    )
    return {**cart, "lines": lines}


def handle_cart_mutation(
    root_field: str,
    graphql_client: GraphQLClient,
    *,
    page_size: int,
) -> Callable[[Response], Awaitable[dict[str, Any]]]:
    """
    Build the resolver for a mutation returning `{cart, userErrors}`.

    The resolver raises GraphQLResponseError on top-level errors,
    CartUserError when `userErrors` is non-empty and MutationError when the
    payload has no cart. Otherwise it returns the cart with all lines.
    """

    async def resolve(response: Response) -> dict[str, Any]:
        raise_for_errors(response)

        payload = (response.get("data") or {}).get(root_field)
        if not payload:
            raise MutationError(root_field)

        cart = payload.get("cart")
        user_errors = payload.get("userErrors") or []
        if user_errors:
            logger.warning(
                "%s for cart %s returned %d user error(s)",
                root_field,
                sanitize_id_for_logging(cart.get("id") if cart else None),
                len(user_errors),
            )
            raise CartUserError(user_errors, cart=cart)

        if not cart:
            raise MutationError(root_field)

        return await flatten_cart_lines(cart, graphql_client, page_size)

    return resolve
