"""Builders for Storefront API response payloads used across tests."""
from typing import Any, Dict, List, Optional

CART_ID = "gid://shopify/Cart/c1-test?key=secret"


def make_line(index: int) -> Dict[str, Any]:
    """Cart line node as the API returns it."""
    return {
        "id": f"gid://shopify/CartLine/{index}",
        "quantity": 1,
        "attributes": [],
        "merchandise": {"id": f"gid://shopify/ProductVariant/{index}", "title": f"Variant {index}"},
    }


def make_connection(
    nodes: List[Dict[str, Any]],
    has_next_page: bool = False,
    end_cursor: Optional[str] = None,
) -> Dict[str, Any]:
    """Connection page wrapping nodes, cursors named after node ids."""
    edges = [{"cursor": f"cursor-{node['id']}", "node": node} for node in nodes]
    if end_cursor is None and edges:
        end_cursor = edges[-1]["cursor"]
    return {
        "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
        "edges": edges,
    }


def make_cart(lines: Optional[Dict[str, Any]] = None, **fields) -> Dict[str, Any]:
    """Cart payload with a lines connection."""
    cart = {
        "id": CART_ID,
        "checkoutUrl": "https://test-shop.myshopify.com/cart/c/c1-test",
        "note": None,
        "totalQuantity": 0,
        "attributes": [],
        "discountCodes": [],
        "lines": lines if lines is not None else make_connection([]),
    }
    cart.update(fields)
    return cart


def mutation_response(
    field: str,
    cart: Optional[Dict[str, Any]],
    user_errors: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    return {"data": {field: {"cart": cart, "userErrors": user_errors or []}}}


def lines_page_response(connection: Dict[str, Any]) -> Dict[str, Any]:
    return {"data": {"cart": {"id": CART_ID, "lines": connection}}}
