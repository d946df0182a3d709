"""
Error messages and exception types.

Every failed request surfaces as a StorefrontError subclass; resources never
hand back a partially populated cart.
"""

import json
from typing import Any

# Configuration errors
ERROR_MISSING_ENDPOINT = "STOREFRONT_API_URL or STOREFRONT_DOMAIN must be set"

# Transport errors
ERROR_HTTP_STATUS = "Storefront API returned HTTP {status}"
ERROR_HTTP_REQUEST = "Storefront API request failed: {error}"
ERROR_INVALID_JSON = "Storefront API returned a non-JSON body"

# Pagination errors
ERROR_PAGE_MISSING = "A connection page reported by the server could not be fetched"
ERROR_PAGE_NO_CURSOR = "Connection reports another page but has no cursor"
ERROR_PAGE_CURSOR_REPEATED = "Connection cursor did not advance"

# Mutation errors
ERROR_UNKNOWN_MUTATION = "The {field} mutation failed due to an unknown error."

# Argument errors
ERROR_CART_ID_REQUIRED = "cart_id must be a non-empty string"
ERROR_LINES_REQUIRED = "line_items must be a non-empty list"
ERROR_LINE_IDS_REQUIRED = "line_item_ids must be a non-empty list"
ERROR_QUANTITY_POSITIVE = "quantity must be a positive integer"
ERROR_SEQUENCE_REQUIRED = "{name} must be a list, not a single {kind}"


class StorefrontError(Exception):
    """Base error for everything raised by this package."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        raw_error: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.raw_error = raw_error


class ConfigurationError(StorefrontError):
    """Client settings are incomplete."""

    def __init__(self, message: str = ERROR_MISSING_ENDPOINT) -> None:
        super().__init__(message, code="CONFIGURATION")


class TransportError(StorefrontError):
    """The HTTP request did not produce a usable GraphQL response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        raw_error: Any = None,
    ) -> None:
        super().__init__(message, code="TRANSPORT", raw_error=raw_error)
        self.status_code = status_code


class GraphQLResponseError(StorefrontError):
    """The server answered with top-level `errors`."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        super().__init__(json.dumps(errors), code="GRAPHQL", raw_error=errors)
        self.errors = errors


class MutationError(StorefrontError):
    """A mutation returned neither a cart nor an explanation."""

    def __init__(self, field: str) -> None:
        super().__init__(ERROR_UNKNOWN_MUTATION.format(field=field), code="MUTATION")
        self.field = field


class CartUserError(StorefrontError):
    """A cart mutation reported `userErrors`.

    The cart the server returned alongside the errors (if any) is kept on
    ``cart`` so callers can still inspect it.
    """

    def __init__(
        self,
        user_errors: list[dict[str, Any]],
        cart: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(json.dumps(user_errors), code="USER_ERROR", raw_error=user_errors)
        self.user_errors = user_errors
        self.cart = cart

    @property
    def messages(self) -> list[str]:
        """Plain messages of the reported errors."""
        return [error.get("message", "") for error in self.user_errors]


class PaginationError(StorefrontError):
    """A connection could not be read to its end."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="PAGINATION")
