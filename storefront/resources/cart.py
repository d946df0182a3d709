"""Cart resource: fetch, create and mutate carts through the Storefront API."""
from typing import Any, Optional, Sequence, Union

from pydantic import BaseModel

from storefront.config import DEFAULT_LINES_PAGE_SIZE
from storefront.errors import (
    ERROR_CART_ID_REQUIRED,
    ERROR_LINE_IDS_REQUIRED,
    ERROR_LINES_REQUIRED,
    ERROR_QUANTITY_POSITIVE,
    ERROR_SEQUENCE_REQUIRED,
)
from storefront.graphql import documents
from storefront.graphql.client import GraphQLClient
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.models import (
    AttributeInput,
    CartBuyerIdentityInput,
    CartInput,
    CartLineInput,
    CartLineUpdateInput,
    to_variables,
)

from .base import Resource
from .resolvers import default_resolver, flatten_cart_lines, handle_cart_mutation

logger = get_logger(__name__)

Cart = dict[str, Any]
Attributes = Sequence[Union[AttributeInput, dict]]
# Values that are iterable but never a list of inputs
_SINGLE_VALUES = (str, bytes, dict, BaseModel)


def _require_cart_id(cart_id: str) -> None:
    if not cart_id or not isinstance(cart_id, str):
        raise ValueError(ERROR_CART_ID_REQUIRED)


def _require_sequence(value: Any, name: str) -> None:
    if isinstance(value, _SINGLE_VALUES):
        raise ValueError(ERROR_SEQUENCE_REQUIRED.format(name=name, kind=type(value).__name__))


def _require_lines(line_items: Sequence[Any], message: str = ERROR_LINES_REQUIRED) -> None:
    if not line_items or isinstance(line_items, _SINGLE_VALUES):
        raise ValueError(message)


class CartResource(Resource):
    """
    Cart operations.

    Every method resolves with the cart as returned by the server, except
    that `lines` is a plain list of line nodes (all pages merged) instead of
    a connection. Server-reported problems raise StorefrontError subclasses.

    Example:
        cart = await client.cart.create({"lines": [{"merchandiseId": variant_id, "quantity": 2}]})
        cart = await client.cart.update_attributes(cart["id"], [{"key": "gift", "value": "yes"}])
    """

    def __init__(self, graphql_client: GraphQLClient, page_size: int = DEFAULT_LINES_PAGE_SIZE):
        super().__init__(graphql_client)
        self.page_size = page_size

    async def _mutate(self, root_field: str, document: str, variables: dict[str, Any]) -> Cart:
        variables = {**variables, "linesPageSize": self.page_size}
        response = await self.graphql_client.send(document, variables)
        cart = await handle_cart_mutation(
            root_field, self.graphql_client, page_size=self.page_size
        )(response)
        logger.debug("%s applied to cart %s", root_field, sanitize_id_for_logging(cart.get("id")))
        return cart

    async def fetch(self, cart_id: str) -> Optional[Cart]:
        """
        Fetch a cart by id.

        Returns:
            The cart, or None if no cart exists for this id
        """
        _require_cart_id(cart_id)
        response = await self.graphql_client.send(
            documents.CART_QUERY, {"id": cart_id, "linesPageSize": self.page_size}
        )
        cart = default_resolver("cart")(response)
        if cart is None:
            logger.info("Cart %s not found", sanitize_id_for_logging(cart_id))
            return None
        return await flatten_cart_lines(cart, self.graphql_client, self.page_size)

    async def create(self, input: Union[CartInput, dict, None] = None) -> Cart:
        """
        Create a cart.

        Args:
            input: Optional CartInput (or dict) with attributes, buyerIdentity,
                discountCodes, lines and note

        Returns:
            The created cart
        """
        cart_input = to_variables(input) if input is not None else {}
        return await self._mutate("cartCreate", documents.CART_CREATE_MUTATION, {"input": cart_input})

    async def add_line_items(
        self,
        cart_id: str,
        line_items: Sequence[Union[CartLineInput, dict]],
    ) -> Cart:
        """
        Add lines to a cart.

        Args:
            cart_id: Cart id
            line_items: Lines with merchandiseId, quantity and optional attributes
        """
        _require_cart_id(cart_id)
        _require_lines(line_items)
        lines = to_variables(list(line_items))
        for line in lines:
            quantity = line.get("quantity", 1)
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise ValueError(ERROR_QUANTITY_POSITIVE)

        return await self._mutate(
            "cartLinesAdd",
            documents.CART_LINES_ADD_MUTATION,
            {"cartId": cart_id, "lines": lines},
        )

    async def remove_line_items(self, cart_id: str, line_item_ids: Sequence[str]) -> Cart:
        """Remove lines from a cart by line id."""
        _require_cart_id(cart_id)
        _require_lines(line_item_ids, ERROR_LINE_IDS_REQUIRED)
        return await self._mutate(
            "cartLinesRemove",
            documents.CART_LINES_REMOVE_MUTATION,
            {"cartId": cart_id, "lineIds": list(line_item_ids)},
        )

    async def update_line_items(
        self,
        cart_id: str,
        line_items: Sequence[Union[CartLineUpdateInput, dict]],
    ) -> Cart:
        """
        Update existing lines (quantity, merchandise or attributes).

        A quantity of 0 removes the line on the server side.
        """
        _require_cart_id(cart_id)
        _require_lines(line_items)
        return await self._mutate(
            "cartLinesUpdate",
            documents.CART_LINES_UPDATE_MUTATION,
            {"cartId": cart_id, "lines": to_variables(list(line_items))},
        )

    async def update_attributes(self, cart_id: str, attributes: Attributes) -> Cart:
        """Replace the cart's custom attributes."""
        _require_cart_id(cart_id)
        _require_sequence(attributes, "attributes")
        return await self._mutate(
            "cartAttributesUpdate",
            documents.CART_ATTRIBUTES_UPDATE_MUTATION,
            {"cartId": cart_id, "attributes": to_variables(list(attributes))},
        )

    async def update_note(self, cart_id: str, note: str) -> Cart:
        """Set the cart note."""
        _require_cart_id(cart_id)
        return await self._mutate(
            "cartNoteUpdate",
            documents.CART_NOTE_UPDATE_MUTATION,
            {"cartId": cart_id, "note": note},
        )

    async def update_discount_codes(self, cart_id: str, discount_codes: Sequence[str]) -> Cart:
        """Replace the discount codes applied to the cart (empty list clears them)."""
        _require_cart_id(cart_id)
        _require_sequence(discount_codes, "discount_codes")
        return await self._mutate(
            "cartDiscountCodesUpdate",
            documents.CART_DISCOUNT_CODES_UPDATE_MUTATION,
            {"cartId": cart_id, "discountCodes": list(discount_codes)},
        )

    async def update_buyer_identity(
        self,
        cart_id: str,
        buyer_identity: Union[CartBuyerIdentityInput, dict],
    ) -> Cart:
        """Associate a customer (email, phone, country, access token) with the cart."""
        _require_cart_id(cart_id)
        return await self._mutate(
            "cartBuyerIdentityUpdate",
            documents.CART_BUYER_IDENTITY_UPDATE_MUTATION,
            {"cartId": cart_id, "buyerIdentity": to_variables(buyer_identity)},
        )
