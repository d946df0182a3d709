"""
Pydantic Models - Mutation input payloads

Mirror the Storefront API input objects. Field names are snake_case in Python
and serialize to the API's camelCase through aliases. Resource methods accept
either these models or plain dicts already shaped like the API input.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Input(BaseModel):
    """Base for API input objects."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


# ============================================================
# Line and attribute inputs
# ============================================================

class AttributeInput(_Input):
    """Custom key/value attribute on a cart or a line."""
    key: str
    value: str


class CartLineInput(_Input):
    """Line to add to a cart."""
    merchandise_id: str = Field(alias="merchandiseId")
    quantity: int = Field(default=1, ge=1)
    attributes: Optional[List[AttributeInput]] = None
    selling_plan_id: Optional[str] = Field(default=None, alias="sellingPlanId")


class CartLineUpdateInput(_Input):
    """Change to an existing cart line, addressed by line id."""
    id: str
    merchandise_id: Optional[str] = Field(default=None, alias="merchandiseId")
    quantity: Optional[int] = Field(default=None, ge=0)
    attributes: Optional[List[AttributeInput]] = None
    selling_plan_id: Optional[str] = Field(default=None, alias="sellingPlanId")


# ============================================================
# Cart inputs
# ============================================================

class CartBuyerIdentityInput(_Input):
    """Customer associated with the cart."""
    email: Optional[str] = None
    phone: Optional[str] = None
    country_code: Optional[str] = Field(default=None, alias="countryCode")
    customer_access_token: Optional[str] = Field(default=None, alias="customerAccessToken")


class CartInput(_Input):
    """Payload of `cartCreate`."""
    attributes: Optional[List[AttributeInput]] = None
    buyer_identity: Optional[CartBuyerIdentityInput] = Field(default=None, alias="buyerIdentity")
    discount_codes: Optional[List[str]] = Field(default=None, alias="discountCodes")
    lines: Optional[List[CartLineInput]] = None
    note: Optional[str] = None


def to_variables(value: Any) -> Any:
    """
    Convert an input value to its GraphQL variable form.

    Models are dumped by alias without unset/None fields; lists are converted
    element-wise; anything else (dicts, strings) passes through unchanged.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [to_variables(item) for item in value]
    return value


__all__ = [
    "AttributeInput",
    "CartBuyerIdentityInput",
    "CartInput",
    "CartLineInput",
    "CartLineUpdateInput",
    "to_variables",
]
