"""
GraphQL documents for the cart resource.

Every document that returns a cart embeds CART_FRAGMENT and declares
`$linesPageSize`, which sizes the first page of `cart.lines`. Further pages
are read with CART_LINES_PAGE_QUERY.
"""

MONEY_FIELDS = "amount currencyCode"

CART_LINE_FRAGMENT = f"""
fragment CartLineFragment on BaseCartLine {{
  id
  quantity
  attributes {{ key value }}
  cost {{
    amountPerQuantity {{ {MONEY_FIELDS} }}
    subtotalAmount {{ {MONEY_FIELDS} }}
    totalAmount {{ {MONEY_FIELDS} }}
  }}
  discountAllocations {{
    discountedAmount {{ {MONEY_FIELDS} }}
  }}
  merchandise {{
    ... on ProductVariant {{
      id
      title
      sku
      availableForSale
      price {{ {MONEY_FIELDS} }}
      product {{ id handle title }}
    }}
  }}
}}
"""

CART_FRAGMENT = f"""
fragment CartFragment on Cart {{
  id
  createdAt
  updatedAt
  checkoutUrl
  note
  totalQuantity
  attributes {{ key value }}
  buyerIdentity {{
    email
    phone
    countryCode
    customer {{ id }}
  }}
  discountCodes {{ code applicable }}
  cost {{
    subtotalAmount {{ {MONEY_FIELDS} }}
    totalAmount {{ {MONEY_FIELDS} }}
    totalTaxAmount {{ {MONEY_FIELDS} }}
    checkoutChargeAmount {{ {MONEY_FIELDS} }}
  }}
  lines(first: $linesPageSize) {{
    pageInfo {{ hasNextPage endCursor }}
    edges {{
      cursor
      node {{ ...CartLineFragment }}
    }}
  }}
}}
{CART_LINE_FRAGMENT}"""

USER_ERROR_FIELDS = "userErrors { field message code }"


def _cart_mutation(name: str, field: str, arguments: dict[str, str]) -> str:
    """Compose a cart mutation that returns the cart and its user errors."""
    declarations = ", ".join(f"${arg}: {type_}" for arg, type_ in arguments.items())
    call_args = ", ".join(f"{arg}: ${arg}" for arg in arguments)
    return f"""
mutation {name}({declarations}, $linesPageSize: Int = 250) {{
  {field}({call_args}) {{
    cart {{ ...CartFragment }}
    {USER_ERROR_FIELDS}
  }}
}}
{CART_FRAGMENT}"""


CART_QUERY = f"""
query cart($id: ID!, $linesPageSize: Int = 250) {{
  cart(id: $id) {{ ...CartFragment }}
}}
{CART_FRAGMENT}"""

CART_LINES_PAGE_QUERY = f"""
query cartLines($id: ID!, $first: Int!, $after: String) {{
  cart(id: $id) {{
    id
    lines(first: $first, after: $after) {{
      pageInfo {{ hasNextPage endCursor }}
      edges {{
        cursor
        node {{ ...CartLineFragment }}
      }}
    }}
  }}
}}
{CART_LINE_FRAGMENT}"""

CART_CREATE_MUTATION = _cart_mutation(
    "cartCreate", "cartCreate", {"input": "CartInput"}
)
CART_LINES_ADD_MUTATION = _cart_mutation(
    "cartLinesAdd", "cartLinesAdd", {"cartId": "ID!", "lines": "[CartLineInput!]!"}
)
CART_LINES_REMOVE_MUTATION = _cart_mutation(
    "cartLinesRemove", "cartLinesRemove", {"cartId": "ID!", "lineIds": "[ID!]!"}
)
CART_LINES_UPDATE_MUTATION = _cart_mutation(
    "cartLinesUpdate", "cartLinesUpdate", {"cartId": "ID!", "lines": "[CartLineUpdateInput!]!"}
)
CART_ATTRIBUTES_UPDATE_MUTATION = _cart_mutation(
    "cartAttributesUpdate",
    "cartAttributesUpdate",
    {"cartId": "ID!", "attributes": "[AttributeInput!]!"},
)
CART_NOTE_UPDATE_MUTATION = _cart_mutation(
    "cartNoteUpdate", "cartNoteUpdate", {"cartId": "ID!", "note": "String!"}
)
CART_DISCOUNT_CODES_UPDATE_MUTATION = _cart_mutation(
    "cartDiscountCodesUpdate",
    "cartDiscountCodesUpdate",
    {"cartId": "ID!", "discountCodes": "[String!]"},
)
CART_BUYER_IDENTITY_UPDATE_MUTATION = _cart_mutation(
    "cartBuyerIdentityUpdate",
    "cartBuyerIdentityUpdate",
    {"cartId": "ID!", "buyerIdentity": "CartBuyerIdentityInput!"},
)

__all__ = [
    "CART_ATTRIBUTES_UPDATE_MUTATION",
    "CART_BUYER_IDENTITY_UPDATE_MUTATION",
    "CART_CREATE_MUTATION",
    "CART_DISCOUNT_CODES_UPDATE_MUTATION",
    "CART_FRAGMENT",
    "CART_LINE_FRAGMENT",
    "CART_LINES_ADD_MUTATION",
    "CART_LINES_PAGE_QUERY",
    "CART_LINES_REMOVE_MUTATION",
    "CART_LINES_UPDATE_MUTATION",
    "CART_NOTE_UPDATE_MUTATION",
    "CART_QUERY",
]
