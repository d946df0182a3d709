"""Resources: models of API operations grouped by entity."""
from .base import Resource
from .cart import CartResource
from .resolvers import default_resolver, flatten_cart_lines, handle_cart_mutation

__all__ = [
    "Resource",
    "CartResource",
    "default_resolver",
    "flatten_cart_lines",
    "handle_cart_mutation",
]
