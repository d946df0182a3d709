"""GraphQL transport and documents."""
from .client import GraphQLClient, connection_nodes
from . import documents

__all__ = [
    "GraphQLClient",
    "connection_nodes",
    "documents",
]
