"""Base class for API resources."""
from storefront.graphql.client import GraphQLClient


class Resource:
    """A group of API operations sharing one GraphQL client."""

    def __init__(self, graphql_client: GraphQLClient):
        self.graphql_client = graphql_client
