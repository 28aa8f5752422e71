"""
GraphQL Client Factory
Creates a GraphQL client bound to an endpoint and request headers
"""

from typing import Mapping

from image_reporter.graphql.client import HTTPXGraphQLClient
from image_reporter.graphql.protocol import GraphQLClientProtocol


def get_graphql_client(endpoint: str, headers: Mapping[str, str]) -> GraphQLClientProtocol:
    """
    Get GraphQL client implementation

    Args:
        endpoint: Full GraphQL endpoint URL
        headers: Headers sent with every request (authorization included)

    Returns:
        GraphQL client, to be used as an async context manager

    Usage:
        async with get_graphql_client(endpoint, headers) as client:
            data = await client.request(query, {"name": "prod"})
    """
    return HTTPXGraphQLClient(endpoint, headers)
