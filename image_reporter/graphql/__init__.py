"""
GraphQL transport for the control-plane API
"""

from image_reporter.graphql.client import HTTPXGraphQLClient
from image_reporter.graphql.factory import get_graphql_client
from image_reporter.graphql.protocol import GraphQLClientFactory, GraphQLClientProtocol

__all__ = [
    "GraphQLClientFactory",
    "GraphQLClientProtocol",
    "HTTPXGraphQLClient",
    "get_graphql_client",
]
