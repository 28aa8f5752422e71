"""
GraphQL Client Protocol (Interface)
Defines contract for GraphQL transports used by the runtime resolver
"""

from typing import Any, Callable, Mapping, Protocol


class GraphQLClientProtocol(Protocol):
    """
    Protocol for GraphQL client implementations

    Clients are async context managers so that each lookup owns
    its connection for exactly one round-trip.
    """

    async def request(self, query: str, variables: Mapping[str, Any] | None = None) -> dict:
        """
        Execute a GraphQL query

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The `data` object of the GraphQL response

        Raises:
            GraphQLRequestError: If the request fails or the response carries errors
        """
        ...

    async def __aenter__(self) -> "GraphQLClientProtocol":
        ...

    async def __aexit__(self, exc_type, exc, tb) -> None:
        ...


# (endpoint, headers) -> client
GraphQLClientFactory = Callable[[str, Mapping[str, str]], GraphQLClientProtocol]
