"""
HTTPX GraphQL Client

Posts GraphQL documents to the control-plane API and returns the `data` object.
"""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from image_reporter.core.config import settings
from image_reporter.core.exceptions import GraphQLRequestError
from image_reporter.core.logging import get_logger

logger = get_logger(__name__)


class HTTPXGraphQLClient:
    """httpx based GraphQL client."""

    def __init__(
        self,
        endpoint: str,
        headers: Mapping[str, str] | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self._client = httpx.AsyncClient(
            headers=dict(headers or {}),
            timeout=timeout if timeout is not None else settings.graphql_timeout,
            transport=transport,
        )
        logger.debug("graphql_client_initialized", endpoint=endpoint)

    async def request(self, query: str, variables: Mapping[str, Any] | None = None) -> dict:
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = dict(variables)

        try:
            resp = await self._client.post(self.endpoint, json=payload)
        except httpx.HTTPError as exc:
            raise GraphQLRequestError(f"GraphQL request to {self.endpoint} failed: {exc}") from exc

        if resp.status_code >= 400:
            raise GraphQLRequestError(
                f"GraphQL request to {self.endpoint} returned {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise GraphQLRequestError(
                f"GraphQL response from {self.endpoint} is not JSON",
                status_code=resp.status_code,
            ) from exc

        if not isinstance(body, dict):
            raise GraphQLRequestError("GraphQL response was not a JSON object", status_code=resp.status_code)

        errors = body.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors)
            raise GraphQLRequestError(
                f"GraphQL errors: {messages}",
                status_code=resp.status_code,
                errors=errors,
            )

        return body.get("data") or {}

    async def __aenter__(self) -> "HTTPXGraphQLClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self._client.__aexit__(exc_type, exc, tb)
