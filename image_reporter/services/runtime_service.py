"""
Runtime Service

Read-only lookups of runtime metadata (version, ingress host) on the
control-plane GraphQL API. One round-trip per call, no retry, no caching.
"""

from __future__ import annotations

from typing import Any, Mapping

from image_reporter.core.config import settings
from image_reporter.core.exceptions import ValidationError
from image_reporter.core.logging import get_logger, measure_latency
from image_reporter.graphql.factory import get_graphql_client
from image_reporter.graphql.protocol import GraphQLClientFactory

logger = get_logger(__name__)

RUNTIME_INGRESS_HOST_QUERY = """
query Runtime($name: String!) {
    runtime(name: $name) {
        ingressHost
    }
}
"""

RUNTIME_VERSION_QUERY = """
query Runtime($name: String!) {
    runtime(name: $name) {
        runtimeVersion
    }
}
"""


def _get_path(data: Mapping[str, Any] | None, path: str, default: Any = None) -> Any:
    current: Any = data
    for key in path.split("."):
        if not isinstance(current, Mapping) or current.get(key) is None:
            return default
        current = current[key]
    return current


class RuntimeService:
    """Resolves runtime metadata by runtime name."""

    def __init__(self, client_factory: GraphQLClientFactory | None = None):
        self.client_factory = client_factory or get_graphql_client

    async def _query(
        self,
        query: str,
        runtime_name: str,
        headers: Mapping[str, str],
        platform_host: str | None,
    ) -> dict:
        endpoint = settings.graphql_endpoint(platform_host)
        async with self.client_factory(endpoint, headers) as client:
            return await client.request(query, {"name": runtime_name})

    @measure_latency("get_runtime_version")
    async def get_runtime_version(
        self,
        headers: Mapping[str, str],
        runtime_name: str | None = None,
        platform_host: str | None = None,
    ) -> str:
        """
        Get the version of a runtime

        Args:
            headers: Request headers, authorization included
            runtime_name: Runtime name; no lookup happens when empty
            platform_host: Control-plane base URL, defaults to settings.platform_url

        Returns:
            Runtime version, or '' when there is no runtime name or the
            runtime reports no version yet
        """
        if not runtime_name:
            return ""

        data = await self._query(RUNTIME_VERSION_QUERY, runtime_name, headers, platform_host)
        version = _get_path(data, "runtime.runtimeVersion", "")
        logger.info("runtime_version_resolved", runtime_name=runtime_name, runtime_version=version)
        return version

    @measure_latency("get_runtime_ingress_host")
    async def get_runtime_ingress_host(
        self,
        runtime_name: str,
        headers: Mapping[str, str],
        platform_host: str | None = None,
    ) -> str:
        """
        Get the ingress host of a runtime

        Raises:
            ValidationError: If the runtime does not exist or has no ingress host
        """
        data = await self._query(RUNTIME_INGRESS_HOST_QUERY, runtime_name, headers, platform_host)
        ingress_host = _get_path(data, "runtime.ingressHost")
        if not ingress_host:
            if _get_path(data, "runtime") is not None:
                message = f"ingress host is not defined on your '{runtime_name}' runtime"
            else:
                message = f"runtime '{runtime_name}' does not exist"
            logger.warning("runtime_ingress_host_missing", runtime_name=runtime_name, reason=message)
            raise ValidationError(message)

        logger.info("runtime_ingress_host_resolved", runtime_name=runtime_name, ingress_host=ingress_host)
        return ingress_host
