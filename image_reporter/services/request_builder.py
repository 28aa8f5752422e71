"""
Image report request builder

Builds the URL and headers of the image-report call. Runtimes at or above
`settings.header_encoding_min_version` receive the report fields base64
encoded in the X-CF-DATA header; older runtimes and explicit hosts receive
them percent-encoded in the query string.
"""

from __future__ import annotations

import asyncio
import base64
from urllib.parse import quote

from image_reporter.core.config import settings
from image_reporter.core.exceptions import MissingCredentialError, ValidationError
from image_reporter.core.logging import get_logger
from image_reporter.schemas.image_report import (
    APP_PROXY_REPORT_PATH,
    AUTHORIZATION_HEADER,
    CF_API_KEY,
    CF_DOCKERFILE_CONTENT,
    CF_HOST,
    CF_LOCAL,
    CF_PLATFORM_URL,
    CF_RUNTIME_NAME,
    DATA_HEADER,
    DOCKERFILE_CONTENT_HEADER,
    LOCAL_REPORT_PATH,
    ImageReportRequest,
    Payload,
)
from image_reporter.services.runtime_service import RuntimeService
from image_reporter.utils.versioning import is_at_least

logger = get_logger(__name__)

# Same character set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def to_query_string(fields: dict[str, str | None]) -> str:
    """Percent-encoded `key=value` pairs joined with `&`."""
    return "&".join(
        f"{encode_uri_component(key)}={encode_uri_component(value or '')}"
        for key, value in fields.items()
    )


def to_header_data(fields: dict[str, str | None]) -> str:
    """Raw `key=value` pairs joined with `&`, base64 encoded.

    Each character becomes one byte (its code point truncated to 8 bits).
    """
    raw = "&".join(f"{key}={value or ''}" for key, value in fields.items())
    return base64.b64encode(bytes(ord(char) & 0xFF for char in raw)).decode("ascii")


class RequestBuilder:
    """Shapes image-report requests from CF_* payloads."""

    def __init__(self, runtime_service: RuntimeService | None = None):
        self.runtime_service = runtime_service or RuntimeService()

    async def _resolve_runtime(
        self,
        runtime_name: str,
        headers: dict[str, str],
        platform_host: str,
    ) -> tuple[str, str]:
        """Run both lookups concurrently.

        A version lookup failure wins over a host lookup failure and
        cancels the pending host lookup.
        """
        version_task = asyncio.ensure_future(
            self.runtime_service.get_runtime_version(headers, runtime_name, platform_host)
        )
        host_task = asyncio.ensure_future(
            self.runtime_service.get_runtime_ingress_host(runtime_name, headers, platform_host)
        )
        try:
            version = await version_task
        except BaseException:
            host_task.cancel()
            await asyncio.gather(host_task, return_exceptions=True)
            raise
        host = await host_task
        return version, host

    async def build_url_headers(self, payload: Payload) -> ImageReportRequest:
        """
        Build image-report url and headers

        Args:
            payload: CF_* control keys plus opaque report fields. Not modified.

        Returns:
            Request to dispatch to the image-report endpoint

        Raises:
            MissingCredentialError: If CF_API_KEY is absent
            ValidationError: If no host can be determined
        """
        fields: dict[str, str | None] = dict(payload)

        api_key = fields.get(CF_API_KEY)
        if not api_key:
            raise MissingCredentialError(f"{CF_API_KEY} is required to report an image")
        headers: dict[str, str] = {AUTHORIZATION_HEADER: api_key}

        runtime_name = fields.get(CF_RUNTIME_NAME)
        platform_host = fields.get(CF_PLATFORM_URL) or settings.platform_url

        if not runtime_name:
            runtime_version = await self.runtime_service.get_runtime_version(headers, runtime_name, platform_host)
            host = fields.pop(CF_HOST, None)
            if not host:
                raise ValidationError(f"{CF_HOST} is required when {CF_RUNTIME_NAME} is not set")
        else:
            runtime_version, host = await self._resolve_runtime(runtime_name, headers, platform_host)
            fields.pop(CF_RUNTIME_NAME, None)
            fields.pop(CF_PLATFORM_URL, None)

        fields.pop(CF_API_KEY, None)

        if is_at_least(runtime_version, settings.header_encoding_min_version):
            dockerfile_content = fields.pop(CF_DOCKERFILE_CONTENT, None)
            if dockerfile_content:
                headers[DOCKERFILE_CONTENT_HEADER] = dockerfile_content
            headers[DATA_HEADER] = to_header_data(fields)
            logger.info(
                "image_report_request_built",
                encoding="headers",
                host=host,
                runtime_version=runtime_version,
                fields=list(fields),
            )
            return ImageReportRequest(url=f"{host}{APP_PROXY_REPORT_PATH}", headers=headers)

        qs = to_query_string(fields)
        path = LOCAL_REPORT_PATH if fields.get(CF_LOCAL) else APP_PROXY_REPORT_PATH
        logger.info(
            "image_report_request_built",
            encoding="query",
            host=host,
            runtime_version=runtime_version,
            local=bool(fields.get(CF_LOCAL)),
            fields=list(fields),
        )
        return ImageReportRequest(url=f"{host}{path}?{qs}", headers=headers)


async def build_url_headers(payload: Payload) -> ImageReportRequest:
    """Build image-report url and headers with the default runtime service."""
    return await RequestBuilder().build_url_headers(payload)
