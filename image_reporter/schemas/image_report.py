"""
Image report DTOs

Reserved payload keys and the request produced for the image-report endpoint.
"""

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

# Reserved payload keys
CF_API_KEY = "CF_API_KEY"
CF_HOST = "CF_HOST"
CF_RUNTIME_NAME = "CF_RUNTIME_NAME"
CF_PLATFORM_URL = "CF_PLATFORM_URL"
CF_DOCKERFILE_CONTENT = "CF_DOCKERFILE_CONTENT"
CF_LOCAL = "CF_LOCAL"

# Headers
AUTHORIZATION_HEADER = "authorization"
DOCKERFILE_CONTENT_HEADER = "X-CF-DOCKERFILE-CONTENT"
DATA_HEADER = "X-CF-DATA"

# Image report paths
APP_PROXY_REPORT_PATH = "/app-proxy/api/image-report"
LOCAL_REPORT_PATH = "/api/image-report"

Payload = Mapping[str, str | None]


class ImageReportRequest(BaseModel):
    """Target URL and headers of an image-report call."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Image-report URL, with a query string on the legacy path")
    headers: dict[str, str] = Field(default_factory=dict)

    def masked_headers(self) -> dict[str, str]:
        """Headers with the credential hidden, for printing and logs."""
        masked = dict(self.headers)
        if AUTHORIZATION_HEADER in masked:
            masked[AUTHORIZATION_HEADER] = "***"
        return masked
