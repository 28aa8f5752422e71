"""
Image reporter: builds image-report requests for the control plane
"""

from image_reporter.core.exceptions import (
    GraphQLRequestError,
    ImageReportError,
    MissingCredentialError,
    ValidationError,
)
from image_reporter.schemas.image_report import ImageReportRequest
from image_reporter.services.request_builder import RequestBuilder, build_url_headers
from image_reporter.services.runtime_service import RuntimeService

__all__ = [
    "GraphQLRequestError",
    "ImageReportError",
    "ImageReportRequest",
    "MissingCredentialError",
    "RequestBuilder",
    "RuntimeService",
    "ValidationError",
    "build_url_headers",
]
