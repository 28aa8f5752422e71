"""
Service layer: runtime lookups and image-report request building
"""

from image_reporter.services.request_builder import RequestBuilder, build_url_headers
from image_reporter.services.runtime_service import RuntimeService

__all__ = ["RequestBuilder", "RuntimeService", "build_url_headers"]
