"""
Pydantic schemas and payload constants
"""

from image_reporter.schemas.image_report import ImageReportRequest, Payload

__all__ = ["ImageReportRequest", "Payload"]
