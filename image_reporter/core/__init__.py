"""
Core module: Configuration, Logging, Exceptions
"""

from image_reporter.core.config import settings
from image_reporter.core.logging import configure_logging, get_logger

__all__ = ["settings", "configure_logging", "get_logger"]
