"""
Application Entry Point
Run with: python main.py

Collects CF_* variables from the environment, builds the image-report
request and prints it as JSON with the credential masked.
"""

import asyncio
import json
import os
import sys

from image_reporter.core.exceptions import ImageReportError
from image_reporter.core.logging import configure_logging, get_logger
from image_reporter.services.request_builder import build_url_headers

logger = get_logger(__name__)


def payload_from_env(environ: dict[str, str] | None = None) -> dict[str, str]:
    environ = os.environ if environ is None else environ
    return {key: value for key, value in environ.items() if key.startswith("CF_")}


async def run() -> int:
    try:
        request = await build_url_headers(payload_from_env())
    except ImageReportError as exc:
        logger.error("image_report_request_failed", code=exc.code, error=exc.message)
        return 1

    print(json.dumps({"url": request.url, "headers": request.masked_headers()}, indent=2))
    return 0


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(run()))
