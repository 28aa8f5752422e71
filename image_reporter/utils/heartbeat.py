"""
Heartbeat timer

Single-shot callback on the running event loop that can be restarted
or stopped. At most one firing is pending at any time.
"""

import asyncio
from typing import Callable

from image_reporter.core.logging import get_logger

logger = get_logger(__name__)


class HeartbeatTimer:
    """Restartable timeout bound to the running asyncio loop.

    Must be created from a coroutine or callback running on that loop;
    construction outside a running loop raises RuntimeError.
    """

    def __init__(self, callback: Callable[[], None], timeout_time: float) -> None:
        self.timeout_time = timeout_time
        self._callback = callback
        self._loop = asyncio.get_running_loop()
        self._handle: asyncio.TimerHandle | None = self._loop.call_later(timeout_time, callback)

    def restart(self, timeout: float | None = None) -> None:
        """Cancel the pending firing and schedule a new one.

        A missing or zero ``timeout`` reuses ``timeout_time``.
        """
        self.stop()
        delay = timeout or self.timeout_time
        self._handle = self._loop.call_later(delay, self._callback)
        logger.debug("heartbeat_restarted", delay=delay)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    @property
    def pending(self) -> bool:
        """True while a firing is scheduled and has not run yet."""
        if self._handle is None or self._handle.cancelled():
            return False
        return self._handle.when() > self._loop.time()


def create_heartbeat_timer(callback: Callable[[], None], timeout_time: float) -> HeartbeatTimer:
    """Start a heartbeat timer firing ``callback`` after ``timeout_time`` seconds."""
    return HeartbeatTimer(callback, timeout_time)
