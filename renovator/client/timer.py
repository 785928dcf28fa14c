"""
Refresh timer for the client session cache.

One timer handle per cache. Arming always cancels the previous timer
first, so at most one refresh is ever pending.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

# Refresh this many seconds before the access token expires
REFRESH_MARGIN_SECONDS = 300


def refresh_delay(expires_in: float) -> float:
    return max(0.0, float(expires_in) - REFRESH_MARGIN_SECONDS)


class RefreshTimer:
    def __init__(self):
        self._task: Optional[asyncio.Task] = None

    @property
    def armed(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self, delay: float, callback: Callable[[], Awaitable[None]]) -> None:
        self.cancel()
        self._task = asyncio.create_task(self._fire(delay, callback))

    def cancel(self) -> None:
        # The firing task re-arms from inside its own callback; it must not cancel itself
        if self._task is not None and self._task is not asyncio.current_task():
            self._task.cancel()
        self._task = None

    @staticmethod
    async def _fire(delay: float, callback: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(delay)
        await callback()
