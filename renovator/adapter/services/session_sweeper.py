"""
Expired Session Sweeper

Background loop started from the application lifespan that purges
expired sessions every SESSION_SWEEP_INTERVAL_SECONDS.
"""

import asyncio
import contextlib
import logging
from typing import AsyncContextManager, Callable, Optional

from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.sessions import PurgeExpiredSessionsUseCase

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Owns one asyncio task; start() is idempotent, stop() waits for the task to end."""

    def __init__(
        self,
        uow_factory: Callable[[], AsyncContextManager[UnitOfWork]],
        interval_seconds: int,
    ):
        self.uow_factory = uow_factory
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def sweep_once(self) -> int:
        async with self.uow_factory() as uow:
            result = await PurgeExpiredSessionsUseCase(uow).execute()
        return result.value.deleted_count

    async def _run(self) -> None:
        while True:
            try:
                await self.sweep_once()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Expired session sweep failed")
            await asyncio.sleep(self.interval_seconds)

    def start(self) -> None:
        if self.interval_seconds <= 0:
            logger.info("Session sweeper disabled")
            return
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Session sweeper started, interval {self.interval_seconds}s")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Session sweeper stopped")
