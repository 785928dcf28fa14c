"""
Purge Expired Sessions Use Case

Maintenance sweep over the sessions table. Used by the background
sweeper and by the admin endpoint.
"""

import logging

from renovator.libs.result import Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from .dtos import PurgeExpiredResponse

logger = logging.getLogger(__name__)


class PurgeExpiredSessionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeExpiredResponse]:
        async with self.uow:
            deleted = await self.uow.sessions.delete_expired(utcnow())
            await self.uow.commit()

        if deleted:
            logger.info(f"Purged {deleted} expired session(s)")
        return Return.ok(PurgeExpiredResponse(deleted_count=deleted))
