"""
Manage Sessions Use Case

Lets a user see and end their own sessions.
"""

import logging
from typing import List
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from .dtos import LogoutAllResponse, SessionResponse

logger = logging.getLogger(__name__)


class ManageSessionsUseCase:
    """
    Use case for self-service session management.

    Business Rules:
    - Users only ever see or delete their own sessions
    - Another user's session is reported as not found
    - Deleting sessions never deletes the user
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_sessions(self, user_id: UUID) -> Result[List[SessionResponse]]:
        async with self.uow:
            sessions = await self.uow.sessions.list_by_user_id(user_id)

            now = utcnow()
            return Return.ok(
                [
                    SessionResponse(
                        id=s.id,
                        created_at=s.created_at,
                        expires_at=s.expires_at,
                        expired=s.is_expired(now),
                    )
                    for s in sessions
                ]
            )

    async def delete_session(self, session_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or session.user_id != user_id:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            await self.uow.sessions.delete_by_id(session_id)
            await self.uow.commit()

        return Return.ok({"session_id": session_id})

    async def logout_all(self, user_id: UUID) -> Result[LogoutAllResponse]:
        async with self.uow:
            count = await self.uow.sessions.delete_all_by_user_id(user_id)
            await self.uow.commit()

        logger.info(f"Deleted {count} session(s) for user {user_id}")
        return Return.ok(
            LogoutAllResponse(
                message=f"Successfully revoked {count} session(s)",
                revoked_count=count,
            )
        )
