from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.session_repository import ISessionRepository
from renovator.domain.entities import Session


class SessionRepository(ISessionRepository):
    """
    Session repository implementation using SQLModel.

    Mutations are single UPDATE/DELETE statements keyed by id so that a
    delete racing an update leaves the row either updated or gone.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        stmt = (
            select(Session)
            .where(Session.id == session_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_access_token(self, access_token: str) -> Optional[Session]:
        """Get session by access token with its user"""
        stmt = (
            select(Session)
            .where(Session.access_token == access_token)
            .options(selectinload(Session.user))
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """Get session by refresh token"""
        stmt = select(Session).where(Session.refresh_token == refresh_token)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_user_id(self, user_id: UUID) -> List[Session]:
        """All sessions for a user, newest first"""
        stmt = (
            select(Session)
            .where(Session.user_id == user_id)
            .order_by(Session.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update_tokens(
        self,
        session_id: UUID,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
    ) -> Optional[Session]:
        """Replace tokens and expiry in one statement"""
        stmt = (
            update(Session)
            .where(Session.id == session_id)
            .values(
                access_token=access_token,
                refresh_token=refresh_token,
                expires_at=expires_at,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None
        return await self.get_by_id(session_id)

    async def delete_by_id(self, session_id: UUID) -> bool:
        """Delete a specific session by ID"""
        stmt = delete(Session).where(Session.id == session_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions for a user"""
        stmt = delete(Session).where(Session.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete every session whose expiry has passed"""
        stmt = delete(Session).where(Session.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
