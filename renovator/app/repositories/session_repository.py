from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def get_by_access_token(self, access_token: str) -> Optional[Session]:
        """Get session by access token, with its owning user loaded"""
        pass

    @abstractmethod
    async def get_by_refresh_token(self, refresh_token: str) -> Optional[Session]:
        """Get session by refresh token"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: UUID) -> List[Session]:
        """All sessions for a user, newest first"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update_tokens(
        self,
        session_id: UUID,
        access_token: str,
        refresh_token: str,
        expires_at: datetime,
    ) -> Optional[Session]:
        """Replace tokens and expiry. Returns None if the session no longer exists."""
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: UUID) -> bool:
        """Delete one session. Returns True if a row was removed."""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete all sessions for a user. Returns count of deleted sessions."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every session with expires_at <= now. Returns count."""
        pass
