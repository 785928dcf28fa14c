"""
Session Entity

One record per authenticated device/browser login.
"""

from datetime import datetime, timedelta
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from renovator.domain.base import utcnow

if TYPE_CHECKING:
    from .user import User


def expiry_from(expires_in: int, now: Optional[datetime] = None) -> datetime:
    """Absolute expiry for a provider-reported lifetime in seconds (may be negative)."""
    return (now or utcnow()) + timedelta(seconds=expires_in)


class Session(SQLModel, table=True):
    """
    Session entity - provider tokens for one login.

    Business Rules:
    - A user may hold any number of concurrent sessions
    - Tokens and expiry are replaced together on refresh
    - A past expires_at is accepted at creation; the session is simply expired
    - Expired sessions are removed by the maintenance sweep
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    access_token: str = Field(unique=True)
    refresh_token: str = Field(index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    user: Optional["User"] = Relationship()

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) >= self.expires_at
