"""
Session Management DTOs
"""

from datetime import datetime
from uuid import UUID

from renovator.app.use_cases.dtos import CamelModel


class SessionResponse(CamelModel):
    """A session as shown to its owner; tokens are never exposed"""

    id: UUID
    created_at: datetime
    expires_at: datetime
    expired: bool


class LogoutAllResponse(CamelModel):
    message: str
    revoked_count: int


class PurgeExpiredResponse(CamelModel):
    deleted_count: int
