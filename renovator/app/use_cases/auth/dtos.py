"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the OAuth login, refresh and logout flow.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from renovator.app.use_cases.dtos import CamelModel


class AuthorizationUrlResponse(CamelModel):
    """Response for the login redirect use case"""

    authorization_url: str


class UserProfile(CamelModel):
    """Public view of a user"""

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    company: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class CallbackResponse(CamelModel):
    """Response for the OAuth callback use case"""

    access_token: str
    refresh_token: str
    expires_in: int
    user: UserProfile
    session_id: UUID


class RefreshTokenResponse(CamelModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
    expires_in: int
    session_id: Optional[UUID] = None


class MessageResponse(CamelModel):
    message: str
