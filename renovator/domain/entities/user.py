"""
User Entity

Local mirror of an identity-provider account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from renovator.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - created on first login, refreshed on every login.

    Business Rules:
    - idp_user_id (the provider's `sub` claim) is the reconciliation key
    - Email must be unique across all users
    - Profile fields are overwritten from provider claims on each login
    - Never deleted by the login/logout flow
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    idp_user_id: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(default="", max_length=100)
    last_name: str = Field(default="", max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    company: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
