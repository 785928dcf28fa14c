"""
Project Entity

A renovation job carried out for a client.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from renovator.domain.base import utcnow
from .enums import ProjectStatus


class Project(SQLModel, table=True):
    """
    Project entity - owned by exactly one user.

    Business Rules:
    - Only the owner can read or modify the project
    - estimated_end_date must not precede start_date
    - Archiving is a status change, not a delete
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    client_name: str = Field(max_length=255)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=20)
    description: Optional[str] = None

    start_date: date
    estimated_end_date: date
    actual_end_date: Optional[date] = None

    status: ProjectStatus = Field(default=ProjectStatus.planning)

    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_owner_status", "owner_id", "status"),)
