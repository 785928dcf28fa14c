"""
Milestone Entity

A dated checkpoint within a project.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from renovator.domain.base import utcnow
from .enums import MilestoneStatus


class Milestone(SQLModel, table=True):
    __tablename__ = "milestones"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    description: Optional[str] = None
    target_date: date
    completed_date: Optional[date] = None
    status: MilestoneStatus = Field(default=MilestoneStatus.not_started)
    order_index: int = Field(default=0)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
