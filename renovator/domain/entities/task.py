"""
Task Entity

A unit of work within a project, optionally attached to a milestone.
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from renovator.domain.base import utcnow
from .enums import TaskPriority, TaskStatus


def compute_actual_price(price: Optional[float], amount: Optional[float]) -> Optional[float]:
    """actual_price = price x amount; no price means no actual price."""
    if price is None:
        return None
    return float(price) * (float(amount) if amount is not None else 1.0)


class Task(SQLModel, table=True):
    """
    Task entity.

    Business Rules:
    - actual_price is always price x amount (amount defaults to 1)
    - completed_date is stamped when status first becomes completed
    - notes are append-only from the API
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    milestone_id: Optional[UUID] = Field(default=None, foreign_key="milestones.id", index=True)

    name: str = Field(max_length=255)
    description: Optional[str] = None
    status: TaskStatus = Field(default=TaskStatus.todo)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    due_date: Optional[date] = None
    completed_date: Optional[date] = None

    price: Optional[float] = None
    amount: float = Field(default=1.0)
    unit: Optional[str] = Field(default=None, max_length=50)
    actual_price: Optional[float] = None

    assigned_to: Optional[UUID] = Field(default=None, foreign_key="users.id")
    notes: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
