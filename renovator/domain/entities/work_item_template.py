"""
Work Item Template Entity

Reusable task blueprint. Default templates are shared by everyone,
custom templates belong to their owner.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from renovator.domain.base import utcnow
from .enums import WorkItemCategory


class WorkItemTemplate(SQLModel, table=True):
    __tablename__ = "work_item_templates"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = None
    category: WorkItemCategory
    estimated_duration: Optional[int] = None  # hours
    default_price: Optional[float] = None
    unit: Optional[str] = Field(default=None, max_length=50)

    is_default: bool = Field(default=False, index=True)
    owner_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    def visible_to(self, user_id: UUID) -> bool:
        return self.is_default or self.owner_id == user_id
