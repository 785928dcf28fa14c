"""
Resource Entity

Material, equipment or subcontracted work a project needs, tracked from
needed through ordered to received.
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from renovator.domain.base import utcnow
from .enums import ResourceStatus, ResourceType


class Resource(SQLModel, table=True):
    """
    Resource entity.

    Business Rules:
    - New resources start as needed
    - Ordering stamps order and expected delivery dates, receiving stamps
      the actual delivery date
    - The supplier is optional and must belong to the project owner
    """

    __tablename__ = "resources"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    supplier_id: Optional[UUID] = Field(default=None, foreign_key="suppliers.id", index=True)

    type: ResourceType
    name: str = Field(max_length=255)
    quantity: float
    unit: str = Field(max_length=50)
    cost: float = Field(default=0.0)
    status: ResourceStatus = Field(default=ResourceStatus.needed)

    order_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    actual_delivery_date: Optional[date] = None
    notes: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
