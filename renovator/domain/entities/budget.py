"""
Budget Entities

One budget per project with itemised estimated/actual costs.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from renovator.domain.base import utcnow
from .enums import BudgetCategory


class Budget(SQLModel, table=True):
    """
    Budget entity.

    Business Rules:
    - At most one budget per project
    - Totals are derived: estimated from items, actual from items + task prices
    """

    __tablename__ = "budgets"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, unique=True)

    total_estimated: float = Field(default=0.0)
    total_actual: float = Field(default=0.0)
    total_actual_from_items: float = Field(default=0.0)
    total_actual_from_tasks: float = Field(default=0.0)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    items: List["BudgetItem"] = Relationship(back_populates="budget")

    @property
    def variance(self) -> float:
        return self.total_actual - self.total_estimated

    @property
    def variance_percentage(self) -> Optional[float]:
        if self.total_estimated <= 0:
            return None
        return self.variance / self.total_estimated * 100


class BudgetItem(SQLModel, table=True):
    __tablename__ = "budget_items"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    budget_id: UUID = Field(foreign_key="budgets.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    category: BudgetCategory
    estimated_cost: float
    actual_cost: float = Field(default=0.0)
    notes: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    budget: Optional[Budget] = Relationship(back_populates="items")
