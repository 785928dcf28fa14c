"""
Budget Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import BudgetCategory


# ============================================================================
# Command DTOs
# ============================================================================


class CreateBudgetItemCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    category: BudgetCategory
    estimated_cost: float = Field(..., ge=0)
    actual_cost: float = Field(default=0.0, ge=0)
    notes: Optional[str] = None


class UpdateBudgetItemCommand(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category: Optional[BudgetCategory] = None
    estimated_cost: Optional[float] = Field(default=None, ge=0)
    actual_cost: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class BudgetItemResponse(CamelModel):
    id: UUID
    budget_id: UUID
    name: str
    category: BudgetCategory
    estimated_cost: float
    actual_cost: float
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class BudgetResponse(CamelModel):
    id: UUID
    project_id: UUID
    total_estimated: float
    total_actual: float
    total_actual_from_items: float
    total_actual_from_tasks: float
    variance: float
    variance_percentage: Optional[float] = None
    items: List[BudgetItemResponse] = []
    created_at: datetime
    updated_at: datetime


class BudgetAlert(CamelModel):
    budget_id: UUID
    type: Literal["warning", "critical"]
    message: str
    variance_percentage: float
