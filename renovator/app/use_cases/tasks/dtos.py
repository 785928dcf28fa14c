"""
Task Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import TaskPriority, TaskStatus


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTaskCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    milestone_id: Optional[UUID] = None
    status: TaskStatus = TaskStatus.todo
    priority: TaskPriority = TaskPriority.medium
    due_date: Optional[date] = None
    price: Optional[float] = Field(default=None, ge=0)
    amount: float = Field(default=1.0, gt=0)
    unit: Optional[str] = Field(default=None, max_length=50)
    assigned_to: Optional[UUID] = None


class UpdateTaskCommand(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    milestone_id: Optional[UUID] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    price: Optional[float] = Field(default=None, ge=0)
    amount: Optional[float] = Field(default=None, gt=0)
    unit: Optional[str] = Field(default=None, max_length=50)
    assigned_to: Optional[UUID] = None


class CreateTasksFromTemplatesCommand(CamelModel):
    template_ids: List[UUID] = Field(..., min_length=1)


class AddTaskNoteCommand(CamelModel):
    note: str = Field(..., min_length=1)


# ============================================================================
# Response DTOs
# ============================================================================


class TaskResponse(CamelModel):
    id: UUID
    project_id: UUID
    milestone_id: Optional[UUID] = None
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[date] = None
    completed_date: Optional[date] = None
    price: Optional[float] = None
    amount: float
    unit: Optional[str] = None
    actual_price: Optional[float] = None
    assigned_to: Optional[UUID] = None
    notes: List[str] = []
    created_at: datetime
    updated_at: datetime
