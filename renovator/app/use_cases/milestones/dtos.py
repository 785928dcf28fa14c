"""
Milestone Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import MilestoneStatus


class CreateMilestoneCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    target_date: date
    order_index: int = Field(default=0, ge=0)
    status: MilestoneStatus = MilestoneStatus.not_started


class UpdateMilestoneCommand(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    target_date: Optional[date] = None
    completed_date: Optional[date] = None
    status: Optional[MilestoneStatus] = None
    order_index: Optional[int] = Field(default=None, ge=0)


class MilestoneResponse(CamelModel):
    id: UUID
    project_id: UUID
    name: str
    description: Optional[str] = None
    target_date: date
    completed_date: Optional[date] = None
    status: MilestoneStatus
    order_index: int
    created_at: datetime
    updated_at: datetime


class MilestoneDetailResponse(MilestoneResponse):
    """Milestone with the share of its tasks already completed"""

    progress_percentage: int


class TimelineResponse(CamelModel):
    project_id: UUID
    start_date: date
    end_date: date
    milestones: List[MilestoneResponse]
    progress_percentage: int
