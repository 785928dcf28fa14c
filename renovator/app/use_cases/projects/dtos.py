"""
Project Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import ProjectStatus


# ============================================================================
# Command DTOs
# ============================================================================


class CreateProjectCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    client_name: str = Field(..., min_length=1, max_length=255)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=20)
    description: Optional[str] = None
    start_date: date
    estimated_end_date: date
    status: ProjectStatus = ProjectStatus.planning


class UpdateProjectCommand(CamelModel):
    """Partial update; only fields present in the request are applied"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    client_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    client_email: Optional[str] = Field(default=None, max_length=255)
    client_phone: Optional[str] = Field(default=None, max_length=20)
    description: Optional[str] = None
    start_date: Optional[date] = None
    estimated_end_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    status: Optional[ProjectStatus] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectResponse(CamelModel):
    id: UUID
    name: str
    client_name: str
    client_email: Optional[str] = None
    client_phone: Optional[str] = None
    description: Optional[str] = None
    start_date: date
    estimated_end_date: date
    actual_end_date: Optional[date] = None
    status: ProjectStatus
    owner_id: UUID
    created_at: datetime
    updated_at: datetime
