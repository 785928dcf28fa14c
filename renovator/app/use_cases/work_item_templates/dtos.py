"""
Work Item Template DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import WorkItemCategory


class CreateTemplateCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: WorkItemCategory
    estimated_duration: Optional[int] = Field(default=None, ge=0)
    default_price: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, max_length=50)


class UpdateTemplateCommand(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    category: Optional[WorkItemCategory] = None
    estimated_duration: Optional[int] = Field(default=None, ge=0)
    default_price: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, max_length=50)


class TemplateResponse(CamelModel):
    id: UUID
    name: str
    description: Optional[str] = None
    category: WorkItemCategory
    estimated_duration: Optional[int] = None
    default_price: Optional[float] = None
    unit: Optional[str] = None
    is_default: bool
    owner_id: Optional[UUID] = None
    created_at: datetime


class SeedTemplatesResponse(CamelModel):
    created_count: int
