"""
Resource Use Case DTOs (Data Transfer Objects)
"""

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel
from renovator.domain.entities import ResourceStatus, ResourceType


class CreateResourceCommand(CamelModel):
    type: ResourceType
    name: str = Field(..., min_length=1, max_length=255)
    quantity: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, max_length=50)
    cost: float = Field(..., ge=0)
    supplier_id: Optional[UUID] = None
    notes: Optional[str] = None


class UpdateResourceCommand(CamelModel):
    type: Optional[ResourceType] = None
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    quantity: Optional[float] = Field(default=None, gt=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=50)
    cost: Optional[float] = Field(default=None, ge=0)
    status: Optional[ResourceStatus] = None
    supplier_id: Optional[UUID] = None
    order_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    actual_delivery_date: Optional[date] = None
    notes: Optional[str] = None


class OrderResourceCommand(CamelModel):
    order_date: date
    expected_delivery_date: date


class ReceiveResourceCommand(CamelModel):
    actual_delivery_date: date


class ResourceResponse(CamelModel):
    id: UUID
    project_id: UUID
    supplier_id: Optional[UUID] = None
    type: ResourceType
    name: str
    quantity: float
    unit: str
    cost: float
    status: ResourceStatus
    order_date: Optional[date] = None
    expected_delivery_date: Optional[date] = None
    actual_delivery_date: Optional[date] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
