"""
Supplier Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from renovator.app.use_cases.dtos import CamelModel


class CreateSupplierCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    contact_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None
    notes: Optional[str] = None


class UpdateSupplierCommand(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    contact_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None
    notes: Optional[str] = None


class SupplierResponse(CamelModel):
    id: UUID
    owner_id: UUID
    name: str
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
