"""
Resource Use Cases
"""

from .manage_resources_use_case import OVERDUE_GRACE_DAYS, ManageResourcesUseCase
from .dtos import (
    CreateResourceCommand,
    OrderResourceCommand,
    ReceiveResourceCommand,
    ResourceResponse,
    UpdateResourceCommand,
)

__all__ = [
    "ManageResourcesUseCase",
    "OVERDUE_GRACE_DAYS",
    "CreateResourceCommand",
    "OrderResourceCommand",
    "ReceiveResourceCommand",
    "ResourceResponse",
    "UpdateResourceCommand",
]
