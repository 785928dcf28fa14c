"""
Renovator Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ProjectStatus,
    MilestoneStatus,
    TaskStatus,
    TaskPriority,
    WorkItemCategory,
    BudgetCategory,
    ResourceType,
    ResourceStatus,
)

# Export all entities
from .user import User
from .session import Session, expiry_from
from .project import Project
from .milestone import Milestone
from .task import Task, compute_actual_price
from .work_item_template import WorkItemTemplate
from .budget import Budget, BudgetItem
from .supplier import Supplier
from .resource import Resource

__all__ = [
    # Enums
    "ProjectStatus",
    "MilestoneStatus",
    "TaskStatus",
    "TaskPriority",
    "WorkItemCategory",
    "BudgetCategory",
    "ResourceType",
    "ResourceStatus",
    # Entities
    "User",
    "Session",
    "Project",
    "Milestone",
    "Task",
    "WorkItemTemplate",
    "Budget",
    "BudgetItem",
    "Supplier",
    "Resource",
    # Helpers
    "expiry_from",
    "compute_actual_price",
]
