"""
Budget Use Cases
"""

from .manage_budget_use_case import ManageBudgetUseCase
from .totals import alert_level, compute_totals, recalculate_for_project, recalculate_totals
from .dtos import (
    BudgetAlert,
    BudgetItemResponse,
    BudgetResponse,
    CreateBudgetItemCommand,
    UpdateBudgetItemCommand,
)

__all__ = [
    "ManageBudgetUseCase",
    "alert_level",
    "compute_totals",
    "recalculate_for_project",
    "recalculate_totals",
    "BudgetAlert",
    "BudgetItemResponse",
    "BudgetResponse",
    "CreateBudgetItemCommand",
    "UpdateBudgetItemCommand",
]
