"""
Budget totals

Estimated total comes from the budget items. Actual total is the sum of
item actual costs plus the actual prices of the project's tasks.
"""

from typing import List, Optional
from uuid import UUID

from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from renovator.domain.entities import Budget, BudgetItem, Task

WARNING_THRESHOLD = 10.0
CRITICAL_THRESHOLD = 20.0


def compute_totals(items: List[BudgetItem], tasks: List[Task]) -> dict:
    from_items = sum(float(item.actual_cost or 0) for item in items)
    from_tasks = sum(float(task.actual_price or 0) for task in tasks)
    return {
        "total_estimated": sum(float(item.estimated_cost) for item in items),
        "total_actual_from_items": from_items,
        "total_actual_from_tasks": from_tasks,
        "total_actual": from_items + from_tasks,
    }


def alert_level(variance_percentage: Optional[float]) -> Optional[str]:
    """warning above 10 % overrun, critical above 20 %"""
    if variance_percentage is None or variance_percentage <= WARNING_THRESHOLD:
        return None
    return "critical" if variance_percentage > CRITICAL_THRESHOLD else "warning"


async def recalculate_totals(uow: UnitOfWork, budget: Budget) -> Budget:
    items = await uow.budgets.list_items(budget.id)
    tasks = await uow.tasks.list_by_project_id(budget.project_id)

    for field, value in compute_totals(items, tasks).items():
        setattr(budget, field, value)
    budget.updated_at = utcnow()
    return await uow.budgets.update(budget)


async def recalculate_for_project(uow: UnitOfWork, project_id: UUID) -> None:
    budget = await uow.budgets.get_by_project_id(project_id)
    if budget is not None:
        await recalculate_totals(uow, budget)
