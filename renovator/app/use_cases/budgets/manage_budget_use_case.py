"""
Manage Budget Use Case

One budget per project with itemised costs and overrun alerts.
"""

import logging
from typing import List
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.ownership import owned_project
from renovator.domain.base import utcnow
from renovator.domain.entities import Budget, BudgetItem
from .dtos import (
    BudgetAlert,
    BudgetItemResponse,
    BudgetResponse,
    CreateBudgetItemCommand,
    UpdateBudgetItemCommand,
)
from .totals import alert_level, recalculate_totals

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
BUDGET_NOT_FOUND = Error("BUDGET_NOT_FOUND", "Budget not found")
BUDGET_ITEM_NOT_FOUND = Error("BUDGET_ITEM_NOT_FOUND", "Budget item not found")


class ManageBudgetUseCase:
    """
    Use case for project budgets.

    Business Rules:
    - At most one budget per project (BUDGET_ALREADY_EXISTS)
    - Every item change recalculates the budget totals
    - Alerts fire above 10 % overrun (warning) and 20 % (critical);
      no alerts while nothing is estimated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _owned_budget(self, budget_id: UUID, user_id: UUID):
        budget = await self.uow.budgets.get_by_id(budget_id)
        if budget is None or await owned_project(self.uow, budget.project_id, user_id) is None:
            return None
        return budget

    async def _response(self, budget: Budget) -> BudgetResponse:
        items = await self.uow.budgets.list_items(budget.id)
        return BudgetResponse(
            id=budget.id,
            project_id=budget.project_id,
            total_estimated=budget.total_estimated,
            total_actual=budget.total_actual,
            total_actual_from_items=budget.total_actual_from_items,
            total_actual_from_tasks=budget.total_actual_from_tasks,
            variance=budget.variance,
            variance_percentage=budget.variance_percentage,
            items=[BudgetItemResponse.model_validate(i) for i in items],
            created_at=budget.created_at,
            updated_at=budget.updated_at,
        )

    async def create(self, project_id: UUID, user_id: UUID) -> Result[BudgetResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)

            if await self.uow.budgets.get_by_project_id(project_id) is not None:
                return Return.err(
                    Error("BUDGET_ALREADY_EXISTS", "Budget already exists for this project")
                )

            budget = await self.uow.budgets.create(Budget(project_id=project_id))
            # Tasks priced before the budget existed count straight away
            budget = await recalculate_totals(self.uow, budget)
            await self.uow.commit()
            response = await self._response(budget)

        return Return.ok(response)

    async def get_for_project(self, project_id: UUID, user_id: UUID) -> Result[BudgetResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)

            budget = await self.uow.budgets.get_by_project_id(project_id)
            if budget is None:
                return Return.err(BUDGET_NOT_FOUND)
            response = await self._response(budget)

        return Return.ok(response)

    async def add_item(
        self, budget_id: UUID, user_id: UUID, command: CreateBudgetItemCommand
    ) -> Result[BudgetItemResponse]:
        async with self.uow:
            budget = await self._owned_budget(budget_id, user_id)
            if budget is None:
                return Return.err(BUDGET_NOT_FOUND)

            item = await self.uow.budgets.add_item(
                BudgetItem(budget_id=budget.id, **command.model_dump())
            )
            await recalculate_totals(self.uow, budget)
            await self.uow.commit()

        return Return.ok(BudgetItemResponse.model_validate(item))

    async def update_item(
        self, item_id: UUID, user_id: UUID, command: UpdateBudgetItemCommand
    ) -> Result[BudgetItemResponse]:
        async with self.uow:
            item = await self.uow.budgets.get_item_by_id(item_id)
            budget = await self._owned_budget(item.budget_id, user_id) if item else None
            if budget is None:
                return Return.err(BUDGET_ITEM_NOT_FOUND)

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(item, field, value)
            item.updated_at = utcnow()

            item = await self.uow.budgets.update_item(item)
            await recalculate_totals(self.uow, budget)
            await self.uow.commit()

        return Return.ok(BudgetItemResponse.model_validate(item))

    async def delete_item(self, item_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            item = await self.uow.budgets.get_item_by_id(item_id)
            budget = await self._owned_budget(item.budget_id, user_id) if item else None
            if budget is None:
                return Return.err(BUDGET_ITEM_NOT_FOUND)

            await self.uow.budgets.delete_item(item)
            await recalculate_totals(self.uow, budget)
            await self.uow.commit()

        return Return.ok({"item_id": item_id})

    async def alerts(self, budget_id: UUID, user_id: UUID) -> Result[List[BudgetAlert]]:
        async with self.uow:
            budget = await self._owned_budget(budget_id, user_id)
            if budget is None:
                return Return.err(BUDGET_NOT_FOUND)

            percentage = budget.variance_percentage
            level = alert_level(percentage)
            if level is None:
                return Return.ok([])

            return Return.ok(
                [
                    BudgetAlert(
                        budget_id=budget.id,
                        type=level,
                        message=f"Budget exceeded by {percentage:.1f}%",
                        variance_percentage=percentage,
                    )
                ]
            )
