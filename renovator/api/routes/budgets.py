from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from renovator.api.error import raise_for_error
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.budgets import (
    BudgetAlert,
    BudgetItemResponse,
    BudgetResponse,
    CreateBudgetItemCommand,
    ManageBudgetUseCase,
    UpdateBudgetItemCommand,
)
from renovator.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Budgets"])


@router.post(
    "/projects/{project_id}/budget",
    status_code=status.HTTP_201_CREATED,
    response_model=BudgetResponse,
)
async def create_budget(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project Budget

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND
        - 409 Conflict: BUDGET_ALREADY_EXISTS
    """
    result = await ManageBudgetUseCase(uow).create(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, BUDGET_ALREADY_EXISTS=status.HTTP_409_CONFLICT)
    return result.value


@router.get(
    "/projects/{project_id}/budget",
    status_code=status.HTTP_200_OK,
    response_model=BudgetResponse,
)
async def get_budget(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Budget with items, totals and variance"""
    result = await ManageBudgetUseCase(uow).get_for_project(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/budgets/{budget_id}/items",
    status_code=status.HTTP_201_CREATED,
    response_model=BudgetItemResponse,
)
async def add_budget_item(
    budget_id: UUID,
    request: CreateBudgetItemCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageBudgetUseCase(uow).add_item(budget_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/budgets/{budget_id}/alerts",
    status_code=status.HTTP_200_OK,
    response_model=List[BudgetAlert],
)
async def get_budget_alerts(
    budget_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Overrun alerts: warning above 10 %, critical above 20 %"""
    result = await ManageBudgetUseCase(uow).alerts(budget_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/budget-items/{item_id}",
    status_code=status.HTTP_200_OK,
    response_model=BudgetItemResponse,
)
async def update_budget_item(
    item_id: UUID,
    request: UpdateBudgetItemCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageBudgetUseCase(uow).update_item(item_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/budget-items/{item_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def delete_budget_item(
    item_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageBudgetUseCase(uow).delete_item(item_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Budget item deleted successfully")
