from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from renovator.api.error import raise_for_error
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.milestones import (
    CreateMilestoneCommand,
    ManageMilestonesUseCase,
    MilestoneDetailResponse,
    MilestoneResponse,
    TimelineResponse,
    UpdateMilestoneCommand,
)
from renovator.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Milestones"])


@router.post(
    "/projects/{project_id}/milestones",
    status_code=status.HTTP_201_CREATED,
    response_model=MilestoneResponse,
)
async def create_milestone(
    project_id: UUID,
    request: CreateMilestoneCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageMilestonesUseCase(uow).create(project_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/projects/{project_id}/milestones",
    status_code=status.HTTP_200_OK,
    response_model=List[MilestoneResponse],
)
async def list_milestones(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Milestones ordered by target date, then order index"""
    result = await ManageMilestonesUseCase(uow).list_for_project(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/projects/{project_id}/timeline",
    status_code=status.HTTP_200_OK,
    response_model=TimelineResponse,
)
async def get_timeline(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Milestone span of the project with its completion percentage"""
    result = await ManageMilestonesUseCase(uow).timeline(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/milestones/{milestone_id}",
    status_code=status.HTTP_200_OK,
    response_model=MilestoneDetailResponse,
)
async def get_milestone(
    milestone_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageMilestonesUseCase(uow).get(milestone_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/milestones/{milestone_id}",
    status_code=status.HTTP_200_OK,
    response_model=MilestoneResponse,
)
async def update_milestone(
    milestone_id: UUID,
    request: UpdateMilestoneCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageMilestonesUseCase(uow).update(milestone_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/milestones/{milestone_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def delete_milestone(
    milestone_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a milestone; its tasks stay in the project without a milestone"""
    result = await ManageMilestonesUseCase(uow).delete(milestone_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Milestone deleted successfully")


@router.post(
    "/milestones/{milestone_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=MilestoneResponse,
)
async def complete_milestone(
    milestone_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageMilestonesUseCase(uow).complete(milestone_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
