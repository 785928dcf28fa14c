from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from renovator.api.error import raise_for_error
from renovator.api.utils.query import parse_enum_list
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.projects import (
    CreateProjectCommand,
    ManageProjectsUseCase,
    ProjectResponse,
    UpdateProjectCommand,
)
from renovator.depends import get_current_user, get_unit_of_work
from renovator.domain.entities import ProjectStatus

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: CreateProjectCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project

    Raises:
        - 400 Bad Request: INVALID_DATES
        - 422 Unprocessable Entity: Invalid input
    """
    result = await ManageProjectsUseCase(uow).create(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, INVALID_DATES=status.HTTP_400_BAD_REQUEST)
    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ProjectResponse])
async def list_projects(
    status_filter: Optional[str] = Query(None, alias="status"),
    search: Optional[str] = Query(None),
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Caller's projects, newest first, filtered by `status=a,b` and `search`"""
    statuses = parse_enum_list(status_filter, ProjectStatus, "status")
    result = await ManageProjectsUseCase(uow).list_projects(
        current_user.id, statuses, search or None
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageProjectsUseCase(uow).get(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: UpdateProjectCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageProjectsUseCase(uow).update(project_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, INVALID_DATES=status.HTTP_400_BAD_REQUEST)
    return result.value


@router.delete("/{project_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_project(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a project with its milestones, tasks and budget"""
    result = await ManageProjectsUseCase(uow).delete(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Project deleted successfully")


@router.post(
    "/{project_id}/archive", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def archive_project(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageProjectsUseCase(uow).archive(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
