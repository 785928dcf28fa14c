from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from renovator.api.error import raise_for_error
from renovator.api.utils.query import parse_enum_list
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.tasks import (
    AddTaskNoteCommand,
    CreateTaskCommand,
    CreateTasksFromTemplatesCommand,
    ManageTasksUseCase,
    TaskResponse,
    UpdateTaskCommand,
)
from renovator.depends import get_current_user, get_unit_of_work
from renovator.domain.entities import TaskPriority, TaskStatus

router = APIRouter(tags=["Tasks"])


@router.post(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskResponse,
)
async def create_task(
    project_id: UUID,
    request: CreateTaskCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Task

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND, MILESTONE_NOT_FOUND
    """
    result = await ManageTasksUseCase(uow).create(project_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/projects/{project_id}/tasks/from-templates",
    status_code=status.HTTP_201_CREATED,
    response_model=List[TaskResponse],
)
async def create_tasks_from_templates(
    project_id: UUID,
    request: CreateTasksFromTemplatesCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Bulk Create Tasks From Templates

    All or nothing: one unknown template id fails the whole request.

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND, TEMPLATE_NOT_FOUND
    """
    result = await ManageTasksUseCase(uow).create_from_templates(
        project_id, current_user.id, request
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_200_OK,
    response_model=List[TaskResponse],
)
async def list_tasks(
    project_id: UUID,
    status_filter: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None),
    milestone_id: Optional[UUID] = Query(None, alias="milestoneId"),
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Project tasks, newest first, filtered by status, priority and milestoneId"""
    result = await ManageTasksUseCase(uow).list_for_project(
        project_id,
        current_user.id,
        statuses=parse_enum_list(status_filter, TaskStatus, "status"),
        priorities=parse_enum_list(priority, TaskPriority, "priority"),
        milestone_id=milestone_id,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def get_task(
    task_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTasksUseCase(uow).get(task_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    request: UpdateTaskCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTasksUseCase(uow).update(task_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_task(
    task_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTasksUseCase(uow).delete(task_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Task deleted successfully")


@router.post(
    "/tasks/{task_id}/notes", status_code=status.HTTP_200_OK, response_model=TaskResponse
)
async def add_task_note(
    task_id: UUID,
    request: AddTaskNoteCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTasksUseCase(uow).add_note(task_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tasks/{task_id}/complete", status_code=status.HTTP_200_OK, response_model=TaskResponse
)
async def complete_task(
    task_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTasksUseCase(uow).complete(task_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
