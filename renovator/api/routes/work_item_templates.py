from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from renovator.api.error import raise_for_error
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.work_item_templates import (
    CreateTemplateCommand,
    ManageTemplatesUseCase,
    TemplateResponse,
    UpdateTemplateCommand,
)
from renovator.depends import get_current_user, get_unit_of_work
from renovator.domain.entities import WorkItemCategory

router = APIRouter(prefix="/work-item-templates", tags=["Work Item Templates"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TemplateResponse])
async def list_templates(
    category: Optional[WorkItemCategory] = Query(None),
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Default templates plus the caller's own, ordered by category and name"""
    result = await ManageTemplatesUseCase(uow).list_templates(current_user.id, category)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/grouped",
    status_code=status.HTTP_200_OK,
    response_model=Dict[str, List[TemplateResponse]],
)
async def grouped_templates(
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Visible templates keyed by category; every category is present"""
    result = await ManageTemplatesUseCase(uow).grouped(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TemplateResponse)
async def create_template(
    request: CreateTemplateCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTemplatesUseCase(uow).create(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{template_id}", status_code=status.HTTP_200_OK, response_model=TemplateResponse)
async def get_template(
    template_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTemplatesUseCase(uow).get(template_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{template_id}", status_code=status.HTTP_200_OK, response_model=TemplateResponse)
async def update_template(
    template_id: UUID,
    request: UpdateTemplateCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Custom Template

    Raises:
        - 403 Forbidden: DEFAULT_TEMPLATE_READONLY
        - 404 Not Found: TEMPLATE_NOT_FOUND
    """
    result = await ManageTemplatesUseCase(uow).update(template_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, DEFAULT_TEMPLATE_READONLY=status.HTTP_403_FORBIDDEN)
    return result.value


@router.delete(
    "/{template_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_template(
    template_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageTemplatesUseCase(uow).delete(template_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error, DEFAULT_TEMPLATE_READONLY=status.HTTP_403_FORBIDDEN)
    return MessageResponse(message="Template deleted successfully")
