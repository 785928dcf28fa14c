from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from renovator.api.error import raise_for_error
from renovator.api.utils.query import parse_enum_list
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.resources import (
    CreateResourceCommand,
    ManageResourcesUseCase,
    OrderResourceCommand,
    ReceiveResourceCommand,
    ResourceResponse,
    UpdateResourceCommand,
)
from renovator.depends import get_current_user, get_unit_of_work
from renovator.domain.entities import ResourceStatus, ResourceType

router = APIRouter(tags=["Resources"])


@router.post(
    "/projects/{project_id}/resources",
    status_code=status.HTTP_201_CREATED,
    response_model=ResourceResponse,
)
async def create_resource(
    project_id: UUID,
    request: CreateResourceCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add a resource to a project; it starts as needed.

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND, SUPPLIER_NOT_FOUND
        - 422 Unprocessable Entity: unknown type, non-positive quantity, negative cost
    """
    result = await ManageResourcesUseCase(uow).create(project_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/projects/{project_id}/resources",
    status_code=status.HTTP_200_OK,
    response_model=List[ResourceResponse],
)
async def list_resources(
    project_id: UUID,
    status_filter: Optional[str] = Query(None, alias="status"),
    resource_type: Optional[str] = Query(None, alias="type"),
    supplier_id: Optional[UUID] = Query(None, alias="supplierId"),
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Project resources, newest first, filtered by status, type and supplierId"""
    result = await ManageResourcesUseCase(uow).list_for_project(
        project_id,
        current_user.id,
        statuses=parse_enum_list(status_filter, ResourceStatus, "status"),
        types=parse_enum_list(resource_type, ResourceType, "type"),
        supplier_id=supplier_id,
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/projects/{project_id}/resources/by-status",
    status_code=status.HTTP_200_OK,
    response_model=Dict[str, List[ResourceResponse]],
)
async def resources_by_status(
    project_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Project resources keyed by status; every status is present"""
    result = await ManageResourcesUseCase(uow).grouped_by_status(project_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/resources/overdue", status_code=status.HTTP_200_OK, response_model=List[ResourceResponse]
)
async def overdue_resources(
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Ordered resources across the caller's projects whose delivery is overdue"""
    result = await ManageResourcesUseCase(uow).overdue(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/resources/{resource_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse
)
async def get_resource(
    resource_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageResourcesUseCase(uow).get(resource_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/resources/{resource_id}", status_code=status.HTTP_200_OK, response_model=ResourceResponse
)
async def update_resource(
    resource_id: UUID,
    request: UpdateResourceCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageResourcesUseCase(uow).update(resource_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/resources/{resource_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_resource(
    resource_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageResourcesUseCase(uow).delete(resource_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Resource deleted successfully")


@router.post(
    "/resources/{resource_id}/order",
    status_code=status.HTTP_200_OK,
    response_model=ResourceResponse,
)
async def order_resource(
    resource_id: UUID,
    request: OrderResourceCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Mark a resource as ordered.

    Raises:
        - 400 Bad Request: INVALID_DELIVERY_DATES
        - 404 Not Found: RESOURCE_NOT_FOUND
    """
    result = await ManageResourcesUseCase(uow).mark_ordered(resource_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error, INVALID_DELIVERY_DATES=status.HTTP_400_BAD_REQUEST)
    return result.value


@router.post(
    "/resources/{resource_id}/receive",
    status_code=status.HTTP_200_OK,
    response_model=ResourceResponse,
)
async def receive_resource(
    resource_id: UUID,
    request: ReceiveResourceCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageResourcesUseCase(uow).mark_received(resource_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
