from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from renovator.api.error import raise_for_error
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.suppliers import (
    CreateSupplierCommand,
    ManageSuppliersUseCase,
    SupplierResponse,
    UpdateSupplierCommand,
)
from renovator.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Suppliers"])


@router.post("/suppliers", status_code=status.HTTP_201_CREATED, response_model=SupplierResponse)
async def create_supplier(
    request: CreateSupplierCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageSuppliersUseCase(uow).create(current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/suppliers", status_code=status.HTTP_200_OK, response_model=List[SupplierResponse])
async def list_suppliers(
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """The caller's suppliers ordered by name"""
    result = await ManageSuppliersUseCase(uow).list_suppliers(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/suppliers/{supplier_id}", status_code=status.HTTP_200_OK, response_model=SupplierResponse
)
async def get_supplier(
    supplier_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageSuppliersUseCase(uow).get(supplier_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/suppliers/{supplier_id}", status_code=status.HTTP_200_OK, response_model=SupplierResponse
)
async def update_supplier(
    supplier_id: UUID,
    request: UpdateSupplierCommand,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ManageSuppliersUseCase(uow).update(supplier_id, current_user.id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/suppliers/{supplier_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse
)
async def delete_supplier(
    supplier_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete a supplier; resources ordered from it keep existing without one"""
    result = await ManageSuppliersUseCase(uow).delete(supplier_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Supplier deleted successfully")
