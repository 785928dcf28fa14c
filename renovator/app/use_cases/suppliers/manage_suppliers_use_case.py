"""
Manage Suppliers Use Case

Each user keeps a private list of suppliers to order resources from.
"""

from typing import List
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from renovator.domain.entities import Supplier
from .dtos import CreateSupplierCommand, SupplierResponse, UpdateSupplierCommand

SUPPLIER_NOT_FOUND = Error("SUPPLIER_NOT_FOUND", "Supplier not found")


class ManageSuppliersUseCase:
    """
    Use case for suppliers.

    Business Rules:
    - Suppliers are listed by name
    - Another user's supplier is reported as not found
    - Deleting a supplier keeps its resources, without a supplier
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, user_id: UUID, command: CreateSupplierCommand) -> Result[SupplierResponse]:
        async with self.uow:
            supplier = await self.uow.suppliers.create(
                Supplier(owner_id=user_id, **command.model_dump())
            )
            await self.uow.commit()

        return Return.ok(SupplierResponse.model_validate(supplier))

    async def list_suppliers(self, user_id: UUID) -> Result[List[SupplierResponse]]:
        async with self.uow:
            suppliers = await self.uow.suppliers.list_by_owner(user_id)
            return Return.ok([SupplierResponse.model_validate(s) for s in suppliers])

    async def get(self, supplier_id: UUID, user_id: UUID) -> Result[SupplierResponse]:
        async with self.uow:
            supplier = await self.uow.suppliers.get_for_owner(supplier_id, user_id)
            if supplier is None:
                return Return.err(SUPPLIER_NOT_FOUND)
            return Return.ok(SupplierResponse.model_validate(supplier))

    async def update(
        self, supplier_id: UUID, user_id: UUID, command: UpdateSupplierCommand
    ) -> Result[SupplierResponse]:
        async with self.uow:
            supplier = await self.uow.suppliers.get_for_owner(supplier_id, user_id)
            if supplier is None:
                return Return.err(SUPPLIER_NOT_FOUND)

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(supplier, field, value)
            supplier.updated_at = utcnow()
            supplier = await self.uow.suppliers.update(supplier)
            await self.uow.commit()

        return Return.ok(SupplierResponse.model_validate(supplier))

    async def delete(self, supplier_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            supplier = await self.uow.suppliers.get_for_owner(supplier_id, user_id)
            if supplier is None:
                return Return.err(SUPPLIER_NOT_FOUND)

            await self.uow.suppliers.delete(supplier)
            await self.uow.commit()

        return Return.ok({"supplier_id": supplier_id})
