from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.supplier_repository import ISupplierRepository
from renovator.domain.entities import Resource, Supplier


class SupplierRepository(ISupplierRepository):
    """Supplier repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_for_owner(self, supplier_id: UUID, owner_id: UUID) -> Optional[Supplier]:
        stmt = select(Supplier).where(Supplier.id == supplier_id, Supplier.owner_id == owner_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_owner(self, owner_id: UUID) -> List[Supplier]:
        stmt = (
            select(Supplier)
            .where(Supplier.owner_id == owner_id)
            .order_by(col(Supplier.name).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, supplier: Supplier) -> Supplier:
        self.session.add(supplier)
        await self.session.flush()
        await self.session.refresh(supplier)
        return supplier

    async def update(self, supplier: Supplier) -> Supplier:
        self.session.add(supplier)
        await self.session.flush()
        await self.session.refresh(supplier)
        return supplier

    async def delete(self, supplier: Supplier) -> None:
        stmt = (
            update(Resource)
            .where(Resource.supplier_id == supplier.id)
            .values(supplier_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.delete(supplier)
        await self.session.flush()
