from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.budget_repository import IBudgetRepository
from renovator.domain.entities import Budget, BudgetItem


class BudgetRepository(IBudgetRepository):
    """Budget repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, budget_id: UUID) -> Optional[Budget]:
        stmt = select(Budget).where(Budget.id == budget_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> Optional[Budget]:
        stmt = select(Budget).where(Budget.project_id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_items(self, budget_id: UUID) -> List[BudgetItem]:
        stmt = (
            select(BudgetItem)
            .where(BudgetItem.budget_id == budget_id)
            .order_by(col(BudgetItem.created_at).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_item_by_id(self, item_id: UUID) -> Optional[BudgetItem]:
        stmt = select(BudgetItem).where(BudgetItem.id == item_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, budget: Budget) -> Budget:
        self.session.add(budget)
        await self.session.flush()
        await self.session.refresh(budget)
        return budget

    async def update(self, budget: Budget) -> Budget:
        self.session.add(budget)
        await self.session.flush()
        await self.session.refresh(budget)
        return budget

    async def add_item(self, item: BudgetItem) -> BudgetItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def update_item(self, item: BudgetItem) -> BudgetItem:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete_item(self, item: BudgetItem) -> None:
        await self.session.delete(item)
        await self.session.flush()
