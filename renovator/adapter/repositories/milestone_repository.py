from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.milestone_repository import IMilestoneRepository
from renovator.domain.entities import Milestone, Task


class MilestoneRepository(IMilestoneRepository):
    """Milestone repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, milestone_id: UUID) -> Optional[Milestone]:
        stmt = select(Milestone).where(Milestone.id == milestone_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_project_id(self, project_id: UUID) -> List[Milestone]:
        stmt = (
            select(Milestone)
            .where(Milestone.project_id == project_id)
            .order_by(col(Milestone.target_date).asc(), col(Milestone.order_index).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, milestone: Milestone) -> Milestone:
        self.session.add(milestone)
        await self.session.flush()
        await self.session.refresh(milestone)
        return milestone

    async def update(self, milestone: Milestone) -> Milestone:
        self.session.add(milestone)
        await self.session.flush()
        await self.session.refresh(milestone)
        return milestone

    async def delete(self, milestone: Milestone) -> None:
        """Delete milestone, detaching its tasks"""
        stmt = (
            update(Task)
            .where(Task.milestone_id == milestone.id)
            .values(milestone_id=None)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)
        await self.session.delete(milestone)
        await self.session.flush()
