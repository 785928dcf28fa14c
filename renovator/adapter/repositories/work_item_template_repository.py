from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.work_item_template_repository import (
    IWorkItemTemplateRepository,
)
from renovator.domain.entities import WorkItemCategory, WorkItemTemplate


class WorkItemTemplateRepository(IWorkItemTemplateRepository):
    """Work item template repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, template_id: UUID) -> Optional[WorkItemTemplate]:
        stmt = select(WorkItemTemplate).where(WorkItemTemplate.id == template_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_many_by_ids(self, template_ids: List[UUID]) -> List[WorkItemTemplate]:
        if not template_ids:
            return []
        stmt = select(WorkItemTemplate).where(col(WorkItemTemplate.id).in_(template_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_visible(
        self, owner_id: UUID, category: Optional[WorkItemCategory] = None
    ) -> List[WorkItemTemplate]:
        stmt = select(WorkItemTemplate).where(
            or_(
                col(WorkItemTemplate.is_default).is_(True),
                WorkItemTemplate.owner_id == owner_id,
            )
        )
        if category:
            stmt = stmt.where(WorkItemTemplate.category == category)
        stmt = stmt.order_by(
            col(WorkItemTemplate.category).asc(), col(WorkItemTemplate.name).asc()
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_defaults(self) -> int:
        stmt = select(func.count()).select_from(WorkItemTemplate).where(
            col(WorkItemTemplate.is_default).is_(True)
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, template: WorkItemTemplate) -> WorkItemTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def create_many(self, templates: List[WorkItemTemplate]) -> List[WorkItemTemplate]:
        self.session.add_all(templates)
        await self.session.flush()
        return templates

    async def update(self, template: WorkItemTemplate) -> WorkItemTemplate:
        self.session.add(template)
        await self.session.flush()
        await self.session.refresh(template)
        return template

    async def delete(self, template: WorkItemTemplate) -> None:
        await self.session.delete(template)
        await self.session.flush()
