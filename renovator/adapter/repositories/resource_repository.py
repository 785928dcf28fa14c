from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.resource_repository import IResourceRepository
from renovator.domain.entities import Project, Resource, ResourceStatus, ResourceType


class ResourceRepository(IResourceRepository):
    """Resource repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, resource_id: UUID) -> Optional[Resource]:
        stmt = select(Resource).where(Resource.id == resource_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_project_id(
        self,
        project_id: UUID,
        statuses: Optional[List[ResourceStatus]] = None,
        types: Optional[List[ResourceType]] = None,
        supplier_id: Optional[UUID] = None,
    ) -> List[Resource]:
        stmt = select(Resource).where(Resource.project_id == project_id)
        if statuses:
            stmt = stmt.where(col(Resource.status).in_(statuses))
        if types:
            stmt = stmt.where(col(Resource.type).in_(types))
        if supplier_id is not None:
            stmt = stmt.where(Resource.supplier_id == supplier_id)
        stmt = stmt.order_by(col(Resource.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_overdue(self, owner_id: UUID, expected_before: date) -> List[Resource]:
        stmt = (
            select(Resource)
            .join(Project, col(Project.id) == col(Resource.project_id))
            .where(
                Project.owner_id == owner_id,
                Resource.status == ResourceStatus.ordered,
                col(Resource.expected_delivery_date).is_not(None),
                col(Resource.expected_delivery_date) < expected_before,
            )
            .order_by(col(Resource.expected_delivery_date).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, resource: Resource) -> Resource:
        self.session.add(resource)
        await self.session.flush()
        await self.session.refresh(resource)
        return resource

    async def update(self, resource: Resource) -> Resource:
        self.session.add(resource)
        await self.session.flush()
        await self.session.refresh(resource)
        return resource

    async def delete(self, resource: Resource) -> None:
        await self.session.delete(resource)
        await self.session.flush()
