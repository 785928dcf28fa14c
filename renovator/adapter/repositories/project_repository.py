from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.project_repository import IProjectRepository
from renovator.domain.entities import (
    Budget,
    BudgetItem,
    Milestone,
    Project,
    ProjectStatus,
    Resource,
    Task,
)


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_for_owner(self, project_id: UUID, owner_id: UUID) -> Optional[Project]:
        stmt = select(Project).where(Project.id == project_id, Project.owner_id == owner_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_owner(
        self,
        owner_id: UUID,
        statuses: Optional[List[ProjectStatus]] = None,
        search: Optional[str] = None,
    ) -> List[Project]:
        stmt = select(Project).where(Project.owner_id == owner_id)
        if statuses:
            stmt = stmt.where(col(Project.status).in_(statuses))
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(col(Project.name).ilike(pattern), col(Project.client_name).ilike(pattern))
            )
        stmt = stmt.order_by(col(Project.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete project together with its milestones, tasks, resources and budget"""
        budget_ids = select(Budget.id).where(Budget.project_id == project.id)
        for stmt in (
            delete(BudgetItem).where(col(BudgetItem.budget_id).in_(budget_ids)),
            delete(Budget).where(Budget.project_id == project.id),
            delete(Resource).where(Resource.project_id == project.id),
            delete(Task).where(Task.project_id == project.id),
            delete(Milestone).where(Milestone.project_id == project.id),
        ):
            await self.session.execute(stmt.execution_options(synchronize_session=False))
        await self.session.delete(project)
        await self.session.flush()
