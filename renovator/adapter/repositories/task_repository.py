from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.app.repositories.task_repository import ITaskRepository
from renovator.domain.entities import Task, TaskPriority, TaskStatus


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        stmt = select(Task).where(Task.id == task_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_project_id(
        self,
        project_id: UUID,
        statuses: Optional[List[TaskStatus]] = None,
        priorities: Optional[List[TaskPriority]] = None,
        milestone_id: Optional[UUID] = None,
    ) -> List[Task]:
        stmt = select(Task).where(Task.project_id == project_id)
        if statuses:
            stmt = stmt.where(col(Task.status).in_(statuses))
        if priorities:
            stmt = stmt.where(col(Task.priority).in_(priorities))
        if milestone_id:
            stmt = stmt.where(Task.milestone_id == milestone_id)
        stmt = stmt.order_by(col(Task.created_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_milestone_id(self, milestone_id: UUID) -> List[Task]:
        stmt = select(Task).where(Task.milestone_id == milestone_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def create_many(self, tasks: List[Task]) -> List[Task]:
        self.session.add_all(tasks)
        await self.session.flush()
        for task in tasks:
            await self.session.refresh(task)
        return tasks

    async def update(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.flush()
