from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Task, TaskPriority, TaskStatus


class ITaskRepository(ABC):
    """Task repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        pass

    @abstractmethod
    async def list_by_project_id(
        self,
        project_id: UUID,
        statuses: Optional[List[TaskStatus]] = None,
        priorities: Optional[List[TaskPriority]] = None,
        milestone_id: Optional[UUID] = None,
    ) -> List[Task]:
        """Project tasks, newest first, optionally filtered"""
        pass

    @abstractmethod
    async def list_by_milestone_id(self, milestone_id: UUID) -> List[Task]:
        pass

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def create_many(self, tasks: List[Task]) -> List[Task]:
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def delete(self, task: Task) -> None:
        pass
