from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Project, ProjectStatus


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def get_for_owner(self, project_id: UUID, owner_id: UUID) -> Optional[Project]:
        """Get project by ID only if it belongs to owner"""
        pass

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: UUID,
        statuses: Optional[List[ProjectStatus]] = None,
        search: Optional[str] = None,
    ) -> List[Project]:
        """Owner's projects, newest first, optionally filtered"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        pass
