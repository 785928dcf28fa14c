from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Milestone


class IMilestoneRepository(ABC):
    """Milestone repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, milestone_id: UUID) -> Optional[Milestone]:
        pass

    @abstractmethod
    async def list_by_project_id(self, project_id: UUID) -> List[Milestone]:
        """Project milestones ordered by target date, then order index"""
        pass

    @abstractmethod
    async def create(self, milestone: Milestone) -> Milestone:
        pass

    @abstractmethod
    async def update(self, milestone: Milestone) -> Milestone:
        pass

    @abstractmethod
    async def delete(self, milestone: Milestone) -> None:
        pass
