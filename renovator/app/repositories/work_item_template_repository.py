from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import WorkItemCategory, WorkItemTemplate


class IWorkItemTemplateRepository(ABC):
    """Work item template repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, template_id: UUID) -> Optional[WorkItemTemplate]:
        pass

    @abstractmethod
    async def get_many_by_ids(self, template_ids: List[UUID]) -> List[WorkItemTemplate]:
        pass

    @abstractmethod
    async def list_visible(
        self, owner_id: UUID, category: Optional[WorkItemCategory] = None
    ) -> List[WorkItemTemplate]:
        """Default templates plus owner's custom ones, by category then name"""
        pass

    @abstractmethod
    async def count_defaults(self) -> int:
        pass

    @abstractmethod
    async def create(self, template: WorkItemTemplate) -> WorkItemTemplate:
        pass

    @abstractmethod
    async def create_many(self, templates: List[WorkItemTemplate]) -> List[WorkItemTemplate]:
        pass

    @abstractmethod
    async def update(self, template: WorkItemTemplate) -> WorkItemTemplate:
        pass

    @abstractmethod
    async def delete(self, template: WorkItemTemplate) -> None:
        pass
