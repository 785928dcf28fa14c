from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Resource, ResourceStatus, ResourceType


class IResourceRepository(ABC):
    """Resource repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, resource_id: UUID) -> Optional[Resource]:
        pass

    @abstractmethod
    async def list_by_project_id(
        self,
        project_id: UUID,
        statuses: Optional[List[ResourceStatus]] = None,
        types: Optional[List[ResourceType]] = None,
        supplier_id: Optional[UUID] = None,
    ) -> List[Resource]:
        """Project resources, newest first, optionally filtered"""
        pass

    @abstractmethod
    async def list_overdue(self, owner_id: UUID, expected_before: date) -> List[Resource]:
        """Ordered resources of the owner's projects expected before the given day"""
        pass

    @abstractmethod
    async def create(self, resource: Resource) -> Resource:
        pass

    @abstractmethod
    async def update(self, resource: Resource) -> Resource:
        pass

    @abstractmethod
    async def delete(self, resource: Resource) -> None:
        pass
