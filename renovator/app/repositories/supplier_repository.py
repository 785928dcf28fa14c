from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Supplier


class ISupplierRepository(ABC):
    """Supplier repository interface - application layer"""

    @abstractmethod
    async def get_for_owner(self, supplier_id: UUID, owner_id: UUID) -> Optional[Supplier]:
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> List[Supplier]:
        """Owner's suppliers ordered by name"""
        pass

    @abstractmethod
    async def create(self, supplier: Supplier) -> Supplier:
        pass

    @abstractmethod
    async def update(self, supplier: Supplier) -> Supplier:
        pass

    @abstractmethod
    async def delete(self, supplier: Supplier) -> None:
        """Delete the supplier; resources ordered from it keep existing without one"""
        pass
