from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from renovator.domain.entities import Budget, BudgetItem


class IBudgetRepository(ABC):
    """Budget and budget item repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, budget_id: UUID) -> Optional[Budget]:
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> Optional[Budget]:
        pass

    @abstractmethod
    async def list_items(self, budget_id: UUID) -> List[BudgetItem]:
        pass

    @abstractmethod
    async def get_item_by_id(self, item_id: UUID) -> Optional[BudgetItem]:
        pass

    @abstractmethod
    async def create(self, budget: Budget) -> Budget:
        pass

    @abstractmethod
    async def update(self, budget: Budget) -> Budget:
        pass

    @abstractmethod
    async def add_item(self, item: BudgetItem) -> BudgetItem:
        pass

    @abstractmethod
    async def update_item(self, item: BudgetItem) -> BudgetItem:
        pass

    @abstractmethod
    async def delete_item(self, item: BudgetItem) -> None:
        pass
