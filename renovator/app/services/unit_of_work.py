from abc import ABC, abstractmethod

from renovator.app.repositories.budget_repository import IBudgetRepository
from renovator.app.repositories.milestone_repository import IMilestoneRepository
from renovator.app.repositories.project_repository import IProjectRepository
from renovator.app.repositories.resource_repository import IResourceRepository
from renovator.app.repositories.session_repository import ISessionRepository
from renovator.app.repositories.supplier_repository import ISupplierRepository
from renovator.app.repositories.task_repository import ITaskRepository
from renovator.app.repositories.user_repository import IUserRepository
from renovator.app.repositories.work_item_template_repository import IWorkItemTemplateRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    projects: IProjectRepository
    milestones: IMilestoneRepository
    tasks: ITaskRepository
    work_item_templates: IWorkItemTemplateRepository
    budgets: IBudgetRepository
    suppliers: ISupplierRepository
    resources: IResourceRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
