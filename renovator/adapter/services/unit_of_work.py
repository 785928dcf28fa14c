from sqlmodel.ext.asyncio.session import AsyncSession

from renovator.adapter.repositories.budget_repository import BudgetRepository
from renovator.adapter.repositories.milestone_repository import MilestoneRepository
from renovator.adapter.repositories.project_repository import ProjectRepository
from renovator.adapter.repositories.resource_repository import ResourceRepository
from renovator.adapter.repositories.session_repository import SessionRepository
from renovator.adapter.repositories.supplier_repository import SupplierRepository
from renovator.adapter.repositories.task_repository import TaskRepository
from renovator.adapter.repositories.user_repository import UserRepository
from renovator.adapter.repositories.work_item_template_repository import (
    WorkItemTemplateRepository,
)
from renovator.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.milestones = MilestoneRepository(self.session)
        self.tasks = TaskRepository(self.session)
        self.work_item_templates = WorkItemTemplateRepository(self.session)
        self.budgets = BudgetRepository(self.session)
        self.suppliers = SupplierRepository(self.session)
        self.resources = ResourceRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
