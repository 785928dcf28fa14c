"""
Manage Tasks Use Case

Project tasks, bulk creation from work item templates, notes and
completion. Task prices feed the project budget.
"""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.budgets.totals import recalculate_for_project
from renovator.app.use_cases.ownership import owned_project, owned_task
from renovator.domain.base import utcnow
from renovator.domain.entities import (
    Task,
    TaskPriority,
    TaskStatus,
    compute_actual_price,
)
from .dtos import (
    AddTaskNoteCommand,
    CreateTaskCommand,
    CreateTasksFromTemplatesCommand,
    TaskResponse,
    UpdateTaskCommand,
)

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
TASK_NOT_FOUND = Error("TASK_NOT_FOUND", "Task not found")
MILESTONE_NOT_FOUND = Error("MILESTONE_NOT_FOUND", "Milestone not found")


class ManageTasksUseCase:
    """
    Use case for project tasks.

    Business Rules:
    - actual_price is recomputed as price x amount on every write
    - A task's milestone must belong to the task's project
    - completed_date is stamped when a task first becomes completed
    - Bulk creation fails as a whole if any template is missing or
      not visible to the caller
    - The project budget, when present, follows task price changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _milestone_in_project(self, milestone_id: UUID, project_id: UUID) -> bool:
        milestone = await self.uow.milestones.get_by_id(milestone_id)
        return milestone is not None and milestone.project_id == project_id

    async def create(
        self, project_id: UUID, user_id: UUID, command: CreateTaskCommand
    ) -> Result[TaskResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)

            if command.milestone_id and not await self._milestone_in_project(
                command.milestone_id, project_id
            ):
                return Return.err(MILESTONE_NOT_FOUND)

            task = Task(project_id=project_id, **command.model_dump())
            task.actual_price = compute_actual_price(task.price, task.amount)
            if task.status == TaskStatus.completed:
                task.completed_date = date.today()

            task = await self.uow.tasks.create(task)
            await recalculate_for_project(self.uow, project_id)
            await self.uow.commit()

        return Return.ok(TaskResponse.model_validate(task))

    async def create_from_templates(
        self, project_id: UUID, user_id: UUID, command: CreateTasksFromTemplatesCommand
    ) -> Result[List[TaskResponse]]:
        template_ids = list(dict.fromkeys(command.template_ids))

        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)

            templates = await self.uow.work_item_templates.get_many_by_ids(template_ids)
            templates = [t for t in templates if t.visible_to(user_id)]
            if len(templates) != len(template_ids):
                return Return.err(
                    Error("TEMPLATE_NOT_FOUND", "One or more templates not found")
                )

            by_id = {t.id: t for t in templates}
            tasks = []
            for template_id in template_ids:
                template = by_id[template_id]
                tasks.append(
                    Task(
                        project_id=project_id,
                        name=template.name,
                        description=template.description,
                        status=TaskStatus.todo,
                        priority=TaskPriority.medium,
                        price=template.default_price,
                        amount=1.0,
                        unit=template.unit,
                        actual_price=compute_actual_price(template.default_price, 1.0),
                        notes=[],
                    )
                )

            tasks = await self.uow.tasks.create_many(tasks)
            await recalculate_for_project(self.uow, project_id)
            await self.uow.commit()

        logger.info(f"Created {len(tasks)} task(s) from templates in project {project_id}")
        return Return.ok([TaskResponse.model_validate(t) for t in tasks])

    async def list_for_project(
        self,
        project_id: UUID,
        user_id: UUID,
        statuses: Optional[List[TaskStatus]] = None,
        priorities: Optional[List[TaskPriority]] = None,
        milestone_id: Optional[UUID] = None,
    ) -> Result[List[TaskResponse]]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            tasks = await self.uow.tasks.list_by_project_id(
                project_id, statuses, priorities, milestone_id
            )
            return Return.ok([TaskResponse.model_validate(t) for t in tasks])

    async def get(self, task_id: UUID, user_id: UUID) -> Result[TaskResponse]:
        async with self.uow:
            task = await owned_task(self.uow, task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            return Return.ok(TaskResponse.model_validate(task))

    async def update(
        self, task_id: UUID, user_id: UUID, command: UpdateTaskCommand
    ) -> Result[TaskResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            task = await owned_task(self.uow, task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            milestone_id = changes.get("milestone_id")
            if milestone_id and not await self._milestone_in_project(milestone_id, task.project_id):
                return Return.err(MILESTONE_NOT_FOUND)

            if changes.get("status") == TaskStatus.completed and task.status != TaskStatus.completed:
                task.completed_date = date.today()

            for field, value in changes.items():
                setattr(task, field, value)
            if task.amount is None:
                task.amount = 1.0
            task.actual_price = compute_actual_price(task.price, task.amount)
            task.updated_at = utcnow()

            task = await self.uow.tasks.update(task)
            await recalculate_for_project(self.uow, task.project_id)
            await self.uow.commit()

        return Return.ok(TaskResponse.model_validate(task))

    async def add_note(
        self, task_id: UUID, user_id: UUID, command: AddTaskNoteCommand
    ) -> Result[TaskResponse]:
        async with self.uow:
            task = await owned_task(self.uow, task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            # JSON columns only persist on reassignment
            task.notes = [*(task.notes or []), command.note]
            task.updated_at = utcnow()
            task = await self.uow.tasks.update(task)
            await self.uow.commit()

        return Return.ok(TaskResponse.model_validate(task))

    async def complete(self, task_id: UUID, user_id: UUID) -> Result[TaskResponse]:
        async with self.uow:
            task = await owned_task(self.uow, task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            task.status = TaskStatus.completed
            task.completed_date = date.today()
            task.updated_at = utcnow()
            task = await self.uow.tasks.update(task)
            await self.uow.commit()

        return Return.ok(TaskResponse.model_validate(task))

    async def delete(self, task_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            task = await owned_task(self.uow, task_id, user_id)
            if task is None:
                return Return.err(TASK_NOT_FOUND)

            project_id = task.project_id
            await self.uow.tasks.delete(task)
            await recalculate_for_project(self.uow, project_id)
            await self.uow.commit()

        return Return.ok({"task_id": task_id})
