"""
Ownership lookups shared by the project-scoped use cases.

Every project-scoped resource is reachable only through a project the
caller owns; anything else is reported as not found.
"""

from typing import Optional
from uuid import UUID

from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.entities import Milestone, Project, Resource, Task


async def owned_project(uow: UnitOfWork, project_id: UUID, user_id: UUID) -> Optional[Project]:
    return await uow.projects.get_for_owner(project_id, user_id)


async def owned_milestone(uow: UnitOfWork, milestone_id: UUID, user_id: UUID) -> Optional[Milestone]:
    milestone = await uow.milestones.get_by_id(milestone_id)
    if milestone is None or await owned_project(uow, milestone.project_id, user_id) is None:
        return None
    return milestone


async def owned_task(uow: UnitOfWork, task_id: UUID, user_id: UUID) -> Optional[Task]:
    task = await uow.tasks.get_by_id(task_id)
    if task is None or await owned_project(uow, task.project_id, user_id) is None:
        return None
    return task


async def owned_resource(uow: UnitOfWork, resource_id: UUID, user_id: UUID) -> Optional[Resource]:
    resource = await uow.resources.get_by_id(resource_id)
    if resource is None or await owned_project(uow, resource.project_id, user_id) is None:
        return None
    return resource
