"""
Manage Projects Use Case

CRUD, search and archiving for the caller's own projects.
"""

import logging
from typing import List, Optional
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from renovator.domain.entities import Project, ProjectStatus
from .dtos import CreateProjectCommand, ProjectResponse, UpdateProjectCommand

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
INVALID_DATES = Error("INVALID_DATES", "Estimated end date cannot be before start date")


class ManageProjectsUseCase:
    """
    Use case for project management.

    Business Rules:
    - Projects are private to their owner; foreign ids are PROJECT_NOT_FOUND
    - estimated_end_date must not precede start_date
    - Archiving only flips the status to archived
    - Deleting a project removes its milestones, tasks and budget
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(self, owner_id: UUID, command: CreateProjectCommand) -> Result[ProjectResponse]:
        if command.estimated_end_date < command.start_date:
            return Return.err(INVALID_DATES)

        async with self.uow:
            project = Project(owner_id=owner_id, **command.model_dump())
            project = await self.uow.projects.create(project)
            await self.uow.commit()

        logger.info(f"Project {project.id} created by {owner_id}")
        return Return.ok(ProjectResponse.model_validate(project))

    async def get(self, project_id: UUID, owner_id: UUID) -> Result[ProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_for_owner(project_id, owner_id)
            if project is None:
                return Return.err(PROJECT_NOT_FOUND)

            return Return.ok(ProjectResponse.model_validate(project))

    async def list_projects(
        self,
        owner_id: UUID,
        statuses: Optional[List[ProjectStatus]] = None,
        search: Optional[str] = None,
    ) -> Result[List[ProjectResponse]]:
        async with self.uow:
            projects = await self.uow.projects.list_by_owner(owner_id, statuses, search)
            return Return.ok([ProjectResponse.model_validate(p) for p in projects])

    async def update(
        self, project_id: UUID, owner_id: UUID, command: UpdateProjectCommand
    ) -> Result[ProjectResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            project = await self.uow.projects.get_for_owner(project_id, owner_id)
            if project is None:
                return Return.err(PROJECT_NOT_FOUND)

            start = changes.get("start_date") or project.start_date
            end = changes.get("estimated_end_date") or project.estimated_end_date
            if end < start:
                return Return.err(INVALID_DATES)

            for field, value in changes.items():
                setattr(project, field, value)
            project.updated_at = utcnow()

            project = await self.uow.projects.update(project)
            await self.uow.commit()

        return Return.ok(ProjectResponse.model_validate(project))

    async def archive(self, project_id: UUID, owner_id: UUID) -> Result[ProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_for_owner(project_id, owner_id)
            if project is None:
                return Return.err(PROJECT_NOT_FOUND)

            project.status = ProjectStatus.archived
            project.updated_at = utcnow()
            project = await self.uow.projects.update(project)
            await self.uow.commit()

        return Return.ok(ProjectResponse.model_validate(project))

    async def delete(self, project_id: UUID, owner_id: UUID) -> Result[dict]:
        async with self.uow:
            project = await self.uow.projects.get_for_owner(project_id, owner_id)
            if project is None:
                return Return.err(PROJECT_NOT_FOUND)

            await self.uow.projects.delete(project)
            await self.uow.commit()

        logger.info(f"Project {project_id} deleted by {owner_id}")
        return Return.ok({"project_id": project_id})
