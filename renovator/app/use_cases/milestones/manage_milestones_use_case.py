"""
Manage Milestones Use Case

Dated checkpoints inside a project, plus the project timeline.
"""

import logging
import math
from datetime import date
from typing import List
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.ownership import owned_milestone, owned_project
from renovator.domain.base import utcnow
from renovator.domain.entities import Milestone, MilestoneStatus, TaskStatus
from .dtos import (
    CreateMilestoneCommand,
    MilestoneDetailResponse,
    MilestoneResponse,
    TimelineResponse,
    UpdateMilestoneCommand,
)

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
MILESTONE_NOT_FOUND = Error("MILESTONE_NOT_FOUND", "Milestone not found")


def progress_percentage(done: int, total: int) -> int:
    """Share of completed items rounded half up, 0 when there is nothing to complete."""
    if total == 0:
        return 0
    return math.floor(done / total * 100 + 0.5)


class ManageMilestonesUseCase:
    """
    Use case for project milestones.

    Business Rules:
    - Milestones are ordered by target date, then order index
    - Completing a milestone stamps today's date as completed_date
    - Project progress is the rounded share of completed milestones
    - Deleting a milestone keeps its tasks, detached
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def create(
        self, project_id: UUID, user_id: UUID, command: CreateMilestoneCommand
    ) -> Result[MilestoneResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)

            milestone = Milestone(project_id=project_id, **command.model_dump())
            if milestone.status == MilestoneStatus.completed:
                milestone.completed_date = date.today()
            milestone = await self.uow.milestones.create(milestone)
            await self.uow.commit()

        return Return.ok(MilestoneResponse.model_validate(milestone))

    async def list_for_project(
        self, project_id: UUID, user_id: UUID
    ) -> Result[List[MilestoneResponse]]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            milestones = await self.uow.milestones.list_by_project_id(project_id)
            return Return.ok([MilestoneResponse.model_validate(m) for m in milestones])

    async def get(self, milestone_id: UUID, user_id: UUID) -> Result[MilestoneDetailResponse]:
        async with self.uow:
            milestone = await owned_milestone(self.uow, milestone_id, user_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)
            tasks = await self.uow.tasks.list_by_milestone_id(milestone_id)

            done = sum(1 for t in tasks if t.status == TaskStatus.completed)
            return Return.ok(
                MilestoneDetailResponse(
                    **MilestoneResponse.model_validate(milestone).model_dump(),
                    progress_percentage=progress_percentage(done, len(tasks)),
                )
            )

    async def update(
        self, milestone_id: UUID, user_id: UUID, command: UpdateMilestoneCommand
    ) -> Result[MilestoneResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            milestone = await owned_milestone(self.uow, milestone_id, user_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)

            becomes_completed = (
                changes.get("status") == MilestoneStatus.completed
                and milestone.status != MilestoneStatus.completed
            )
            for field, value in changes.items():
                setattr(milestone, field, value)
            if becomes_completed and milestone.completed_date is None:
                milestone.completed_date = date.today()
            milestone.updated_at = utcnow()

            milestone = await self.uow.milestones.update(milestone)
            await self.uow.commit()

        return Return.ok(MilestoneResponse.model_validate(milestone))

    async def complete(self, milestone_id: UUID, user_id: UUID) -> Result[MilestoneResponse]:
        async with self.uow:
            milestone = await owned_milestone(self.uow, milestone_id, user_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)

            milestone.status = MilestoneStatus.completed
            milestone.completed_date = date.today()
            milestone.updated_at = utcnow()
            milestone = await self.uow.milestones.update(milestone)
            await self.uow.commit()

        return Return.ok(MilestoneResponse.model_validate(milestone))

    async def delete(self, milestone_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            milestone = await owned_milestone(self.uow, milestone_id, user_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)

            await self.uow.milestones.delete(milestone)
            await self.uow.commit()

        return Return.ok({"milestone_id": milestone_id})

    async def timeline(self, project_id: UUID, user_id: UUID) -> Result[TimelineResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            milestones = await self.uow.milestones.list_by_project_id(project_id)

            if not milestones:
                today = date.today()
                return Return.ok(
                    TimelineResponse(
                        project_id=project_id,
                        start_date=today,
                        end_date=today,
                        milestones=[],
                        progress_percentage=0,
                    )
                )

            done = sum(1 for m in milestones if m.status == MilestoneStatus.completed)
            return Return.ok(
                TimelineResponse(
                    project_id=project_id,
                    start_date=milestones[0].target_date,
                    end_date=milestones[-1].target_date,
                    milestones=[MilestoneResponse.model_validate(m) for m in milestones],
                    progress_percentage=progress_percentage(done, len(milestones)),
                )
            )
