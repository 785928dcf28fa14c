"""
Manage Work Item Templates Use Case

Default templates are read-only and visible to everyone; custom
templates belong to the user who created them.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.entities import WorkItemCategory, WorkItemTemplate
from .defaults import DEFAULT_TEMPLATES
from .dtos import (
    CreateTemplateCommand,
    SeedTemplatesResponse,
    TemplateResponse,
    UpdateTemplateCommand,
)

logger = logging.getLogger(__name__)

TEMPLATE_NOT_FOUND = Error("TEMPLATE_NOT_FOUND", "Template not found")


class ManageTemplatesUseCase:
    """
    Use case for work item templates.

    Business Rules:
    - A user sees the default templates plus their own
    - Default templates cannot be updated or deleted (DEFAULT_TEMPLATE_READONLY)
    - Another user's template is reported as not found
    - Seeding is skipped once any default template exists
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_templates(
        self, user_id: UUID, category: Optional[WorkItemCategory] = None
    ) -> Result[List[TemplateResponse]]:
        async with self.uow:
            templates = await self.uow.work_item_templates.list_visible(user_id, category)
            return Return.ok([TemplateResponse.model_validate(t) for t in templates])

    async def grouped(self, user_id: UUID) -> Result[Dict[str, List[TemplateResponse]]]:
        async with self.uow:
            templates = await self.uow.work_item_templates.list_visible(user_id)

            groups: Dict[str, List[TemplateResponse]] = {c.value: [] for c in WorkItemCategory}
            for template in templates:
                groups[WorkItemCategory(template.category).value].append(
                    TemplateResponse.model_validate(template)
                )
            return Return.ok(groups)

    async def get(self, template_id: UUID, user_id: UUID) -> Result[TemplateResponse]:
        async with self.uow:
            template = await self.uow.work_item_templates.get_by_id(template_id)
            if template is None or not template.visible_to(user_id):
                return Return.err(TEMPLATE_NOT_FOUND)

            return Return.ok(TemplateResponse.model_validate(template))

    async def create(self, user_id: UUID, command: CreateTemplateCommand) -> Result[TemplateResponse]:
        async with self.uow:
            template = WorkItemTemplate(owner_id=user_id, is_default=False, **command.model_dump())
            template = await self.uow.work_item_templates.create(template)
            await self.uow.commit()

        return Return.ok(TemplateResponse.model_validate(template))

    async def _editable(self, template_id: UUID, user_id: UUID):
        template = await self.uow.work_item_templates.get_by_id(template_id)
        if template is None or not template.visible_to(user_id):
            return None, TEMPLATE_NOT_FOUND
        if template.is_default:
            return None, Error("DEFAULT_TEMPLATE_READONLY", "Default templates cannot be modified")
        return template, None

    async def update(
        self, template_id: UUID, user_id: UUID, command: UpdateTemplateCommand
    ) -> Result[TemplateResponse]:
        async with self.uow:
            template, error = await self._editable(template_id, user_id)
            if error:
                return Return.err(error)

            for field, value in command.model_dump(exclude_unset=True).items():
                setattr(template, field, value)
            template = await self.uow.work_item_templates.update(template)
            await self.uow.commit()

        return Return.ok(TemplateResponse.model_validate(template))

    async def delete(self, template_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            template, error = await self._editable(template_id, user_id)
            if error:
                return Return.err(error)

            await self.uow.work_item_templates.delete(template)
            await self.uow.commit()

        return Return.ok({"template_id": template_id})


class SeedDefaultTemplatesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[SeedTemplatesResponse]:
        async with self.uow:
            if await self.uow.work_item_templates.count_defaults() > 0:
                logger.info("Default work item templates already exist, skipping seed")
                return Return.ok(SeedTemplatesResponse(created_count=0))

            templates = [
                WorkItemTemplate(
                    name=name,
                    description=description,
                    category=category,
                    estimated_duration=hours,
                    default_price=float(price),
                    is_default=True,
                )
                for name, description, category, hours, price in DEFAULT_TEMPLATES
            ]
            await self.uow.work_item_templates.create_many(templates)
            await self.uow.commit()

        logger.info(f"Seeded {len(templates)} default work item templates")
        return Return.ok(SeedTemplatesResponse(created_count=len(templates)))
