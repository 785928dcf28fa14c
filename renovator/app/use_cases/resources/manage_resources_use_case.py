"""
Manage Resources Use Case

Procurement tracking for the materials, equipment and subcontracted work
a project needs.
"""

import logging
from datetime import date, timedelta
from typing import Dict, List, Optional
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.ownership import owned_project, owned_resource
from renovator.domain.base import utcnow
from renovator.domain.entities import Resource, ResourceStatus, ResourceType
from .dtos import (
    CreateResourceCommand,
    OrderResourceCommand,
    ReceiveResourceCommand,
    ResourceResponse,
    UpdateResourceCommand,
)

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
RESOURCE_NOT_FOUND = Error("RESOURCE_NOT_FOUND", "Resource not found")
SUPPLIER_NOT_FOUND = Error("SUPPLIER_NOT_FOUND", "Supplier not found")
INVALID_DELIVERY_DATES = Error(
    "INVALID_DELIVERY_DATES", "Expected delivery date must not be before the order date"
)

# An ordered resource is overdue once its expected delivery is this many days past
OVERDUE_GRACE_DAYS = 2


class ManageResourcesUseCase:
    """
    Use case for project resources.

    Business Rules:
    - Resources start as needed and are listed newest first
    - A supplier must be one of the caller's suppliers
    - Ordering needs an expected delivery on or after the order date
    - Ordered resources more than OVERDUE_GRACE_DAYS past their expected
      delivery are overdue
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _supplier_is_owned(self, supplier_id: Optional[UUID], user_id: UUID) -> bool:
        if supplier_id is None:
            return True
        return await self.uow.suppliers.get_for_owner(supplier_id, user_id) is not None

    async def create(
        self, project_id: UUID, user_id: UUID, command: CreateResourceCommand
    ) -> Result[ResourceResponse]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            if not await self._supplier_is_owned(command.supplier_id, user_id):
                return Return.err(SUPPLIER_NOT_FOUND)

            resource = await self.uow.resources.create(
                Resource(project_id=project_id, status=ResourceStatus.needed, **command.model_dump())
            )
            await self.uow.commit()

        return Return.ok(ResourceResponse.model_validate(resource))

    async def list_for_project(
        self,
        project_id: UUID,
        user_id: UUID,
        statuses: Optional[List[ResourceStatus]] = None,
        types: Optional[List[ResourceType]] = None,
        supplier_id: Optional[UUID] = None,
    ) -> Result[List[ResourceResponse]]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            resources = await self.uow.resources.list_by_project_id(
                project_id, statuses=statuses, types=types, supplier_id=supplier_id
            )
            return Return.ok([ResourceResponse.model_validate(r) for r in resources])

    async def grouped_by_status(
        self, project_id: UUID, user_id: UUID
    ) -> Result[Dict[str, List[ResourceResponse]]]:
        async with self.uow:
            if await owned_project(self.uow, project_id, user_id) is None:
                return Return.err(PROJECT_NOT_FOUND)
            resources = await self.uow.resources.list_by_project_id(project_id)

            groups: Dict[str, List[ResourceResponse]] = {s.value: [] for s in ResourceStatus}
            for resource in resources:
                groups[ResourceStatus(resource.status).value].append(
                    ResourceResponse.model_validate(resource)
                )
            return Return.ok(groups)

    async def get(self, resource_id: UUID, user_id: UUID) -> Result[ResourceResponse]:
        async with self.uow:
            resource = await owned_resource(self.uow, resource_id, user_id)
            if resource is None:
                return Return.err(RESOURCE_NOT_FOUND)
            return Return.ok(ResourceResponse.model_validate(resource))

    async def update(
        self, resource_id: UUID, user_id: UUID, command: UpdateResourceCommand
    ) -> Result[ResourceResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            resource = await owned_resource(self.uow, resource_id, user_id)
            if resource is None:
                return Return.err(RESOURCE_NOT_FOUND)
            if not await self._supplier_is_owned(changes.get("supplier_id"), user_id):
                return Return.err(SUPPLIER_NOT_FOUND)

            for field, value in changes.items():
                setattr(resource, field, value)
            resource.updated_at = utcnow()
            resource = await self.uow.resources.update(resource)
            await self.uow.commit()

        return Return.ok(ResourceResponse.model_validate(resource))

    async def mark_ordered(
        self, resource_id: UUID, user_id: UUID, command: OrderResourceCommand
    ) -> Result[ResourceResponse]:
        if command.expected_delivery_date < command.order_date:
            return Return.err(INVALID_DELIVERY_DATES)

        async with self.uow:
            resource = await owned_resource(self.uow, resource_id, user_id)
            if resource is None:
                return Return.err(RESOURCE_NOT_FOUND)

            resource.status = ResourceStatus.ordered
            resource.order_date = command.order_date
            resource.expected_delivery_date = command.expected_delivery_date
            resource.updated_at = utcnow()
            resource = await self.uow.resources.update(resource)
            await self.uow.commit()

        return Return.ok(ResourceResponse.model_validate(resource))

    async def mark_received(
        self, resource_id: UUID, user_id: UUID, command: ReceiveResourceCommand
    ) -> Result[ResourceResponse]:
        async with self.uow:
            resource = await owned_resource(self.uow, resource_id, user_id)
            if resource is None:
                return Return.err(RESOURCE_NOT_FOUND)

            resource.status = ResourceStatus.received
            resource.actual_delivery_date = command.actual_delivery_date
            resource.updated_at = utcnow()
            resource = await self.uow.resources.update(resource)
            await self.uow.commit()

        return Return.ok(ResourceResponse.model_validate(resource))

    async def delete(self, resource_id: UUID, user_id: UUID) -> Result[dict]:
        async with self.uow:
            resource = await owned_resource(self.uow, resource_id, user_id)
            if resource is None:
                return Return.err(RESOURCE_NOT_FOUND)

            await self.uow.resources.delete(resource)
            await self.uow.commit()

        return Return.ok({"resource_id": resource_id})

    async def overdue(
        self, user_id: UUID, today: Optional[date] = None
    ) -> Result[List[ResourceResponse]]:
        cutoff = (today or date.today()) - timedelta(days=OVERDUE_GRACE_DAYS)

        async with self.uow:
            resources = await self.uow.resources.list_overdue(user_id, cutoff)
            if resources:
                logger.info(f"{len(resources)} overdue deliveries for user {user_id}")
            return Return.ok([ResourceResponse.model_validate(r) for r in resources])
