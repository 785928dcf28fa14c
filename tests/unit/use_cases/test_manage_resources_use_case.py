"""
Unit tests for Manage Resources Use Case
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from renovator.app.use_cases.resources import (
    CreateResourceCommand,
    ManageResourcesUseCase,
    OrderResourceCommand,
    ReceiveResourceCommand,
    UpdateResourceCommand,
)
from renovator.domain.entities import Resource, ResourceStatus, ResourceType


def _resource(project_id, status=ResourceStatus.needed, **extra):
    return Resource(
        id=uuid4(),
        project_id=project_id,
        type=ResourceType.material,
        name="Drywall sheets",
        quantity=40,
        unit="sheet",
        cost=480.0,
        status=status,
        **extra,
    )


@pytest.fixture
def owned(mock_uow):
    mock_uow.projects.get_for_owner = AsyncMock(return_value=MagicMock())
    mock_uow.resources.create = AsyncMock(side_effect=lambda r: r)
    mock_uow.resources.update = AsyncMock(side_effect=lambda r: r)
    return mock_uow


@pytest.mark.asyncio
async def test_create_starts_as_needed(owned):
    project_id = uuid4()
    command = CreateResourceCommand(
        type=ResourceType.equipment, name="Tile saw", quantity=1, unit="day", cost=65
    )

    result = await ManageResourcesUseCase(owned).create(project_id, uuid4(), command)

    assert result.is_ok()
    assert result.value.status == ResourceStatus.needed
    assert result.value.project_id == project_id
    owned.suppliers.get_for_owner.assert_not_called()
    owned.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_with_foreign_supplier(owned):
    owned.suppliers.get_for_owner = AsyncMock(return_value=None)
    command = CreateResourceCommand(
        type=ResourceType.material, name="Studs", quantity=80, unit="pc", cost=320, supplier_id=uuid4()
    )

    result = await ManageResourcesUseCase(owned).create(uuid4(), uuid4(), command)

    assert result.is_err()
    assert result.error.code == "SUPPLIER_NOT_FOUND"
    owned.resources.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_in_foreign_project(mock_uow):
    mock_uow.projects.get_for_owner = AsyncMock(return_value=None)
    command = CreateResourceCommand(type=ResourceType.other, name="Skip", quantity=1, unit="pc", cost=0)

    result = await ManageResourcesUseCase(mock_uow).create(uuid4(), uuid4(), command)

    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_grouped_by_status_has_every_status(owned):
    project_id = uuid4()
    owned.resources.list_by_project_id = AsyncMock(
        return_value=[
            _resource(project_id, ResourceStatus.ordered),
            _resource(project_id, ResourceStatus.needed),
            _resource(project_id, ResourceStatus.ordered),
        ]
    )

    result = await ManageResourcesUseCase(owned).grouped_by_status(project_id, uuid4())

    assert result.is_ok()
    groups = result.value
    assert set(groups) == {"needed", "ordered", "received", "cancelled"}
    assert len(groups["ordered"]) == 2
    assert len(groups["needed"]) == 1
    assert groups["received"] == []


@pytest.mark.asyncio
async def test_mark_ordered_stamps_dates(owned):
    resource = _resource(uuid4())
    owned.resources.get_by_id = AsyncMock(return_value=resource)

    command = OrderResourceCommand(order_date=date(2026, 5, 1), expected_delivery_date=date(2026, 5, 8))
    result = await ManageResourcesUseCase(owned).mark_ordered(resource.id, uuid4(), command)

    assert result.is_ok()
    assert resource.status == ResourceStatus.ordered
    assert resource.order_date == date(2026, 5, 1)
    assert resource.expected_delivery_date == date(2026, 5, 8)


@pytest.mark.asyncio
async def test_mark_ordered_rejects_delivery_before_order(owned):
    command = OrderResourceCommand(order_date=date(2026, 5, 8), expected_delivery_date=date(2026, 5, 1))

    result = await ManageResourcesUseCase(owned).mark_ordered(uuid4(), uuid4(), command)

    assert result.is_err()
    assert result.error.code == "INVALID_DELIVERY_DATES"
    owned.resources.update.assert_not_called()


@pytest.mark.asyncio
async def test_mark_received(owned):
    resource = _resource(uuid4(), ResourceStatus.ordered)
    owned.resources.get_by_id = AsyncMock(return_value=resource)

    command = ReceiveResourceCommand(actual_delivery_date=date(2026, 5, 9))
    result = await ManageResourcesUseCase(owned).mark_received(resource.id, uuid4(), command)

    assert result.is_ok()
    assert result.value.status == ResourceStatus.received
    assert result.value.actual_delivery_date == date(2026, 5, 9)


@pytest.mark.asyncio
async def test_update_can_detach_supplier(owned):
    resource = _resource(uuid4(), supplier_id=uuid4())
    owned.resources.get_by_id = AsyncMock(return_value=resource)

    command = UpdateResourceCommand.model_validate({"supplierId": None, "cost": 500})
    result = await ManageResourcesUseCase(owned).update(resource.id, uuid4(), command)

    assert result.is_ok()
    assert resource.supplier_id is None
    assert resource.cost == 500
    owned.suppliers.get_for_owner.assert_not_called()


@pytest.mark.asyncio
async def test_resource_in_foreign_project_is_not_found(mock_uow):
    mock_uow.resources.get_by_id = AsyncMock(return_value=_resource(uuid4()))
    mock_uow.projects.get_for_owner = AsyncMock(return_value=None)

    result = await ManageResourcesUseCase(mock_uow).delete(uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_overdue_uses_two_day_grace(mock_uow):
    mock_uow.resources.list_overdue = AsyncMock(return_value=[])
    user_id = uuid4()

    result = await ManageResourcesUseCase(mock_uow).overdue(user_id, today=date(2026, 5, 10))

    assert result.is_ok()
    mock_uow.resources.list_overdue.assert_called_once_with(user_id, date(2026, 5, 8))
