"""
Unit tests for work item template use cases
"""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from renovator.app.use_cases.work_item_templates import (
    CreateTemplateCommand,
    ManageTemplatesUseCase,
    SeedDefaultTemplatesUseCase,
    UpdateTemplateCommand,
)
from renovator.app.use_cases.work_item_templates.defaults import DEFAULT_TEMPLATES
from renovator.domain.entities import WorkItemCategory, WorkItemTemplate


def _template(**overrides):
    values = dict(id=uuid4(), name="Template", category=WorkItemCategory.painting)
    values.update(overrides)
    return WorkItemTemplate(**values)


@pytest.mark.asyncio
async def test_grouped_has_every_category(mock_uow):
    user_id = uuid4()
    mock_uow.work_item_templates.list_visible = AsyncMock(
        return_value=[
            _template(name="Prime walls", is_default=True),
            _template(name="Own thing", category=WorkItemCategory.other, owner_id=user_id),
        ]
    )

    result = await ManageTemplatesUseCase(mock_uow).grouped(user_id)

    assert result.is_ok()
    assert set(result.value) == {c.value for c in WorkItemCategory}
    assert [t.name for t in result.value["painting"]] == ["Prime walls"]
    assert [t.name for t in result.value["other"]] == ["Own thing"]
    assert result.value["hvac"] == []


@pytest.mark.asyncio
async def test_create_template_is_owned_custom(mock_uow):
    user_id = uuid4()
    mock_uow.work_item_templates.create = AsyncMock(side_effect=lambda t: t)

    command = CreateTemplateCommand(name="Grout", category=WorkItemCategory.finishing, default_price=80)
    result = await ManageTemplatesUseCase(mock_uow).create(user_id, command)

    assert result.is_ok()
    assert result.value.owner_id == user_id
    assert result.value.is_default is False


@pytest.mark.asyncio
async def test_default_template_is_read_only(mock_uow):
    template = _template(is_default=True)
    mock_uow.work_item_templates.get_by_id = AsyncMock(return_value=template)
    mock_uow.work_item_templates.update = AsyncMock()

    result = await ManageTemplatesUseCase(mock_uow).update(
        template.id, uuid4(), UpdateTemplateCommand(name="Mine now")
    )

    assert result.is_err()
    assert result.error.code == "DEFAULT_TEMPLATE_READONLY"
    assert template.name == "Template"
    mock_uow.work_item_templates.update.assert_not_called()


@pytest.mark.asyncio
async def test_foreign_template_is_not_found(mock_uow):
    template = _template(owner_id=uuid4())
    mock_uow.work_item_templates.get_by_id = AsyncMock(return_value=template)
    mock_uow.work_item_templates.delete = AsyncMock()

    result = await ManageTemplatesUseCase(mock_uow).delete(template.id, uuid4())

    assert result.is_err()
    assert result.error.code == "TEMPLATE_NOT_FOUND"
    mock_uow.work_item_templates.delete.assert_not_called()


@pytest.mark.asyncio
async def test_seed_creates_defaults_once(mock_uow):
    mock_uow.work_item_templates.count_defaults = AsyncMock(return_value=0)
    mock_uow.work_item_templates.create_many = AsyncMock(side_effect=lambda ts: ts)

    result = await SeedDefaultTemplatesUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.created_count == len(DEFAULT_TEMPLATES)
    (templates,) = mock_uow.work_item_templates.create_many.call_args.args
    assert all(t.is_default and t.owner_id is None for t in templates)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_seed_skipped_when_defaults_exist(mock_uow):
    mock_uow.work_item_templates.count_defaults = AsyncMock(return_value=36)
    mock_uow.work_item_templates.create_many = AsyncMock()

    result = await SeedDefaultTemplatesUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.created_count == 0
    mock_uow.work_item_templates.create_many.assert_not_called()
