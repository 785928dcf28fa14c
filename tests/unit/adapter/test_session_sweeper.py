"""
Unit tests for the expired-session sweeper
"""

import asyncio
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest

from renovator.adapter.services.session_sweeper import SessionSweeper


def _factory(mock_uow):
    @asynccontextmanager
    async def factory():
        yield mock_uow

    return factory


@pytest.mark.asyncio
async def test_sweep_once_returns_deleted_count(mock_uow):
    mock_uow.sessions.delete_expired = AsyncMock(return_value=2)

    sweeper = SessionSweeper(_factory(mock_uow), interval_seconds=60)

    assert await sweeper.sweep_once() == 2
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_disabled_sweeper_never_starts(mock_uow):
    sweeper = SessionSweeper(_factory(mock_uow), interval_seconds=0)

    sweeper.start()

    assert sweeper.running is False
    await sweeper.stop()


@pytest.mark.asyncio
async def test_sweeper_runs_immediately_and_stops(mock_uow):
    swept = asyncio.Event()

    async def delete_expired(now):
        swept.set()
        return 0

    mock_uow.sessions.delete_expired = AsyncMock(side_effect=delete_expired)
    sweeper = SessionSweeper(_factory(mock_uow), interval_seconds=3600)

    sweeper.start()
    sweeper.start()
    await asyncio.wait_for(swept.wait(), timeout=1)

    assert sweeper.running is True
    await sweeper.stop()
    assert sweeper.running is False
    assert mock_uow.sessions.delete_expired.call_count == 1


@pytest.mark.asyncio
async def test_sweeper_survives_failing_sweep(mock_uow):
    calls = []

    async def delete_expired(now):
        calls.append(now)
        if len(calls) == 1:
            raise RuntimeError("database is locked")
        return 1

    mock_uow.sessions.delete_expired = AsyncMock(side_effect=delete_expired)
    sweeper = SessionSweeper(_factory(mock_uow), interval_seconds=0.01)

    sweeper.start()
    for _ in range(100):
        if len(calls) >= 2:
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()

    assert len(calls) >= 2
