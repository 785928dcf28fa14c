"""
Integration tests for self-service session management
"""

import pytest
from datetime import timedelta
from uuid import UUID

from httpx import AsyncClient
from sqlmodel import select

from renovator.domain.base import utcnow
from renovator.domain.entities import Session, User
from tests.fixtures.helpers import bearer


@pytest.mark.asyncio
async def test_list_sessions(client: AsyncClient, login, session_factory):
    first = await login("ada@example.com")
    second = await login("ada@example.com")
    await login("grace@example.com")

    async with session_factory() as s:
        stale = (await s.exec(select(Session).where(Session.id == UUID(first["sessionId"])))).one()
        stale.expires_at = utcnow() - timedelta(minutes=1)
        s.add(stale)
        await s.commit()

    response = await client.get("/api/sessions", headers=bearer(second))

    assert response.status_code == 200
    sessions = {s["id"]: s for s in response.json()}
    assert set(sessions) == {first["sessionId"], second["sessionId"]}
    assert sessions[first["sessionId"]]["expired"] is True
    assert sessions[second["sessionId"]]["expired"] is False
    assert "accessToken" not in sessions[second["sessionId"]]


@pytest.mark.asyncio
async def test_list_sessions_newest_first(client: AsyncClient, login, session_factory):
    body = await login("ada@example.com")
    base = utcnow() - timedelta(hours=1)

    async with session_factory() as s:
        own = (await s.exec(select(Session).where(Session.id == UUID(body["sessionId"])))).one()
        own.created_at = base + timedelta(minutes=2)
        s.add(own)
        older = Session(
            user_id=own.user_id,
            access_token="a-older",
            refresh_token="r-older",
            created_at=base + timedelta(minutes=1),
            expires_at=utcnow() + timedelta(minutes=30),
        )
        newer = Session(
            user_id=own.user_id,
            access_token="a-newer",
            refresh_token="r-newer",
            created_at=base + timedelta(minutes=3),
            expires_at=utcnow() + timedelta(minutes=30),
        )
        s.add(newer)
        s.add(older)
        await s.commit()
        expected = [str(newer.id), body["sessionId"], str(older.id)]

    response = await client.get("/api/sessions", headers=bearer(body))

    assert response.status_code == 200
    assert [s["id"] for s in response.json()] == expected


@pytest.mark.asyncio
async def test_delete_own_session(client: AsyncClient, login, session_factory):
    first = await login("ada@example.com")
    second = await login("ada@example.com")

    response = await client.delete(f"/api/sessions/{first['sessionId']}", headers=bearer(second))

    assert response.status_code == 200
    async with session_factory() as s:
        remaining = (await s.exec(select(Session))).all()
        assert [str(r.id) for r in remaining] == [second["sessionId"]]


@pytest.mark.asyncio
async def test_delete_foreign_session_is_not_found(client: AsyncClient, login, session_factory):
    ada = await login("ada@example.com")
    grace = await login("grace@example.com")

    response = await client.delete(f"/api/sessions/{grace['sessionId']}", headers=bearer(ada))

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "SESSION_NOT_FOUND"
    async with session_factory() as s:
        assert len((await s.exec(select(Session))).all()) == 2


@pytest.mark.asyncio
async def test_logout_all(client: AsyncClient, login, session_factory):
    await login("ada@example.com")
    await login("ada@example.com")
    current = await login("ada@example.com")
    grace = await login("grace@example.com")

    response = await client.post("/api/sessions/logout-all", headers=bearer(current))

    assert response.status_code == 200
    assert response.json() == {
        "message": "Successfully revoked 3 session(s)",
        "revokedCount": 3,
    }
    async with session_factory() as s:
        remaining = (await s.exec(select(Session))).all()
        assert [str(r.id) for r in remaining] == [grace["sessionId"]]
        assert len((await s.exec(select(User))).all()) == 2


@pytest.mark.asyncio
async def test_sessions_require_authentication(client: AsyncClient):
    response = await client.get("/api/sessions")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
