"""
Integration tests for the project endpoints
"""

import pytest
from httpx import AsyncClient

from tests.fixtures.helpers import bearer

PROJECT = {
    "name": "Kitchen remodel",
    "clientName": "Grace Hopper",
    "clientEmail": "grace@example.com",
    "startDate": "2026-03-01",
    "estimatedEndDate": "2026-05-15",
}


async def _create(client, headers, **overrides):
    response = await client.post("/api/projects", json={**PROJECT, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_and_get_project(client: AsyncClient, login):
    owner = await login("ada@example.com")

    created = await _create(client, bearer(owner))

    assert created["status"] == "planning"
    assert created["ownerId"] == owner["user"]["id"]
    assert created["clientName"] == "Grace Hopper"

    response = await client.get(f"/api/projects/{created['id']}", headers=bearer(owner))
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_create_project_with_end_before_start(client: AsyncClient, login):
    owner = await login("ada@example.com")

    response = await client.post(
        "/api/projects",
        json={**PROJECT, "estimatedEndDate": "2026-02-01"},
        headers=bearer(owner),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_DATES"


@pytest.mark.asyncio
async def test_create_project_missing_fields(client: AsyncClient, login):
    owner = await login("ada@example.com")

    response = await client.post("/api/projects", json={"name": "x"}, headers=bearer(owner))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_projects_filters(client: AsyncClient, login):
    owner = await login("ada@example.com")
    other = await login("grace@example.com")
    headers = bearer(owner)
    kitchen = await _create(client, headers, status="active")
    bath = await _create(client, headers, name="Bathroom", clientName="Alan Turing")
    await _create(client, headers, name="Deck", status="on_hold")
    await _create(client, bearer(other), name="Kitchen elsewhere", status="active")

    everything = await client.get("/api/projects", headers=headers)
    assert len(everything.json()) == 3

    active = await client.get("/api/projects", params={"status": "active,planning"}, headers=headers)
    assert {p["id"] for p in active.json()} == {kitchen["id"], bath["id"]}

    search = await client.get("/api/projects", params={"search": "turing"}, headers=headers)
    assert [p["id"] for p in search.json()] == [bath["id"]]


@pytest.mark.asyncio
async def test_list_projects_invalid_status(client: AsyncClient, login):
    owner = await login("ada@example.com")

    response = await client.get("/api/projects", params={"status": "done"}, headers=bearer(owner))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_FILTER"


@pytest.mark.asyncio
async def test_other_users_project_is_not_found(client: AsyncClient, login):
    owner = await login("ada@example.com")
    intruder = await login("mallory@example.com")
    project = await _create(client, bearer(owner))

    for method, path in (
        ("GET", f"/api/projects/{project['id']}"),
        ("PUT", f"/api/projects/{project['id']}"),
        ("DELETE", f"/api/projects/{project['id']}"),
        ("POST", f"/api/projects/{project['id']}/archive"),
    ):
        kwargs = {"json": {"name": "mine"}} if method == "PUT" else {}
        response = await client.request(method, path, headers=bearer(intruder), **kwargs)
        assert response.status_code == 404, path
        assert response.json()["error"]["code"] == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_and_archive_project(client: AsyncClient, login):
    owner = await login("ada@example.com")
    headers = bearer(owner)
    project = await _create(client, headers)

    updated = await client.put(
        f"/api/projects/{project['id']}",
        json={"name": "Kitchen and pantry", "status": "active"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["name"] == "Kitchen and pantry"
    assert updated.json()["clientEmail"] == "grace@example.com"

    bad_dates = await client.put(
        f"/api/projects/{project['id']}", json={"startDate": "2026-06-01"}, headers=headers
    )
    assert bad_dates.status_code == 400

    archived = await client.post(f"/api/projects/{project['id']}/archive", headers=headers)
    assert archived.json()["status"] == "archived"


@pytest.mark.asyncio
async def test_delete_project_removes_children(client: AsyncClient, login):
    owner = await login("ada@example.com")
    headers = bearer(owner)
    project = await _create(client, headers)
    base = f"/api/projects/{project['id']}"
    milestone = await client.post(
        f"{base}/milestones", json={"name": "Demo", "targetDate": "2026-03-10"}, headers=headers
    )
    task = await client.post(f"{base}/tasks", json={"name": "Remove cabinets", "price": 500}, headers=headers)
    await client.post(f"{base}/budget", headers=headers)

    response = await client.delete(base, headers=headers)

    assert response.status_code == 200
    assert (await client.get(base, headers=headers)).status_code == 404
    assert (await client.get(f"/api/milestones/{milestone.json()['id']}", headers=headers)).status_code == 404
    assert (await client.get(f"/api/tasks/{task.json()['id']}", headers=headers)).status_code == 404
