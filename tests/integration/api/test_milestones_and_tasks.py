"""
Integration tests for milestones, tasks and the project timeline
"""

import pytest
from datetime import date

from httpx import AsyncClient

from tests.fixtures.helpers import ADMIN_HEADERS, bearer


@pytest.fixture
def project_setup(client, login):
    async def _setup():
        owner = await login("ada@example.com")
        headers = bearer(owner)
        response = await client.post(
            "/api/projects",
            json={
                "name": "Basement",
                "clientName": "Grace",
                "startDate": "2026-03-01",
                "estimatedEndDate": "2026-08-01",
            },
            headers=headers,
        )
        return headers, response.json()["id"]

    return _setup


async def _milestone(client, headers, project_id, name, target_date, **extra):
    response = await client.post(
        f"/api/projects/{project_id}/milestones",
        json={"name": name, "targetDate": target_date, **extra},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_milestones_are_ordered_by_target_date(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    late = await _milestone(client, headers, project_id, "Finish", "2026-07-01")
    early = await _milestone(client, headers, project_id, "Framing", "2026-04-01")

    response = await client.get(f"/api/projects/{project_id}/milestones", headers=headers)

    assert [m["id"] for m in response.json()] == [early["id"], late["id"]]


@pytest.mark.asyncio
async def test_timeline(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()

    empty = await client.get(f"/api/projects/{project_id}/timeline", headers=headers)
    assert empty.json()["progressPercentage"] == 0
    assert empty.json()["startDate"] == date.today().isoformat()

    first = await _milestone(client, headers, project_id, "Demo", "2026-03-15")
    await _milestone(client, headers, project_id, "Framing", "2026-04-15")
    await _milestone(client, headers, project_id, "Finish", "2026-07-30")
    await client.post(f"/api/milestones/{first['id']}/complete", headers=headers)

    response = await client.get(f"/api/projects/{project_id}/timeline", headers=headers)

    body = response.json()
    assert body["startDate"] == "2026-03-15"
    assert body["endDate"] == "2026-07-30"
    assert body["progressPercentage"] == 33
    assert len(body["milestones"]) == 3


@pytest.mark.asyncio
async def test_milestone_progress_and_completion(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    milestone = await _milestone(client, headers, project_id, "Rough-in", "2026-05-01")
    for name, status in (("Wire", "completed"), ("Pipe", "todo")):
        await client.post(
            f"/api/projects/{project_id}/tasks",
            json={"name": name, "status": status, "milestoneId": milestone["id"]},
            headers=headers,
        )

    detail = await client.get(f"/api/milestones/{milestone['id']}", headers=headers)
    assert detail.json()["progressPercentage"] == 50

    completed = await client.put(
        f"/api/milestones/{milestone['id']}", json={"status": "completed"}, headers=headers
    )
    assert completed.json()["completedDate"] == date.today().isoformat()


@pytest.mark.asyncio
async def test_delete_milestone_detaches_tasks(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    milestone = await _milestone(client, headers, project_id, "Rough-in", "2026-05-01")
    task = await client.post(
        f"/api/projects/{project_id}/tasks",
        json={"name": "Wire", "milestoneId": milestone["id"]},
        headers=headers,
    )

    response = await client.delete(f"/api/milestones/{milestone['id']}", headers=headers)

    assert response.status_code == 200
    kept = await client.get(f"/api/tasks/{task.json()['id']}", headers=headers)
    assert kept.status_code == 200
    assert kept.json()["milestoneId"] is None


@pytest.mark.asyncio
async def test_task_lifecycle(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()

    created = await client.post(
        f"/api/projects/{project_id}/tasks",
        json={"name": "Tile floor", "price": 12.5, "amount": 40, "unit": "sqft", "priority": "high"},
        headers=headers,
    )
    assert created.status_code == 201
    task = created.json()
    assert task["actualPrice"] == 500.0

    updated = await client.put(f"/api/tasks/{task['id']}", json={"amount": 48}, headers=headers)
    assert updated.json()["actualPrice"] == 600.0

    noted = await client.post(f"/api/tasks/{task['id']}/notes", json={"note": "grout is grey"}, headers=headers)
    noted = await client.post(f"/api/tasks/{task['id']}/notes", json={"note": "sealed"}, headers=headers)
    assert noted.json()["notes"] == ["grout is grey", "sealed"]

    done = await client.post(f"/api/tasks/{task['id']}/complete", headers=headers)
    assert done.json()["status"] == "completed"
    assert done.json()["completedDate"] == date.today().isoformat()

    deleted = await client.delete(f"/api/tasks/{task['id']}", headers=headers)
    assert deleted.status_code == 200
    assert (await client.get(f"/api/tasks/{task['id']}", headers=headers)).status_code == 404


@pytest.mark.asyncio
async def test_task_filters(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    milestone = await _milestone(client, headers, project_id, "Rough-in", "2026-05-01")
    base = f"/api/projects/{project_id}/tasks"
    await client.post(base, json={"name": "a", "status": "todo", "priority": "low"}, headers=headers)
    await client.post(base, json={"name": "b", "status": "blocked", "priority": "urgent"}, headers=headers)
    await client.post(base, json={"name": "c", "milestoneId": milestone["id"]}, headers=headers)

    by_status = await client.get(base, params={"status": "todo"}, headers=headers)
    assert sorted(t["name"] for t in by_status.json()) == ["a", "c"]

    by_priority = await client.get(base, params={"priority": "urgent,low"}, headers=headers)
    assert sorted(t["name"] for t in by_priority.json()) == ["a", "b"]

    by_milestone = await client.get(base, params={"milestoneId": milestone["id"]}, headers=headers)
    assert [t["name"] for t in by_milestone.json()] == ["c"]

    invalid = await client.get(base, params={"priority": "whenever"}, headers=headers)
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_tasks_from_templates(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    await client.post("/api/admin/work-item-templates/seed", headers=ADMIN_HEADERS)
    templates = (await client.get("/api/work-item-templates", params={"category": "plumbing"}, headers=headers)).json()

    response = await client.post(
        f"/api/projects/{project_id}/tasks/from-templates",
        json={"templateIds": [t["id"] for t in templates]},
        headers=headers,
    )

    assert response.status_code == 201
    tasks = response.json()
    assert [t["name"] for t in tasks] == [t["name"] for t in templates]
    assert [t["actualPrice"] for t in tasks] == [t["defaultPrice"] for t in templates]
    assert all(t["status"] == "todo" for t in tasks)


@pytest.mark.asyncio
async def test_tasks_from_unknown_template(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()

    response = await client.post(
        f"/api/projects/{project_id}/tasks/from-templates",
        json={"templateIds": ["00000000-0000-0000-0000-000000000001"]},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TEMPLATE_NOT_FOUND"
    assert (await client.get(f"/api/projects/{project_id}/tasks", headers=headers)).json() == []


@pytest.mark.asyncio
async def test_task_with_milestone_from_other_project(client: AsyncClient, project_setup):
    headers, project_id = await project_setup()
    other = await client.post(
        "/api/projects",
        json={"name": "Attic", "clientName": "G", "startDate": "2026-01-01", "estimatedEndDate": "2026-02-01"},
        headers=headers,
    )
    milestone = await _milestone(client, headers, other.json()["id"], "Insulate", "2026-01-20")

    response = await client.post(
        f"/api/projects/{project_id}/tasks",
        json={"name": "x", "milestoneId": milestone["id"]},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "MILESTONE_NOT_FOUND"
