from __future__ import annotations

import pytest
from httpx import AsyncClient

from conftest import create_project, create_task
from gantt.ordering import OrderItem, validate
from gantt.seed import seed


@pytest.mark.anyio
async def test_health_and_version(client: AsyncClient) -> None:
  assert (await client.get("/health")).json() == {"ok": True}
  assert "version" in (await client.get("/version")).json()


@pytest.mark.anyio
async def test_create_projects_appends_gap_spaced_display_order(client: AsyncClient) -> None:
  created = [await create_project(client, f"P{i}") for i in range(3)]
  assert [p["display_order"] for p in created] == [1000, 2000, 3000]

  listed = (await client.get("/api/projects")).json()
  assert [p["name"] for p in listed] == ["P0", "P1", "P2"]


@pytest.mark.anyio
async def test_projects_listed_ascending_by_display_order(client: AsyncClient) -> None:
  a = await create_project(client, "A")
  await create_project(client, "B")
  c = await create_project(client, "C")

  res = await client.put(f"/api/projects/{c['id']}", json={"display_order": a["display_order"] / 2})
  assert res.status_code == 200, res.text
  assert res.json()["display_order"] == 500

  listed = (await client.get("/api/projects")).json()
  assert [p["name"] for p in listed] == ["C", "A", "B"]


@pytest.mark.anyio
async def test_update_project_requires_fields_and_existing_row(client: AsyncClient) -> None:
  p = await create_project(client, "A")
  res = await client.put(f"/api/projects/{p['id']}", json={})
  assert res.status_code == 400
  assert res.json()["detail"] == "No valid fields to update"

  res = await client.put("/api/projects/424242", json={"display_order": 1})
  assert res.status_code == 404
  assert res.json()["detail"] == "Project not found"

  res = await client.put(f"/api/projects/{p['id']}", json={"name": "Renamed", "start_date": "2026-11-01"})
  assert res.status_code == 200, res.text
  assert res.json()["name"] == "Renamed"
  assert res.json()["start_date"] == "2026-11-01"
  assert res.json()["display_order"] == p["display_order"]


@pytest.mark.anyio
async def test_delete_project_removes_its_tasks(client: AsyncClient) -> None:
  p = await create_project(client, "A")
  other = await create_project(client, "B")
  await create_task(client, p["id"], "T1")
  kept = await create_task(client, other["id"], "T2")

  res = await client.delete(f"/api/projects/{p['id']}")
  assert res.status_code == 200, res.text
  assert (await client.get(f"/api/projects/{p['id']}")).status_code == 404
  remaining = (await client.get("/api/tasks")).json()
  assert [t["id"] for t in remaining] == [kept["id"]]


@pytest.mark.anyio
async def test_task_display_order_is_scoped_per_project(client: AsyncClient) -> None:
  p1 = await create_project(client, "A")
  p2 = await create_project(client, "B")
  a1 = await create_task(client, p1["id"], "a1")
  a2 = await create_task(client, p1["id"], "a2")
  b1 = await create_task(client, p2["id"], "b1")
  assert [a1["display_order"], a2["display_order"], b1["display_order"]] == [1000, 2000, 1000]

  listed = (await client.get("/api/tasks", params={"project_id": p1["id"]})).json()
  assert [t["name"] for t in listed] == ["a1", "a2"]


@pytest.mark.anyio
async def test_task_create_validation(client: AsyncClient) -> None:
  p = await create_project(client, "A")
  res = await client.post(
    "/api/tasks",
    json={"project_id": p["id"], "name": "bad", "start_date": "2026-10-08", "end_date": "2026-10-01"},
  )
  assert res.status_code == 422

  res = await client.post(
    "/api/tasks",
    json={"project_id": 999999, "name": "orphan", "start_date": "2026-10-01", "end_date": "2026-10-02"},
  )
  assert res.status_code == 404
  assert res.json()["detail"] == "Project not found"


@pytest.mark.anyio
async def test_task_update_checks_dates_against_stored_values(client: AsyncClient) -> None:
  p = await create_project(client, "A")
  t = await create_task(client, p["id"], "T")

  res = await client.put(f"/api/tasks/{t['id']}", json={"end_date": "2026-09-30"})
  assert res.status_code == 400
  assert res.json()["detail"] == "End date must be after start date"

  res = await client.put(f"/api/tasks/{t['id']}", json={"start_date": "2026-10-02", "end_date": "2026-10-20"})
  assert res.status_code == 200, res.text
  assert res.json()["end_date"] == "2026-10-20"

  res = await client.put(f"/api/tasks/{t['id']}", json={"display_order": 1234.5})
  assert res.status_code == 200, res.text
  assert res.json()["display_order"] == 1234.5


@pytest.mark.anyio
async def test_delete_task(client: AsyncClient) -> None:
  p = await create_project(client, "A")
  t = await create_task(client, p["id"], "T")
  assert (await client.delete(f"/api/tasks/{t['id']}")).status_code == 200
  assert (await client.get(f"/api/tasks/{t['id']}")).status_code == 404
  assert (await client.delete(f"/api/tasks/{t['id']}")).status_code == 404


@pytest.mark.anyio
async def test_seed_creates_gap_spaced_rows_once(client: AsyncClient) -> None:
  await seed()
  await seed()
  projects = (await client.get("/api/projects")).json()
  assert [p["display_order"] for p in projects] == [1000, 2000, 3000]
  tasks = (await client.get("/api/tasks", params={"project_id": projects[0]["id"]})).json()
  assert validate([OrderItem(id=t["id"], order_key=t["display_order"]) for t in tasks])
