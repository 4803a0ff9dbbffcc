from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
  sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'gantt_test.db'}")

from gantt.config import settings
from gantt.db import engine
from gantt.main import app
from gantt.models import Base
from gantt.ordering import OrderItem


@pytest.fixture(scope="session")
def anyio_backend() -> str:
  return "asyncio"


async def _reset_db() -> None:
  async with engine.begin() as conn:
    await conn.run_sync(Base.metadata.drop_all)
    await conn.run_sync(Base.metadata.create_all)
  await engine.dispose()


@pytest.fixture
async def db_reset() -> None:
  db_name = settings.database_url.rsplit("/", 1)[-1]
  if "test" not in db_name:
    raise RuntimeError(
      "Refusing to run destructive tests against non-test DB. "
      "Set DATABASE_URL to a *_test database (e.g. gantt_test)."
    )
  await _reset_db()
  yield
  await _reset_db()


@pytest.fixture
async def client(db_reset: None) -> AsyncClient:
  transport = ASGITransport(app=app)
  async with AsyncClient(transport=transport, base_url="http://localhost") as c:
    yield c


def make_items(*keys: float) -> list[OrderItem]:
  return [OrderItem(id=i, order_key=k) for i, k in enumerate(keys, start=1)]


async def create_project(client: AsyncClient, name: str, **extra) -> dict:
  res = await client.post("/api/projects", json={"name": name, "start_date": "2026-10-01", **extra})
  assert res.status_code == 200, res.text
  return res.json()


async def create_task(client: AsyncClient, project_id: int, name: str, **extra) -> dict:
  payload = {"project_id": project_id, "name": name, "start_date": "2026-10-01", "end_date": "2026-10-08", **extra}
  res = await client.post("/api/tasks", json=payload)
  assert res.status_code == 200, res.text
  return res.json()
