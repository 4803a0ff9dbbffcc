from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gantt.config import settings
from gantt.deps import get_db
from gantt.models import Project, Task
from gantt.ordering.keys import append_key, items_from_records
from gantt.schemas import TaskCreateIn, TaskOut, TaskUpdateIn

router = APIRouter(prefix="/api", tags=["tasks"])


def _task_out(t: Task) -> TaskOut:
  return TaskOut(
    id=t.id,
    project_id=t.project_id,
    name=t.name,
    start_date=t.start_date,
    end_date=t.end_date,
    display_order=t.display_order,
  )


async def _get_task(db: AsyncSession, task_id: int) -> Task:
  res = await db.execute(select(Task).where(Task.id == task_id))
  t = res.scalar_one_or_none()
  if not t:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
  return t


@router.get("/tasks", response_model=list[TaskOut])
async def list_tasks(project_id: int | None = Query(default=None), db: AsyncSession = Depends(get_db)) -> list[TaskOut]:
  q = select(Task)
  if project_id is not None:
    q = q.where(Task.project_id == project_id)
  q = q.order_by(Task.project_id.asc(), Task.display_order.asc(), Task.id.asc())
  res = await db.execute(q)
  return [_task_out(t) for t in res.scalars().all()]


@router.post("/tasks", response_model=TaskOut)
async def create_task(payload: TaskCreateIn, db: AsyncSession = Depends(get_db)) -> TaskOut:
  pres = await db.execute(select(Project.id).where(Project.id == payload.project_id))
  if pres.scalar_one_or_none() is None:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

  display_order = payload.display_order
  if display_order is None:
    kres = await db.execute(select(Task.id, Task.display_order).where(Task.project_id == payload.project_id))
    display_order = append_key(items_from_records(kres.mappings().all()), gap=settings.order_gap)

  t = Task(
    project_id=payload.project_id,
    name=payload.name,
    start_date=payload.start_date.isoformat(),
    end_date=payload.end_date.isoformat(),
    display_order=display_order,
  )
  db.add(t)
  await db.commit()
  return _task_out(t)


@router.get("/tasks/{task_id}", response_model=TaskOut)
async def get_task(task_id: int, db: AsyncSession = Depends(get_db)) -> TaskOut:
  return _task_out(await _get_task(db, task_id))


@router.put("/tasks/{task_id}", response_model=TaskOut)
async def update_task(task_id: int, payload: TaskUpdateIn, db: AsyncSession = Depends(get_db)) -> TaskOut:
  data = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
  if not data:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No valid fields to update")
  t = await _get_task(db, task_id)

  start = data.get("start_date") or date.fromisoformat(t.start_date)
  end = data.get("end_date") or date.fromisoformat(t.end_date)
  if start >= end:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="End date must be after start date")

  if "name" in data:
    t.name = data["name"]
  if "start_date" in data:
    t.start_date = start.isoformat()
  if "end_date" in data:
    t.end_date = end.isoformat()
  if "display_order" in data:
    t.display_order = data["display_order"]
  await db.commit()
  return _task_out(t)


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: int, db: AsyncSession = Depends(get_db)) -> dict:
  await _get_task(db, task_id)
  await db.execute(delete(Task).where(Task.id == task_id))
  await db.commit()
  return {"ok": True}
