from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gantt.config import settings
from gantt.deps import get_db
from gantt.models import Project, Task
from gantt.ordering.keys import append_key, items_from_records
from gantt.schemas import ProjectCreateIn, ProjectOut, ProjectUpdateIn

router = APIRouter(prefix="/api", tags=["projects"])


def _project_out(p: Project) -> ProjectOut:
  return ProjectOut(id=p.id, name=p.name, start_date=p.start_date, display_order=p.display_order)


async def _get_project(db: AsyncSession, project_id: int) -> Project:
  res = await db.execute(select(Project).where(Project.id == project_id))
  p = res.scalar_one_or_none()
  if not p:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
  return p


@router.get("/projects", response_model=list[ProjectOut])
async def list_projects(db: AsyncSession = Depends(get_db)) -> list[ProjectOut]:
  res = await db.execute(select(Project).order_by(Project.display_order.asc(), Project.id.asc()))
  return [_project_out(p) for p in res.scalars().all()]


@router.post("/projects", response_model=ProjectOut)
async def create_project(payload: ProjectCreateIn, db: AsyncSession = Depends(get_db)) -> ProjectOut:
  display_order = payload.display_order
  if display_order is None:
    kres = await db.execute(select(Project.id, Project.display_order))
    display_order = append_key(items_from_records(kres.mappings().all()), gap=settings.order_gap)
  p = Project(name=payload.name, start_date=payload.start_date.isoformat(), display_order=display_order)
  db.add(p)
  await db.commit()
  return _project_out(p)


@router.get("/projects/{project_id}", response_model=ProjectOut)
async def get_project(project_id: int, db: AsyncSession = Depends(get_db)) -> ProjectOut:
  return _project_out(await _get_project(db, project_id))


@router.put("/projects/{project_id}", response_model=ProjectOut)
async def update_project(project_id: int, payload: ProjectUpdateIn, db: AsyncSession = Depends(get_db)) -> ProjectOut:
  data = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
  if not data:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No valid fields to update")
  p = await _get_project(db, project_id)
  if "name" in data:
    p.name = data["name"]
  if "start_date" in data:
    p.start_date = data["start_date"].isoformat()
  if "display_order" in data:
    p.display_order = data["display_order"]
  await db.commit()
  return _project_out(p)


@router.delete("/projects/{project_id}")
async def delete_project(project_id: int, db: AsyncSession = Depends(get_db)) -> dict:
  await _get_project(db, project_id)
  await db.execute(delete(Task).where(Task.project_id == project_id))
  await db.execute(delete(Project).where(Project.id == project_id))
  await db.commit()
  return {"ok": True}
