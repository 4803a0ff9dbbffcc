from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, model_validator


class ProjectCreateIn(BaseModel):
  name: str = Field(min_length=1)
  start_date: date
  display_order: float | None = None


class ProjectUpdateIn(BaseModel):
  name: str | None = Field(default=None, min_length=1)
  start_date: date | None = None
  display_order: float | None = None


class ProjectOut(BaseModel):
  id: int
  name: str
  start_date: str
  display_order: float


class TaskCreateIn(BaseModel):
  project_id: int
  name: str = Field(min_length=1)
  start_date: date
  end_date: date
  display_order: float | None = None

  @model_validator(mode="after")
  def _end_after_start(self) -> "TaskCreateIn":
    if self.start_date >= self.end_date:
      raise ValueError("End date must be after start date")
    return self


class TaskUpdateIn(BaseModel):
  name: str | None = Field(default=None, min_length=1)
  start_date: date | None = None
  end_date: date | None = None
  display_order: float | None = None


class TaskOut(BaseModel):
  id: int
  project_id: int
  name: str
  start_date: str
  end_date: str
  display_order: float
