from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
  return datetime.now(timezone.utc)


class Base(DeclarativeBase):
  pass


class Project(Base):
  __tablename__ = "projects"

  id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
  name: Mapped[str] = mapped_column(String, nullable=False)
  start_date: Mapped[str] = mapped_column(String, nullable=False)
  display_order: Mapped[float] = mapped_column(Float, nullable=False, default=0.0, index=True)
  created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
  updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class Task(Base):
  __tablename__ = "tasks"
  __table_args__ = (Index("ix_tasks_project_display_order", "project_id", "display_order"),)

  id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
  project_id: Mapped[int] = mapped_column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
  name: Mapped[str] = mapped_column(String, nullable=False)
  start_date: Mapped[str] = mapped_column(String, nullable=False)
  end_date: Mapped[str] = mapped_column(String, nullable=False)
  display_order: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
  created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
  updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
