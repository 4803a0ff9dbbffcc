from __future__ import annotations

import asyncio
from datetime import date, timedelta

from sqlalchemy import func, select

from gantt.config import settings
from gantt.db import SessionLocal
from gantt.models import Project, Task

SAMPLE_PROJECTS: list[tuple[str, int, list[tuple[str, int, int]]]] = [
  # (name, start offset days, [(task name, start offset, duration days)])
  ("Website renewal", 0, [("Requirements", 0, 4), ("Design", 5, 9), ("Implementation", 15, 14), ("Launch", 30, 2)]),
  ("Mobile app", 14, [("Research", 14, 5), ("Prototype", 20, 10), ("Beta", 31, 14)]),
  ("Marketing campaign", 30, [("Planning", 30, 7), ("Content", 38, 10), ("Rollout", 49, 5)]),
]


async def seed() -> None:
  gap = settings.order_gap
  first = date.today().replace(day=1)
  async with SessionLocal() as db:
    res = await db.execute(select(func.count()).select_from(Project))
    if (res.scalar_one() or 0) > 0:
      print("projects already present; skipping seed")
      return
    for p_idx, (name, offset, tasks) in enumerate(SAMPLE_PROJECTS, start=1):
      p = Project(name=name, start_date=(first + timedelta(days=offset)).isoformat(), display_order=p_idx * gap)
      db.add(p)
      await db.flush()
      for t_idx, (t_name, t_offset, days) in enumerate(tasks, start=1):
        start = first + timedelta(days=t_offset)
        db.add(
          Task(
            project_id=p.id,
            name=t_name,
            start_date=start.isoformat(),
            end_date=(start + timedelta(days=days)).isoformat(),
            display_order=t_idx * gap,
          )
        )
    await db.commit()
  print(f"seeded {len(SAMPLE_PROJECTS)} projects")


def main() -> None:
  asyncio.run(seed())


if __name__ == "__main__":
  main()
