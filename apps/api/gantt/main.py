from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gantt.config import settings
from gantt.db import engine
from gantt.logs import setup_logging
from gantt.models import Base
from gantt.ordering.errors import ReorderError
from gantt.routers.projects import router as projects_router
from gantt.routers.tasks import router as tasks_router

logger = logging.getLogger(__name__)

app = FastAPI(
  title="Gantt Reorder API",
  version="0.1.0",
  docs_url="/docs" if settings.api_docs_enabled else None,
  redoc_url="/redoc" if settings.api_docs_enabled else None,
  openapi_url="/openapi.json" if settings.api_docs_enabled else None,
)


@app.exception_handler(ReorderError)
async def _reorder_error_handler(_, exc: ReorderError) -> JSONResponse:
  return JSONResponse(status_code=400, content={"detail": exc.message})


app.add_middleware(
  CORSMiddleware,
  allow_origins=settings.cors_origin_list(),
  allow_credentials=True,
  allow_methods=["*"],
  allow_headers=["*"],
)

app.include_router(projects_router)
app.include_router(tasks_router)


@app.get("/health")
async def health() -> dict:
  return {"ok": True}


@app.get("/version")
async def version() -> dict:
  return {"version": settings.app_version, "buildSha": settings.build_sha}


def _is_test_db() -> bool:
  try:
    db_name = settings.database_url.rsplit("/", 1)[-1]
    return "test" in db_name
  except Exception:
    return False


@app.on_event("startup")
async def _startup() -> None:
  setup_logging(settings.log_level)
  if _is_test_db():
    return
  # Alembic owns the schema in deployments; this only covers a fresh local sqlite file.
  if settings.database_url.startswith("sqlite"):
    async with engine.begin() as conn:
      await conn.run_sync(Base.metadata.create_all)
  logger.info("gantt api started version=%s", settings.app_version)
