from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from gantt.config import settings
from gantt.db import SessionLocal
from gantt.ordering.client import OrderSyncClient
from gantt.ordering.state import DragDropStateManager


async def get_db() -> AsyncIterator[AsyncSession]:
  async with SessionLocal() as session:
    yield session


def get_sync_client() -> OrderSyncClient:
  return OrderSyncClient(settings.api_base_url, timeout=settings.sync_timeout_seconds)


def get_drag_drop_manager(client: OrderSyncClient | None = None) -> DragDropStateManager:
  sync = client or get_sync_client()
  return DragDropStateManager(sync.handlers(), gap=settings.order_gap)
