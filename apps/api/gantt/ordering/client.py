from __future__ import annotations

import logging
from typing import Any

import httpx

from gantt.ordering.keys import ItemId, OrderKey
from gantt.ordering.results import SyncFailure, SyncResult, SyncSuccess
from gantt.ordering.state import SyncHandler

logger = logging.getLogger(__name__)


def normalize_base_url(base_url: str) -> str:
  b = (base_url or "").strip().rstrip("/")
  if not b:
    raise ValueError("base_url is required")
  if not (b.startswith("http://") or b.startswith("https://")):
    b = "http://" + b
  return b


def _error_message(res: httpx.Response) -> str:
  data: Any = res.json()
  if isinstance(data, dict):
    for key in ("detail", "error"):
      v = data.get(key)
      if isinstance(v, str) and v:
        return v
      if isinstance(v, list) and v:
        # FastAPI validation errors
        return "; ".join(str(e.get("msg", e)) if isinstance(e, dict) else str(e) for e in v)
  return "Unknown error"


class OrderSyncClient:
  """
  Remote Sync over HTTP: pushes one item's new `display_order` to the store.

  Every outcome is returned as a `SyncResult`; remote rejections and
  transport errors never raise.
  """

  def __init__(self, base_url: str, *, timeout: float = 20.0, transport: httpx.AsyncBaseTransport | None = None) -> None:
    self.base_url = normalize_base_url(base_url)
    self.timeout = timeout
    self._transport = transport

  async def update_project_order(self, project_id: ItemId, display_order: OrderKey) -> SyncResult:
    return await self._put_order(f"/api/projects/{project_id}", display_order)

  async def update_task_order(self, task_id: ItemId, display_order: OrderKey) -> SyncResult:
    return await self._put_order(f"/api/tasks/{task_id}", display_order)

  def handlers(self) -> dict[str, SyncHandler]:
    return {"project": self.update_project_order, "task": self.update_task_order}

  async def _put_order(self, path: str, display_order: OrderKey) -> SyncResult:
    try:
      async with httpx.AsyncClient(
        base_url=self.base_url,
        timeout=self.timeout,
        transport=self._transport,
        headers={"Accept": "application/json"},
      ) as client:
        res = await client.put(path, json={"display_order": float(display_order)})
    except httpx.HTTPError as exc:
      logger.warning("order sync request failed path=%s: %r", path, exc)
      return SyncFailure(error=str(exc) or exc.__class__.__name__)

    if res.is_success:
      try:
        data = res.json() if res.content else {}
      except ValueError as exc:
        return SyncFailure(error=f"Malformed response: {exc}", status=res.status_code)
      return SyncSuccess(data=data)

    try:
      message = _error_message(res)
    except ValueError as exc:
      return SyncFailure(error=str(exc) or "Parse error", status=res.status_code)
    return SyncFailure(error=message, status=res.status_code)
