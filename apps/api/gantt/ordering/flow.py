from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic

from gantt.ordering.keys import T
from gantt.ordering.results import SyncResult, SyncSuccess
from gantt.ordering.state import DragDropStateManager, ReorderOperation, ScopeKind

DEFAULT_ERROR_MESSAGES: dict[str, str] = {
  "project": "Failed to reorder project",
  "task": "Failed to reorder task",
}


@dataclass(frozen=True)
class ReorderOutcome(Generic[T]):
  items: list[T]
  operation: ReorderOperation | None = None
  result: SyncResult | None = None

  @property
  def ok(self) -> bool:
    return self.result is None or isinstance(self.result, SyncSuccess)


async def reorder_and_sync(
  manager: DragDropStateManager,
  items: Sequence[T],
  *,
  scope_kind: ScopeKind,
  from_index: int,
  to_index: int,
) -> ReorderOutcome[T]:
  """
  Apply a drop locally, push the moved item's key to the remote store and roll
  back on failure. Returns the sequence the caller should render.
  """
  reordered = manager.optimistic_reorder(items, from_index, to_index)
  if from_index == to_index:
    return ReorderOutcome(items=reordered)

  operation = manager.create_operation(items, reordered, scope_kind=scope_kind, from_index=from_index, to_index=to_index)
  manager.add_operation(operation)
  try:
    result = await manager.begin_sync(operation)
  except Exception:
    manager.complete_operation(operation.operation_id)
    raise

  if isinstance(result, SyncSuccess):
    manager.complete_operation(operation.operation_id)
    return ReorderOutcome(items=reordered, operation=operation, result=result)

  rolled_back = manager.rollback(reordered, operation)
  manager.set_error(result.error or DEFAULT_ERROR_MESSAGES.get(scope_kind, "Failed to reorder"))
  manager.complete_operation(operation.operation_id)
  return ReorderOutcome(items=rolled_back, operation=operation, result=result)
