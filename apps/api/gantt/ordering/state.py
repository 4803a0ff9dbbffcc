from __future__ import annotations

import logging
import uuid
from collections import deque
from collections.abc import Awaitable, Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Literal

from gantt.ordering.errors import DuplicateOperation, UnknownItem, UnsupportedScope
from gantt.ordering.keys import ORDER_GAP, ItemId, OrderKey, T, check_indices, move, reorder
from gantt.ordering.results import SyncFailure, SyncResult

logger = logging.getLogger(__name__)

MAX_PENDING_OPERATIONS = 3

ScopeKind = Literal["project", "task"]
SyncHandler = Callable[[ItemId, OrderKey], Awaitable[SyncResult]]


@dataclass(frozen=True)
class ReorderOperation:
  operation_id: str
  scope_kind: ScopeKind
  item_id: ItemId
  old_order_key: OrderKey
  new_order_key: OrderKey
  from_index: int
  to_index: int

  @classmethod
  def create(
    cls,
    *,
    scope_kind: ScopeKind,
    item_id: ItemId,
    old_order_key: OrderKey,
    new_order_key: OrderKey,
    from_index: int,
    to_index: int,
  ) -> ReorderOperation:
    return cls(
      operation_id=f"{scope_kind}-{uuid.uuid4()}",
      scope_kind=scope_kind,
      item_id=item_id,
      old_order_key=old_order_key,
      new_order_key=new_order_key,
      from_index=from_index,
      to_index=to_index,
    )


@dataclass(frozen=True)
class DragDropState:
  pending_operations: tuple[ReorderOperation, ...] = ()
  is_processing: bool = False
  last_error: str | None = None


class DragDropStateManager:
  """
  Optimistic reorder bookkeeping for one UI session.

  Notes:
  - Not thread-safe; calls are expected from a single event loop.
  - At most `max_pending` operations are tracked. When a new one arrives the
    oldest is dropped from tracking; its sync call is not cancelled and a late
    result for it only affects whoever awaited `begin_sync`.
  """

  def __init__(
    self,
    sync_handlers: Mapping[str, SyncHandler],
    *,
    max_pending: int = MAX_PENDING_OPERATIONS,
    gap: OrderKey = ORDER_GAP,
  ) -> None:
    self._handlers = dict(sync_handlers)
    if int(max_pending) < 1:
      raise ValueError(f"max_pending must be at least 1, got {max_pending}")
    self._max_pending = int(max_pending)
    self._gap = gap
    self._pending: deque[ReorderOperation] = deque()
    self._in_flight = 0
    self._last_error: str | None = None

  @property
  def max_pending(self) -> int:
    return self._max_pending

  def optimistic_reorder(self, items: Sequence[T], from_index: int, to_index: int) -> list[T]:
    check_indices(items, from_index, to_index)
    return reorder(items, from_index, to_index, gap=self._gap)

  def create_operation(
    self,
    before: Sequence[T],
    after: Sequence[T],
    *,
    scope_kind: ScopeKind,
    from_index: int,
    to_index: int,
  ) -> ReorderOperation:
    moved = before[from_index]
    return ReorderOperation.create(
      scope_kind=scope_kind,
      item_id=moved.id,
      old_order_key=moved.order_key,
      new_order_key=after[to_index].order_key,
      from_index=from_index,
      to_index=to_index,
    )

  @contextmanager
  def _processing(self) -> Iterator[None]:
    self._in_flight += 1
    try:
      yield
    finally:
      self._in_flight -= 1

  async def begin_sync(self, operation: ReorderOperation) -> SyncResult:
    handler = self._handlers.get(operation.scope_kind)
    if handler is None:
      raise UnsupportedScope(operation.scope_kind)
    with self._processing():
      result = await handler(operation.item_id, operation.new_order_key)
    if isinstance(result, SyncFailure):
      logger.info(
        "reorder sync failed op=%s item=%s status=%s error=%s",
        operation.operation_id,
        operation.item_id,
        result.status,
        result.error,
      )
    if operation.operation_id not in self.pending_ids():
      logger.debug("sync resolved for untracked op=%s", operation.operation_id)
    return result

  def add_operation(self, operation: ReorderOperation) -> None:
    if operation.operation_id in self.pending_ids():
      raise DuplicateOperation(operation.operation_id)
    if len(self._pending) >= self._max_pending:
      evicted = self._pending.popleft()
      logger.warning("pending reorder limit reached; dropped op=%s", evicted.operation_id)
    self._pending.append(operation)

  def complete_operation(self, operation_id: str) -> None:
    self._pending = deque(op for op in self._pending if op.operation_id != operation_id)

  def rollback(self, current_items: Sequence[T], operation: ReorderOperation) -> list[T]:
    idx = next((i for i, it in enumerate(current_items) if it.id == operation.item_id), None)
    if idx is None:
      raise UnknownItem(operation.item_id)
    restored = list(current_items)
    restored[idx] = replace(restored[idx], order_key=operation.old_order_key)
    # Relocate only; the restored key must be kept as is.
    return move(restored, idx, operation.from_index)

  def pending_ids(self) -> list[str]:
    return [op.operation_id for op in self._pending]

  def set_error(self, message: str) -> None:
    self._last_error = message

  def clear_error(self) -> None:
    self._last_error = None

  def get_state(self) -> DragDropState:
    return DragDropState(
      pending_operations=tuple(self._pending),
      is_processing=self._in_flight > 0,
      last_error=self._last_error,
    )

  def reset(self) -> None:
    self._pending = deque()
    self._last_error = None
