from gantt.ordering.errors import DuplicateOperation, InvalidRange, ReorderError, UnknownItem, UnsupportedScope
from gantt.ordering.keys import (
  ORDER_GAP,
  OrderItem,
  append_key,
  compute_new_key,
  items_from_records,
  move,
  records_from_items,
  reorder,
  validate,
)
from gantt.ordering.results import SyncFailure, SyncResult, SyncSuccess
from gantt.ordering.state import (
  MAX_PENDING_OPERATIONS,
  DragDropState,
  DragDropStateManager,
  ReorderOperation,
  ScopeKind,
  SyncHandler,
)

__all__ = [
  "DragDropState",
  "DragDropStateManager",
  "DuplicateOperation",
  "InvalidRange",
  "MAX_PENDING_OPERATIONS",
  "ORDER_GAP",
  "OrderItem",
  "ReorderError",
  "ReorderOperation",
  "ScopeKind",
  "SyncFailure",
  "SyncHandler",
  "SyncResult",
  "SyncSuccess",
  "UnknownItem",
  "UnsupportedScope",
  "append_key",
  "compute_new_key",
  "items_from_records",
  "move",
  "records_from_items",
  "reorder",
  "validate",
]
