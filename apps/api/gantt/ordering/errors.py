from __future__ import annotations


class ReorderError(RuntimeError):
  def __init__(self, message: str) -> None:
    super().__init__(message)
    self.message = message


class InvalidRange(ReorderError):
  def __init__(self, *, from_index: int, to_index: int, length: int) -> None:
    super().__init__(f"Invalid index range: from={from_index} to={to_index} for {length} items")
    self.from_index = from_index
    self.to_index = to_index
    self.length = length


class DuplicateOperation(ReorderError):
  def __init__(self, operation_id: str) -> None:
    super().__init__(f"Operation already exists: {operation_id}")
    self.operation_id = operation_id


class UnknownItem(ReorderError):
  def __init__(self, item_id: int | str) -> None:
    super().__init__(f"Item not found in sequence: {item_id}")
    self.item_id = item_id


class UnsupportedScope(ReorderError):
  def __init__(self, scope_kind: str) -> None:
    super().__init__(f"No sync handler registered for scope: {scope_kind}")
    self.scope_kind = scope_kind
