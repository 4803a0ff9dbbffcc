"""
Gap-based ordering keys.

Siblings are sorted ascending by `order_key`. Moving one item assigns it a
single new key between its new neighbours (or beyond the ends of the list),
so no other sibling is ever rewritten.

Notes:
- Keys are not renormalized. Repeated inserts into the same gap halve it each
  time, so float keys lose precision after roughly fifty such inserts.
  `Fraction` keys work unchanged when that matters.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Any, TypeVar, Union

from gantt.ordering.errors import InvalidRange

ORDER_GAP = 1000

OrderKey = Union[float, int, Fraction]
ItemId = Union[int, str]


@dataclass(frozen=True)
class OrderItem:
  id: ItemId
  order_key: OrderKey


T = TypeVar("T", bound=OrderItem)


def check_indices(items: Sequence[Any], from_index: int, to_index: int) -> None:
  n = len(items)
  if not (0 <= from_index < n and 0 <= to_index < n):
    raise InvalidRange(from_index=from_index, to_index=to_index, length=n)


def compute_new_key(items: Sequence[OrderItem], target_index: int, source_index: int, *, gap: OrderKey = ORDER_GAP) -> OrderKey:
  check_indices(items, source_index, target_index)
  if target_index == source_index:
    return items[source_index].order_key

  last = len(items) - 1
  if target_index == 0:
    # First remaining item; the moving item itself never counts as a neighbour.
    head = 1 if source_index == 0 else 0
    first_key = items[head].order_key if head <= last else gap
    if first_key <= 0:
      # Halving only moves a key towards the front while it is positive.
      return first_key - gap
    return first_key / 2

  if target_index >= last:
    tail = last - 1 if source_index == last else last
    last_key = items[tail].order_key if tail >= 0 else 0
    return last_key + gap

  if source_index < target_index:
    prev_key = items[target_index].order_key
    next_key = items[target_index + 1].order_key if target_index + 1 <= last else prev_key + gap
  else:
    prev_key = items[target_index - 1].order_key
    next_key = items[target_index].order_key
  return (prev_key + next_key) / 2


def move(items: Sequence[T], from_index: int, to_index: int) -> list[T]:
  check_indices(items, from_index, to_index)
  out = list(items)
  moved = out.pop(from_index)
  out.insert(to_index, moved)
  return out


def reorder(items: Sequence[T], from_index: int, to_index: int, *, gap: OrderKey = ORDER_GAP) -> list[T]:
  check_indices(items, from_index, to_index)
  if from_index == to_index:
    return list(items)
  new_key = compute_new_key(items, to_index, from_index, gap=gap)
  out = list(items)
  out[from_index] = replace(out[from_index], order_key=new_key)
  return move(out, from_index, to_index)


def validate(items: Sequence[OrderItem]) -> bool:
  if not items:
    return True
  keys = [i.order_key for i in items]
  if len(set(keys)) != len(keys):
    return False
  return all(prev < cur for prev, cur in zip(keys, keys[1:]))


def append_key(items: Iterable[OrderItem], *, gap: OrderKey = ORDER_GAP) -> OrderKey:
  keys = [i.order_key for i in items]
  if not keys:
    return gap
  return max(keys) + gap


def items_from_records(records: Iterable[Mapping[str, Any]], *, key_field: str = "display_order") -> list[OrderItem]:
  return [OrderItem(id=r["id"], order_key=r[key_field]) for r in records]


def records_from_items(
  items: Sequence[OrderItem],
  records: Iterable[Mapping[str, Any]],
  *,
  key_field: str = "display_order",
) -> list[dict[str, Any]]:
  """
  Rebuild wire records in `items` order, copying each item's key back into `key_field`.
  """
  by_id = {r["id"]: r for r in records}
  return [{**by_id[i.id], key_field: i.order_key} for i in items]
