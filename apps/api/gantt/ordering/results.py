from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Union


@dataclass(frozen=True)
class SyncSuccess:
  data: Any
  success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class SyncFailure:
  error: str
  status: int | None = None
  success: Literal[False] = field(default=False, init=False)


SyncResult = Union[SyncSuccess, SyncFailure]
