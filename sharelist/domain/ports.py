from __future__ import annotations
from typing import List, Protocol

Item = str
Items = List[Item]


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class ListPort(Protocol):
    """Read and mutate the shared list. Every call returns the full snapshot."""

    def list_items(self) -> Items: ...
    def add_item(self, item: Item) -> Items: ...
    def clear_items(self) -> Items: ...
    def delete_at(self, index: int) -> Items: ...
    def delete_value(self, item: Item) -> Items: ...  # lowest-index match
    def swap(self, i: int, j: int) -> Items: ...
