from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List

from sharelist.domain.ports import Item, Items, ListPort

from .api_errors import ApiClientError


@dataclass
class ListMock(ListPort):
    """Offline substitute for ``ListRestAdapter`` with the server's semantics.

    Bad indices and missing values raise ``ApiClientError`` with the same
    status codes and error codes the REST API returns.
    """

    items: List[str] = field(default_factory=lambda: ["This", "Is", "Working!"])

    def __post_init__(self) -> None:
        self.items = list(self.items)
        self._lock = threading.Lock()
        self.calls: List[str] = []

    # ---------- ListPort ----------

    def list_items(self) -> Items:
        with self._lock:
            self.calls.append("list")
            return list(self.items)

    def add_item(self, item: Item) -> Items:
        with self._lock:
            self.calls.append("add")
            self.items.append(item)
            return list(self.items)

    def clear_items(self) -> Items:
        with self._lock:
            self.calls.append("clear")
            self.items.clear()
            return []

    def delete_at(self, index: int) -> Items:
        with self._lock:
            self.calls.append("delete")
            self._check(index)
            del self.items[index]
            return list(self.items)

    def delete_value(self, item: Item) -> Items:
        with self._lock:
            self.calls.append("delete")
            if item not in self.items:
                raise ApiClientError(
                    f"delete: Item not found: {item!r} (HTTP 404)",
                    status=404,
                    code="NOT_FOUND",
                    context="delete",
                )
            self.items.remove(item)
            return list(self.items)

    def swap(self, i: int, j: int) -> Items:
        with self._lock:
            self.calls.append("swap")
            self._check(i)
            self._check(j)
            self.items[i], self.items[j] = self.items[j], self.items[i]
            return list(self.items)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise ApiClientError(
                f"Index {index} out of range for list of length {len(self.items)} (HTTP 400)",
                status=400,
                code="OUT_OF_RANGE",
                context="mock",
            )


__all__ = ["ListMock"]
