"""Mutation service for the shared list.

Translates decoded requests from ``rest_api.app`` into
:class:`rest_api.storage.OrderedListStore` calls. Every method returns the full
snapshot after the operation (never a delta), which lets clients replace their
cached copy wholesale.

Deletion is either by index or by value, chosen once per deployment through
``delete_mode``. A request for the other variant is rejected rather than
guessed at, because value-based deletion is ambiguous under duplicates (it
always removes the lowest-indexed match).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from rest_api.errors import DeleteModeMismatch, EmptyItem, ListError
from rest_api.storage import OrderedListStore

DELETE_MODES: tuple[str, ...] = ("index", "value")

LOGGER = logging.getLogger(__name__)


def normalize_delete_mode(raw: Optional[str]) -> str:
    """Return a valid delete mode, defaulting to ``index``."""
    text = (raw or "").strip().lower()
    if not text:
        return "index"
    if text not in DELETE_MODES:
        raise ValueError(f"Unknown delete mode '{raw}', expected one of {DELETE_MODES}")
    return text


class ListService:
    """One method per client intent, each wrapping exactly one store call."""

    def __init__(self, store: OrderedListStore, delete_mode: str = "index") -> None:
        self.store = store
        self.delete_mode = normalize_delete_mode(delete_mode)

    def list_items(self) -> List[str]:
        return self.store.snapshot()

    def add(self, item: str) -> List[str]:
        """Append trimmed ``item``.

        Raises:
            EmptyItem: If the text is blank after trimming.
        """
        text = (item or "").strip()
        if not text:
            LOGGER.warning("add rejected: empty item")
            raise EmptyItem()
        items = self.store.append(text)
        LOGGER.info("add %r -> %d items", text, len(items))
        return items

    def clear(self) -> List[str]:
        items = self.store.clear()
        LOGGER.info("clear -> 0 items")
        return items

    def delete(self, *, index: Optional[int] = None, item: Optional[str] = None) -> List[str]:
        """Delete by index or by value depending on :attr:`delete_mode`.

        Raises:
            DeleteModeMismatch: If the request carries the other variant.
            OutOfRange: Index-mode delete with an invalid index.
            NotFound: Value-mode delete with no matching item.
        """
        if self.delete_mode == "index":
            if index is None:
                raise DeleteModeMismatch("index", 'send {"index": <int>}')
            return self._logged("delete", lambda: self.store.remove_at(index), index)
        if item is None:
            raise DeleteModeMismatch("value", 'send {"item": <string>}')
        return self._logged("delete", lambda: self.store.remove_value(item), item)

    def swap(self, indexes: Sequence[int]) -> List[str]:
        """Swap the two positions in ``indexes``.

        Raises:
            OutOfRange: If either index is invalid for the current list.
            ValueError: If ``indexes`` does not hold exactly two entries.
        """
        pair = list(indexes)
        if len(pair) != 2:
            raise ValueError("swap requires exactly two indexes")
        i, j = pair
        return self._logged("swap", lambda: self.store.swap_at(i, j), (i, j))

    def _logged(self, intent, operation, target) -> List[str]:
        try:
            items = operation()
        except ListError as exc:
            LOGGER.warning("%s %r failed: %s", intent, target, exc.message)
            raise
        LOGGER.info("%s %r -> %d items", intent, target, len(items))
        return items


__all__ = ["DELETE_MODES", "ListService", "normalize_delete_mode"]
