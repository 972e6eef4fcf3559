"""In-memory ordered list store for the REST API.

This module owns the one authoritative sequence of list items. `rest_api.app`
creates a single :class:`OrderedListStore` at import time and every request
handler goes through it.

FastAPI executes the sync endpoints on a worker thread pool, so handlers run
in parallel. Each operation below holds :attr:`OrderedListStore._lock` for its
whole duration: bounds checks and the mutation that depends on them happen in
the same critical section, and callers only ever receive copies.
"""

import threading
from typing import Iterable, List, Optional

from rest_api.errors import NotFound, OutOfRange


class OrderedListStore:
    """Thread-safe, 0-indexed list of text items.

    Parameters
    ----------
    initial : Optional[Iterable[str]]
        Items to seed the list with. Copied; the caller keeps no reference.
    """

    def __init__(self, initial: Optional[Iterable[str]] = None) -> None:
        self._lock = threading.Lock()
        self._items: List[str] = [str(item) for item in (initial or [])]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def snapshot(self) -> List[str]:
        """Return a copy of the current sequence.

        Returns
        -------
        List[str]
            Fresh list; mutating it does not affect the store.
        """
        with self._lock:
            return list(self._items)

    def append(self, value: str) -> List[str]:
        """Append ``value`` at the end and return the new snapshot."""
        with self._lock:
            self._items.append(value)
            return list(self._items)

    def clear(self) -> List[str]:
        """Remove every item. Clearing an empty list is a no-op."""
        with self._lock:
            self._items.clear()
            return []

    def remove_at(self, index: int) -> List[str]:
        """Remove the item at ``index``; later items shift left by one.

        Parameters
        ----------
        index : int
            Position to remove.

        Returns
        -------
        List[str]
            Snapshot after the removal.

        Raises
        ------
        OutOfRange
            If ``index`` is negative or ``>= len``. The list is unchanged.
        """
        with self._lock:
            self._check_index_unlocked(index)
            del self._items[index]
            return list(self._items)

    def remove_value(self, value: str) -> List[str]:
        """Remove the lowest-indexed item equal to ``value``.

        Raises
        ------
        NotFound
            If no item equals ``value``. The list is unchanged.
        """
        with self._lock:
            try:
                position = self._items.index(value)
            except ValueError:
                raise NotFound(value) from None
            del self._items[position]
            return list(self._items)

    def swap_at(self, i: int, j: int) -> List[str]:
        """Exchange the items at ``i`` and ``j``.

        Swapping an index with itself succeeds without changing the list.

        Raises
        ------
        OutOfRange
            If either index is invalid. The list is unchanged.
        """
        with self._lock:
            self._check_index_unlocked(i)
            self._check_index_unlocked(j)
            if i != j:
                self._items[i], self._items[j] = self._items[j], self._items[i]
            return list(self._items)

    def reset(self, items: Iterable[str]) -> List[str]:
        """Replace the whole sequence; test fixtures use it to restore the seed."""
        with self._lock:
            self._items = [str(item) for item in items]
            return list(self._items)

    def _check_index_unlocked(self, index: int) -> None:
        # Negative indices would wrap around in Python lists.
        length = len(self._items)
        if isinstance(index, bool) or not isinstance(index, int):
            raise OutOfRange(index, length)
        if index < 0 or index >= length:
            raise OutOfRange(index, length)


__all__ = ["OrderedListStore"]
