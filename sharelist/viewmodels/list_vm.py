"""View model mirroring the shared list for the list page.

The view model never edits its cached ``items`` in response to a user action.
Every command goes to the server through a use case, and the snapshot that
comes back replaces the cache wholesale. Responses are applied in the order
they arrive, which can differ from the order the commands were issued.

Call context:
    ``sharelist.web_ui.main`` binds widgets to this class and passes a
    ``Dispatch`` built from ``sharelist.app.command_runner.CommandRunner``.
    Tests use the default :func:`run_inline` dispatcher.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from ..domain.entities import FetchOutcome
from ..domain.ports import Items, UseCaseError
from ..usecases.add_item import AddItem
from ..usecases.clear_items import ClearItems
from ..usecases.delete_item import DeleteItem
from ..usecases.fetch_items import FetchItems
from ..usecases.swap_items import SwapItems

Command = Callable[[], Items]
Dispatch = Callable[[Command, Callable[[FetchOutcome], None]], None]


def run_command(command: Command) -> FetchOutcome:
    """Execute one use-case call and wrap its result or error."""
    try:
        return FetchOutcome.success(command())
    except UseCaseError as exc:
        return FetchOutcome.failure(exc)


def run_inline(command: Command, done: Callable[[FetchOutcome], None]) -> None:
    """Synchronous dispatcher: run the command and deliver the outcome now."""
    done(run_command(command))


class ListVM:
    """Client-side state for the shared list: cache, draft text, swap selection."""

    def __init__(
        self,
        *,
        fetch: FetchItems,
        add: AddItem,
        clear: ClearItems,
        delete: DeleteItem,
        swap: SwapItems,
        dispatch: Dispatch = run_inline,
        on_changed: Optional[Callable[["ListVM"], None]] = None,
    ) -> None:
        self._fetch = fetch
        self._add = add
        self._clear = clear
        self._delete = delete
        self._swap = swap
        self._dispatch = dispatch
        self.on_changed = on_changed
        self._log = logging.getLogger(__name__)

        self.items: Tuple[str, ...] = ()
        self.pending_input: str = ""
        self.swap_selection: Optional[int] = None
        self.error: Optional[UseCaseError] = None
        self.in_flight: int = 0
        self.revision: int = 0

    # ---- Events ----
    def on_items_fetched(self, outcome: FetchOutcome) -> None:
        """Replace the cache with a server snapshot, or record the error."""
        if outcome.ok:
            self.items = tuple(outcome.items or ())
            self.error = None
        else:
            self.error = outcome.error
            self._log.warning(
                "list request failed: %s", outcome.error.message if outcome.error else "?"
            )
        self._changed()

    def set_input(self, text: str) -> None:
        self.pending_input = text if text is not None else ""
        self._changed()

    # ---- Commands surfaced to View ----
    def cmd_refresh(self) -> None:
        self._issue(self._fetch)

    def cmd_add(self) -> None:
        text = self.pending_input.strip()
        if not text:
            return
        # Draft is cleared right away, whatever the server answers.
        self.pending_input = ""
        self._changed()
        self._issue(lambda: self._add(text))

    def cmd_clear(self) -> None:
        if not self.items:
            return
        self._issue(self._clear)

    def cmd_delete(self, index: int) -> None:
        cached = list(self.items)
        self._issue(lambda: self._delete(index, cached))

    def cmd_swap_intent(self, index: int) -> None:
        """Two-click swap: select, then cancel (same index) or swap (other index)."""
        selected = self.swap_selection
        if selected is None:
            self.swap_selection = index
            self._changed()
            return
        self.swap_selection = None
        self._changed()
        if selected == index:
            return
        self._issue(lambda: self._swap(selected, index))

    # ---- Read helpers for views ----
    def is_selected(self, index: int) -> bool:
        return self.swap_selection == index

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ""

    @property
    def busy(self) -> bool:
        return self.in_flight > 0

    def rows(self) -> Sequence[Tuple[int, str, bool]]:
        """Return ``(index, text, selected)`` rows for rendering."""
        return [(idx, text, self.is_selected(idx)) for idx, text in enumerate(self.items)]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _issue(self, command: Command) -> None:
        self.in_flight += 1
        self._changed()
        self._dispatch(command, self._complete)

    def _complete(self, outcome: FetchOutcome) -> None:
        self.in_flight = max(0, self.in_flight - 1)
        self.on_items_fetched(outcome)

    def _changed(self) -> None:
        self.revision += 1
        if self.on_changed:
            self.on_changed(self)


__all__ = ["Command", "Dispatch", "ListVM", "run_command", "run_inline"]
