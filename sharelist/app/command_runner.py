"""Background execution of list commands for UI-driven flows.

Use-case calls block on HTTP, so :class:`CommandRunner` runs them on a
``ThreadPoolExecutor``. Each finished outcome is handed back through the
``post`` callable supplied by the UI layer (for NiceGUI, the event loop's
``call_soon_threadsafe``), so view-model state is only touched on the UI
thread. Requests are independent: several can be in flight and their
outcomes are posted in completion order.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..domain.entities import FetchOutcome
from ..domain.ports import UseCaseError
from ..viewmodels.list_vm import Command, run_command

PostFn = Callable[[Callable[[], None]], None]


def _post_inline(callback: Callable[[], None]) -> None:
    callback()


class CommandRunner:
    """Run commands off the UI thread and post outcomes back to it."""

    def __init__(self, post: Optional[PostFn] = None, *, max_workers: int = 4) -> None:
        """Create the worker pool.

        Args:
            post: Function that schedules a zero-argument callback on the UI
                thread. Defaults to calling it on the worker thread.
            max_workers: Thread-pool size.
        """
        self._post = post or _post_inline
        self._pool = ThreadPoolExecutor(
            max_workers=max(1, int(max_workers)), thread_name_prefix="sharelist-cmd"
        )
        self._log = logging.getLogger(__name__)

    def __call__(self, command: Command, done: Callable[[FetchOutcome], None]) -> Future:
        """Submit ``command``; ``done`` receives its outcome on the UI thread."""

        def _work() -> None:
            try:
                outcome = run_command(command)
            except Exception as exc:
                self._log.exception("list command crashed")
                outcome = FetchOutcome.failure(UseCaseError("UNEXPECTED", str(exc) or "Unexpected error."))
            self._post(lambda: done(outcome))

        return self._pool.submit(_work)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)


__all__ = ["CommandRunner", "PostFn"]
