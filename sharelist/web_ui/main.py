"""NiceGUI entrypoint for the shared list client."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from nicegui import app, core, ui

from sharelist.adapters.list_mock import ListMock
from sharelist.app.command_runner import CommandRunner
from sharelist.app.controller import AppController
from sharelist.utils.logging import configure_root
from sharelist.viewmodels.list_vm import ListVM
from sharelist.viewmodels.settings_vm import DEFAULT_API_URL, SettingsVM

LOGGER = logging.getLogger(__name__)
REFRESH_INTERVAL_S = 0.1


def _install_theme() -> None:
    """Install global CSS for the list page."""
    ui.add_head_html(
        """
<style>
.sl-page { max-width: 720px; margin: 0 auto; padding: 14px; }
.sl-row { border-bottom: 1px solid #d8e1ee; padding: 4px 0; }
.sl-selected { background: #fff4d6; border-radius: 6px; }
.sl-error { color: #b42318; }
</style>
"""
    )


def _post_to_event_loop(callback: Callable[[], None]) -> None:
    """Run ``callback`` on the NiceGUI event loop (called from worker threads)."""
    loop = core.loop
    if loop is None:
        callback()
        return
    loop.call_soon_threadsafe(callback)


def _shutdown_handler(controller: AppController, runner: CommandRunner) -> Callable[[], None]:
    """Return the callback that stops workers and closes the HTTP session."""

    def shutdown() -> None:
        runner.shutdown(wait=False)
        controller.reset()

    return shutdown


def _build_ui(controller: AppController, runner: CommandRunner) -> None:
    """Register the list page."""

    @ui.page("/")
    def index() -> None:
        vm: ListVM = controller.build_list_vm(dispatch=runner)
        rendered = {"revision": -1}

        def on_input(event) -> None:
            vm.set_input(str(event.value or ""))

        with ui.column().classes("sl-page w-full"):
            ui.label("Shared list").classes("text-h5")
            draft = ui.input("New item", on_change=on_input).classes("w-full")
            draft.on("keydown.enter", lambda _: vm.cmd_add())
            with ui.row().classes("q-gutter-sm"):
                ui.button("Save", on_click=vm.cmd_add, color="primary")
                ui.button("Clear", on_click=vm.cmd_clear, color="negative")
                ui.button("Refresh", on_click=vm.cmd_refresh)

            @ui.refreshable
            def render_status() -> None:
                if vm.error_message:
                    ui.label(vm.error_message).classes("sl-error")
                if vm.busy:
                    ui.spinner(size="sm")

            @ui.refreshable
            def render_items() -> None:
                with ui.column().classes("w-full"):
                    for index, text, selected in vm.rows():
                        row_classes = "sl-row w-full items-center"
                        if selected:
                            row_classes += " sl-selected"
                        with ui.row().classes(row_classes):
                            ui.label(text).classes("col")
                            ui.button(
                                icon="swap_vert",
                                on_click=lambda _, i=index: vm.cmd_swap_intent(i),
                                color="warning" if selected else "primary",
                            ).props("flat dense")
                            ui.button(
                                icon="delete",
                                on_click=lambda _, i=index: vm.cmd_delete(i),
                                color="negative",
                            ).props("flat dense")

            render_status()
            render_items()

        def periodic_refresh() -> None:
            if rendered["revision"] == vm.revision:
                return
            rendered["revision"] = vm.revision
            if draft.value != vm.pending_input:
                draft.value = vm.pending_input
            render_status.refresh()
            render_items.refresh()

        ui.timer(REFRESH_INTERVAL_S, periodic_refresh)
        vm.cmd_refresh()


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the shared list NiceGUI client.")
    parser.add_argument("--api-url", default=DEFAULT_API_URL)
    parser.add_argument("--delete-mode", choices=("index", "value"), default="index")
    parser.add_argument("--timeout", type=int, default=10)
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--offline", action="store_true", help="use an in-memory list instead of the API")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    configure_root(debug=args.debug)
    settings = SettingsVM()
    settings.apply_dict(
        {
            "base_url": args.api_url,
            "delete_mode": args.delete_mode,
            "request_timeout_s": args.timeout,
        }
    )

    port_factory = (lambda _settings: ListMock()) if args.offline else None
    controller = AppController(settings, port_factory=port_factory)
    if args.smoke_test:
        print("web-smoke-ok", sorted(settings.to_dict().keys()))
        return

    LOGGER.info("using list API at %s (delete by %s)", settings.base_url, settings.delete_mode)
    runner = CommandRunner(post=_post_to_event_loop)
    _install_theme()
    _build_ui(controller, runner)
    app.on_shutdown(_shutdown_handler(controller, runner))
    ui.run(
        host=args.host,
        port=args.port,
        title="Shared list",
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
