"""Adapter and use-case wiring for the list client runtime.

This module owns lazy construction of the REST adapter and the use-case
objects that depend on values in
:class:`sharelist.viewmodels.settings_vm.SettingsVM`, and assembles the
:class:`sharelist.viewmodels.list_vm.ListVM` the page binds to.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..adapters.list_rest import ListRestAdapter
from ..domain.ports import ListPort
from ..usecases.add_item import AddItem
from ..usecases.clear_items import ClearItems
from ..usecases.delete_item import DeleteItem
from ..usecases.fetch_items import FetchItems
from ..usecases.swap_items import SwapItems
from ..viewmodels.list_vm import Dispatch, ListVM, run_inline
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache the list adapter and use cases from settings state.

    Call chain:
        ``sharelist.web_ui.main`` creates one instance per process and calls
        :meth:`build_list_vm` for each page visit.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        port_factory: Optional[Callable[[SettingsVM], ListPort]] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings holding base URL, timeout, retries and the
                delete mode the server is deployed with.
            port_factory: Optional override used to build the ``ListPort``
                (tests and offline mode pass ``ListMock``).
        """
        self.settings_vm = settings_vm
        self._port_factory = port_factory or _rest_port
        self._list_port: Optional[ListPort] = None
        self.uc_fetch: Optional[FetchItems] = None
        self.uc_add: Optional[AddItem] = None
        self.uc_clear: Optional[ClearItems] = None
        self.uc_delete: Optional[DeleteItem] = None
        self.uc_swap: Optional[SwapItems] = None

    @property
    def list_port(self) -> Optional[ListPort]:
        return self._list_port

    def reset(self) -> None:
        """Drop cached adapter and use cases so settings changes take effect."""
        closer = getattr(self._list_port, "close", None)
        if callable(closer):
            closer()
        self._list_port = None
        self.uc_fetch = None
        self.uc_add = None
        self.uc_clear = None
        self.uc_delete = None
        self.uc_swap = None

    def ensure_ready(self) -> bool:
        """Ensure adapter/use cases exist.

        Returns:
            ``False`` when the settings are not valid enough to build an
            adapter, ``True`` otherwise.
        """
        if self._list_port is not None:
            return True
        if not self.settings_vm.is_valid():
            return False
        port = self._port_factory(self.settings_vm)
        self._list_port = port
        self.uc_fetch = FetchItems(port)
        self.uc_add = AddItem(port)
        self.uc_clear = ClearItems(port)
        self.uc_delete = DeleteItem(port, mode=self.settings_vm.delete_mode)
        self.uc_swap = SwapItems(port)
        return True

    def build_list_vm(self, dispatch: Dispatch = run_inline) -> ListVM:
        """Return a fresh view model bound to the cached use cases.

        Raises:
            ValueError: If the settings cannot produce an adapter.
        """
        if not self.ensure_ready():
            raise ValueError("Settings invalid: a http(s) base URL is required")
        return ListVM(
            fetch=self.uc_fetch,
            add=self.uc_add,
            clear=self.uc_clear,
            delete=self.uc_delete,
            swap=self.uc_swap,
            dispatch=dispatch,
        )


def _rest_port(settings_vm: SettingsVM) -> ListPort:
    return ListRestAdapter(
        settings_vm.base_url,
        request_timeout_s=settings_vm.request_timeout_s,
        retries=settings_vm.retries,
    )
