from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import Items, ListPort, UseCaseError
from .error_mapping import map_api_error


@dataclass
class AddItem:
    list_port: ListPort

    def __call__(self, text: str) -> Items:
        """Append trimmed ``text``; blank input never reaches the port."""
        item = (text or "").strip()
        if not item:
            raise UseCaseError("EMPTY_ITEM", "Enter some text first.")
        try:
            return self.list_port.add_item(item)
        except Exception as exc:
            raise map_api_error(exc, default_code="ADD_FAILED") from exc
