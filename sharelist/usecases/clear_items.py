from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import Items, ListPort
from .error_mapping import map_api_error


@dataclass
class ClearItems:
    list_port: ListPort

    def __call__(self) -> Items:
        try:
            return self.list_port.clear_items()
        except Exception as exc:
            raise map_api_error(exc, default_code="CLEAR_FAILED") from exc
