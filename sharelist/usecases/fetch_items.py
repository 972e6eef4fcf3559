from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import Items, ListPort
from .error_mapping import map_api_error


@dataclass
class FetchItems:
    list_port: ListPort

    def __call__(self) -> Items:
        try:
            return self.list_port.list_items()
        except Exception as exc:
            raise map_api_error(exc, default_code="FETCH_FAILED") from exc
