from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import Items, ListPort
from .error_mapping import map_api_error


@dataclass
class SwapItems:
    list_port: ListPort

    def __call__(self, i: int, j: int) -> Items:
        try:
            return self.list_port.swap(i, j)
        except Exception as exc:
            raise map_api_error(exc, default_code="SWAP_FAILED") from exc
