from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

from ..domain.entities import DeleteMode
from ..domain.ports import Items, ListPort, UseCaseError
from .error_mapping import map_api_error


@dataclass
class DeleteItem:
    """Delete one entry using the variant the server is deployed with.

    In ``value`` mode the text at ``index`` in the caller's cached list is
    sent, and the server removes its lowest-index match.
    """

    list_port: ListPort
    mode: DeleteMode = "index"

    def __call__(self, index: int, cached: Optional[Sequence[str]] = None) -> Items:
        try:
            if self.mode == "value":
                return self.list_port.delete_value(_value_at(cached, index))
            return self.list_port.delete_at(index)
        except UseCaseError:
            raise
        except Exception as exc:
            raise map_api_error(exc, default_code="DELETE_FAILED") from exc


def _value_at(cached: Optional[Sequence[str]], index: int) -> str:
    items = list(cached or [])
    if not 0 <= index < len(items):
        raise UseCaseError("INDEX_OUT_OF_RANGE", f"No item at position {index}.")
    return items[index]
