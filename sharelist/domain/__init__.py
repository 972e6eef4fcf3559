"""Domain package exports for value objects and ports."""

from .entities import (
    DELETE_MODES,
    DeleteMode,
    FetchOutcome,
    normalize_delete_mode,
    normalize_items,
)
from .ports import Item, Items, ListPort, UseCaseError

__all__ = [
    "DELETE_MODES",
    "DeleteMode",
    "FetchOutcome",
    "Item",
    "Items",
    "ListPort",
    "UseCaseError",
    "normalize_delete_mode",
    "normalize_items",
]
