"""Value objects shared by use cases and view models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Tuple

from .ports import UseCaseError

DeleteMode = Literal["index", "value"]
DELETE_MODES: Tuple[str, ...] = ("index", "value")


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one round trip: the server snapshot or the error it produced."""

    items: Optional[Tuple[str, ...]] = None
    error: Optional[UseCaseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.items is not None

    @classmethod
    def success(cls, items: List[str]) -> "FetchOutcome":
        return cls(items=tuple(items))

    @classmethod
    def failure(cls, error: UseCaseError) -> "FetchOutcome":
        return cls(error=error)


def normalize_items(payload: Any) -> List[str]:
    """Validate a decoded response body as a list snapshot.

    Raises:
        ValueError: If the payload is not a JSON array of strings.
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected list response, got {type(payload).__name__}")
    items: List[str] = []
    for entry in payload:
        if not isinstance(entry, str):
            raise ValueError(f"expected string items, got {type(entry).__name__}")
        items.append(entry)
    return items


def normalize_delete_mode(raw: Any) -> DeleteMode:
    text = str(raw or "").strip().lower() or "index"
    if text not in DELETE_MODES:
        raise ValueError(f"delete_mode must be one of {DELETE_MODES}, got '{raw}'")
    return text  # type: ignore[return-value]
