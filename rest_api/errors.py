"""Typed errors raised by the shared list store and its mutation service.

``rest_api.app`` translates these into HTTP responses in one place, so the
store and service never depend on FastAPI.
"""

from __future__ import annotations

from typing import Optional


class ListError(RuntimeError):
    """Base list error with stable API code/message values."""

    status_code = 400

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = str(code)
        self.message = str(message)

    def to_dict(self) -> dict:
        """Return wire-format error body used by the exception handler."""
        return {"detail": self.message, "code": self.code}


class OutOfRange(ListError):
    """Index is negative or not smaller than the current list length."""

    status_code = 400

    def __init__(self, index: int, length: int) -> None:
        super().__init__(
            "OUT_OF_RANGE",
            f"Index {index} out of range for list of length {length}",
        )
        self.index = index
        self.length = length


class NotFound(ListError):
    """Value-based delete found no matching item."""

    status_code = 404

    def __init__(self, item: str) -> None:
        super().__init__("NOT_FOUND", f"Item not found: {item!r}")
        self.item = item


class EmptyItem(ListError):
    """Add request whose text is blank after trimming."""

    status_code = 422

    def __init__(self) -> None:
        super().__init__("EMPTY_ITEM", "Item text must not be empty")


class DeleteModeMismatch(ListError):
    """Delete request used the variant this deployment does not accept."""

    status_code = 422

    def __init__(self, expected: str, hint: Optional[str] = None) -> None:
        message = f"This server deletes by {expected}"
        if hint:
            message = f"{message}: {hint}"
        super().__init__("DELETE_MODE_MISMATCH", message)
        self.expected = expected


__all__ = ["DeleteModeMismatch", "EmptyItem", "ListError", "NotFound", "OutOfRange"]
