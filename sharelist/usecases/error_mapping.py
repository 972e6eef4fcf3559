"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations


from typing import Optional

from sharelist.adapters.api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    first_string,
)
from sharelist.domain.ports import UseCaseError


def map_api_error(
    exc: Exception,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable UseCaseError codes.

    Args:
        exc: Exception raised by a ``ListPort`` call.
        default_code: Code used for exceptions outside the adapter hierarchy.
        default_message: Message used for those exceptions; falls back to
            ``str(exc)``.

    Returns:
        UseCaseError: Error ready to be shown by the view model.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, ApiTimeoutError):
        return UseCaseError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        detail = first_string(exc.payload)
        if status == 400 or exc.code == "OUT_OF_RANGE":
            return UseCaseError(
                "INDEX_OUT_OF_RANGE",
                _compose_error_message("Item position no longer exists", detail),
            )
        if status == 404:
            return UseCaseError(
                "ITEM_NOT_FOUND", _compose_error_message("Item not found", detail)
            )
        if status == 422:
            return UseCaseError(
                "INVALID_REQUEST", _compose_error_message("Invalid request", detail)
            )
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return UseCaseError("REQUEST_FAILED", _compose_error_message(label, detail))
    if isinstance(exc, ApiServerError):
        return UseCaseError("SERVER_ERROR", "Server error, try again.")
    if isinstance(exc, ApiDecodeError):
        return UseCaseError("BAD_RESPONSE", str(exc))
    if isinstance(exc, ApiError):
        return UseCaseError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return UseCaseError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
