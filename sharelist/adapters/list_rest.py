from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from sharelist.domain.entities import normalize_items
from sharelist.domain.ports import Item, Items, ListPort

from .api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_code,
    parse_error_payload,
)
from .http_client import HttpConfig, RetryingSession


class ListRestAdapter(ListPort):
    """REST adapter for the shared list endpoints under ``/api``."""

    def __init__(
        self,
        base_url: str,
        *,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        cleaned = (base_url or "").strip()
        if not cleaned:
            raise ValueError("ListRestAdapter requires a base URL")
        self.base_url = cleaned.rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(self.cfg)
        self._log = logging.getLogger(__name__)

    # ---------- ListPort ----------

    def list_items(self) -> Items:
        return self._get("/api/todo", "list")

    def add_item(self, item: Item) -> Items:
        return self._post("/api/new", {"item": item}, "add")

    def clear_items(self) -> Items:
        return self._get("/api/clear", "clear")

    def delete_at(self, index: int) -> Items:
        return self._post("/api/delete", {"index": int(index)}, f"delete[{index}]")

    def delete_value(self, item: Item) -> Items:
        return self._post("/api/delete", {"item": item}, "delete")

    def swap(self, i: int, j: int) -> Items:
        return self._post("/api/swap", {"indexes": [int(i), int(j)]}, f"swap[{i},{j}]")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _make_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get(self, path: str, ctx: str) -> List[str]:
        resp = self.session.get(self._make_url(path))
        return self._snapshot(resp, ctx)

    def _post(self, path: str, body: Dict[str, Any], ctx: str) -> List[str]:
        resp = self.session.post(self._make_url(path), json_body=body)
        return self._snapshot(resp, ctx)

    def _snapshot(self, resp: requests.Response, ctx: str) -> List[str]:
        self._ensure_ok(resp, ctx)
        try:
            payload = resp.json()
        except Exception:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiDecodeError(f"{ctx}: invalid JSON response: {snippet}", context=ctx)
        try:
            items = normalize_items(payload)
        except ValueError as exc:
            raise ApiDecodeError(f"{ctx}: {exc}", payload=payload, context=ctx) from exc
        self._log.debug("%s -> %d items", ctx, len(items))
        return items

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        code: Optional[str] = extract_error_code(payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message, status=status, code=code, payload=payload, context=ctx
            )
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, payload=payload, context=ctx)
        raise ApiError(message, status=status, payload=payload, context=ctx)

    def close(self) -> None:
        self.session.close()


__all__ = ["ListRestAdapter"]
