from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import pytest
from requests import exceptions as req_exc

from sharelist.adapters.api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiServerError,
    ApiTimeoutError,
)
from sharelist.adapters.list_rest import ListRestAdapter


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = payload if isinstance(payload, str) else json.dumps(payload)

    def json(self) -> Any:
        if isinstance(self._payload, str):
            raise ValueError("not json")
        return self._payload


class _SessionStub:
    """Stands in for ``requests.Session``; replays responses or raises."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def _next(self, method: str, url: str, **kwargs: Any) -> _ResponseStub:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url: str, *, headers=None, timeout=None) -> _ResponseStub:
        return self._next("GET", url, headers=headers, timeout=timeout)

    def post(self, url: str, *, data=None, headers=None, timeout=None) -> _ResponseStub:
        return self._next("POST", url, data=data, headers=headers, timeout=timeout)

    def close(self) -> None:
        pass


def _adapter(responses: Sequence[Any], *, retries: int = 2) -> tuple[ListRestAdapter, _SessionStub]:
    adapter = ListRestAdapter("http://lists.local:8000/", request_timeout_s=5, retries=retries)
    stub = _SessionStub(responses)
    adapter.session.session = stub  # type: ignore[assignment]
    return adapter, stub


def _body(call: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    data = call.get("data")
    return None if data is None else json.loads(data)


def test_list_items_uses_todo_endpoint() -> None:
    adapter, stub = _adapter([_ResponseStub(["This", "Is"])])

    assert adapter.list_items() == ["This", "Is"]
    assert stub.calls[0]["method"] == "GET"
    assert stub.calls[0]["url"] == "http://lists.local:8000/api/todo"
    assert stub.calls[0]["headers"]["Accept"] == "application/json"
    assert stub.calls[0]["timeout"] == 5


def test_add_item_posts_item_body() -> None:
    adapter, stub = _adapter([_ResponseStub(["X"])])

    assert adapter.add_item("X") == ["X"]
    call = stub.calls[0]
    assert call["url"].endswith("/api/new")
    assert _body(call) == {"item": "X"}
    assert call["headers"]["Content-Type"] == "application/json"


def test_clear_uses_get() -> None:
    adapter, stub = _adapter([_ResponseStub([])])

    assert adapter.clear_items() == []
    assert stub.calls[0]["method"] == "GET"
    assert stub.calls[0]["url"].endswith("/api/clear")


def test_delete_variants_send_index_or_item() -> None:
    adapter, stub = _adapter([_ResponseStub(["b"]), _ResponseStub([])])

    adapter.delete_at(0)
    adapter.delete_value("b")

    assert _body(stub.calls[0]) == {"index": 0}
    assert _body(stub.calls[1]) == {"item": "b"}


def test_swap_sends_index_pair() -> None:
    adapter, stub = _adapter([_ResponseStub(["b", "a"])])

    assert adapter.swap(1, 0) == ["b", "a"]
    assert _body(stub.calls[0]) == {"indexes": [1, 0]}


def test_out_of_range_maps_to_client_error() -> None:
    payload = {"detail": "Index 5 out of range for list of length 3", "code": "OUT_OF_RANGE"}
    adapter, _ = _adapter([_ResponseStub(payload, status_code=400)])

    with pytest.raises(ApiClientError) as info:
        adapter.delete_at(5)

    assert info.value.status == 400
    assert info.value.code == "OUT_OF_RANGE"
    assert "out of range" in str(info.value)


def test_server_error_maps_to_server_error() -> None:
    adapter, _ = _adapter([_ResponseStub("boom", status_code=500)])

    with pytest.raises(ApiServerError):
        adapter.list_items()


@pytest.mark.parametrize("payload", [{"items": []}, ["ok", 3], "not json"])
def test_non_list_body_is_a_decode_error(payload: Any) -> None:
    adapter, _ = _adapter([_ResponseStub(payload)])

    with pytest.raises(ApiDecodeError):
        adapter.list_items()


def test_get_retries_on_timeout() -> None:
    adapter, stub = _adapter([req_exc.Timeout(), _ResponseStub(["a"])])

    assert adapter.list_items() == ["a"]
    assert len(stub.calls) == 2


def test_get_gives_up_after_retries() -> None:
    adapter, stub = _adapter([req_exc.ConnectionError()] * 2, retries=1)

    with pytest.raises(ApiTimeoutError):
        adapter.list_items()
    assert len(stub.calls) == 2


def test_post_is_not_retried() -> None:
    adapter, stub = _adapter([req_exc.Timeout(), _ResponseStub(["X"])])

    with pytest.raises(ApiTimeoutError):
        adapter.add_item("X")
    assert len(stub.calls) == 1


def test_adapter_requires_base_url() -> None:
    with pytest.raises(ValueError):
        ListRestAdapter("  ")
