from __future__ import annotations

import pytest

from sharelist.adapters.api_errors import (
    ApiClientError,
    ApiDecodeError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
)
from sharelist.domain.ports import UseCaseError
from sharelist.usecases.error_mapping import map_api_error


def test_out_of_range_uses_server_detail():
    err = ApiClientError(
        "delete[5]: Index 5 out of range (HTTP 400)",
        status=400,
        code="OUT_OF_RANGE",
        payload={"detail": "Index 5 out of range for list of length 3", "code": "OUT_OF_RANGE"},
    )

    mapped = map_api_error(err, default_code="DELETE_FAILED")

    assert mapped.code == "INDEX_OUT_OF_RANGE"
    assert mapped.message == (
        "Item position no longer exists: Index 5 out of range for list of length 3"
    )


def test_not_found_without_payload():
    err = ApiClientError("delete: HTTP 404", status=404)

    mapped = map_api_error(err, default_code="DELETE_FAILED")

    assert mapped.code == "ITEM_NOT_FOUND"
    assert mapped.message == "Item not found."


def test_validation_error_reads_fastapi_detail_list():
    payload = {"detail": [{"loc": ["body", "indexes"], "msg": "List should have at least 2 items"}]}
    err = ApiClientError("swap: HTTP 422", status=422, payload=payload)

    mapped = map_api_error(err, default_code="SWAP_FAILED")

    assert mapped.code == "INVALID_REQUEST"
    assert mapped.message.endswith("List should have at least 2 items")


@pytest.mark.parametrize(
    "exc, code",
    [
        (ApiTimeoutError("timeout"), "REQUEST_TIMEOUT"),
        (ApiServerError("boom", status=500), "SERVER_ERROR"),
        (ApiDecodeError("bad body"), "BAD_RESPONSE"),
        (ApiError("odd"), "API_ERROR"),
        (ApiClientError("teapot", status=418), "REQUEST_FAILED"),
        (RuntimeError("other"), "FALLBACK"),
    ],
)
def test_error_codes(exc, code):
    assert map_api_error(exc, default_code="FALLBACK").code == code


def test_use_case_errors_pass_through():
    original = UseCaseError("EMPTY_ITEM", "Enter some text first.")

    assert map_api_error(original, default_code="X") is original
