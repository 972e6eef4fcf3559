from __future__ import annotations

import pytest

from sharelist.adapters.api_errors import ApiTimeoutError
from sharelist.adapters.list_mock import ListMock
from sharelist.domain.ports import UseCaseError
from sharelist.usecases.add_item import AddItem
from sharelist.usecases.clear_items import ClearItems
from sharelist.usecases.delete_item import DeleteItem
from sharelist.usecases.fetch_items import FetchItems
from sharelist.usecases.swap_items import SwapItems


class _TimeoutPort:
    def list_items(self):
        raise ApiTimeoutError("Timeout contacting http://x/api/todo")


def test_fetch_returns_snapshot():
    assert FetchItems(ListMock())() == ["This", "Is", "Working!"]


def test_fetch_maps_transport_failure():
    with pytest.raises(UseCaseError) as info:
        FetchItems(_TimeoutPort())()
    assert info.value.code == "REQUEST_TIMEOUT"


def test_add_trims_before_sending():
    port = ListMock(items=[])

    assert AddItem(port)("  milk ") == ["milk"]


def test_add_blank_never_reaches_port():
    port = ListMock(items=[])

    with pytest.raises(UseCaseError) as info:
        AddItem(port)("   ")
    assert info.value.code == "EMPTY_ITEM"
    assert port.calls == []


def test_clear_empties_list():
    assert ClearItems(ListMock())() == []


def test_delete_by_index_out_of_range():
    port = ListMock()

    with pytest.raises(UseCaseError) as info:
        DeleteItem(port)(5)
    assert info.value.code == "INDEX_OUT_OF_RANGE"
    assert port.items == ["This", "Is", "Working!"]


def test_delete_by_value_sends_cached_text():
    port = ListMock(items=["a", "b", "a"])
    cached = ["b", "a", "a"]

    result = DeleteItem(port, mode="value")(1, cached)

    assert result == ["b", "a"]


def test_delete_by_value_needs_cached_position():
    port = ListMock()

    with pytest.raises(UseCaseError) as info:
        DeleteItem(port, mode="value")(4, ["only"])
    assert info.value.code == "INDEX_OUT_OF_RANGE"
    assert port.calls == []


def test_delete_by_value_missing_item():
    port = ListMock(items=["a"])

    with pytest.raises(UseCaseError) as info:
        DeleteItem(port, mode="value")(0, ["gone"])
    assert info.value.code == "ITEM_NOT_FOUND"


def test_swap_and_swap_back_is_identity():
    port = ListMock()
    swap = SwapItems(port)

    swap(0, 2)
    assert swap(0, 2) == ["This", "Is", "Working!"]
