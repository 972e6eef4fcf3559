from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from rest_api import app as app_module


@pytest.fixture
def client(monkeypatch):
    app_module.STORE.reset(["This", "Is", "Working!"])
    monkeypatch.setattr(app_module.SERVICE, "delete_mode", "index")
    with TestClient(app_module.app) as test_client:
        yield test_client
    app_module.STORE.reset(app_module.SEED_ITEMS)


def test_get_items_returns_seeded_list(client):
    response = client.get("/api/todo")

    assert response.status_code == 200
    assert response.json() == ["This", "Is", "Working!"]


def test_scenario_add_delete_swap_clear(client):
    response = client.post("/api/new", json={"item": "X"})
    assert response.status_code == 200
    assert response.json() == ["This", "Is", "Working!", "X"]

    response = client.post("/api/delete", json={"index": 1})
    assert response.json() == ["This", "Working!", "X"]

    response = client.post("/api/swap", json={"indexes": [0, 2]})
    assert response.json() == ["X", "Working!", "This"]

    response = client.get("/api/clear")
    assert response.status_code == 200
    assert response.json() == []

    assert client.get("/api/clear").json() == []


def test_delete_out_of_range_keeps_list(client):
    response = client.post("/api/delete", json={"index": 5})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "OUT_OF_RANGE"
    assert client.get("/api/todo").json() == ["This", "Is", "Working!"]


def test_negative_index_is_out_of_range(client):
    response = client.post("/api/delete", json={"index": -1})

    assert response.status_code == 400
    assert len(client.get("/api/todo").json()) == 3


def test_swap_out_of_range(client):
    response = client.post("/api/swap", json={"indexes": [0, 3]})

    assert response.status_code == 400
    assert client.get("/api/todo").json() == ["This", "Is", "Working!"]


@pytest.mark.parametrize("indexes", [[0], [0, 1, 2], []])
def test_swap_requires_exactly_two_indexes(client, indexes):
    response = client.post("/api/swap", json={"indexes": indexes})

    assert response.status_code == 422


@pytest.mark.parametrize("index", [True, "1", 1.0, None])
def test_delete_index_must_be_a_json_integer(client, index):
    response = client.post("/api/delete", json={"index": index})

    assert response.status_code == 422
    assert client.get("/api/todo").json() == ["This", "Is", "Working!"]


@pytest.mark.parametrize("indexes", [[True, 0], ["0", "2"], [0, 2.0]])
def test_swap_indexes_must_be_json_integers(client, indexes):
    response = client.post("/api/swap", json={"indexes": indexes})

    assert response.status_code == 422
    assert client.get("/api/todo").json() == ["This", "Is", "Working!"]


def test_self_swap_returns_unchanged_list(client):
    response = client.post("/api/swap", json={"indexes": [1, 1]})

    assert response.status_code == 200
    assert response.json() == ["This", "Is", "Working!"]


def test_new_item_is_trimmed_and_blank_rejected(client):
    assert client.post("/api/new", json={"item": "  padded  "}).json()[-1] == "padded"

    response = client.post("/api/new", json={"item": "   "})
    assert response.status_code == 422
    assert response.json()["code"] == "EMPTY_ITEM"


def test_index_mode_rejects_value_delete(client):
    response = client.post("/api/delete", json={"item": "Is"})

    assert response.status_code == 422
    assert response.json()["code"] == "DELETE_MODE_MISMATCH"
    assert client.get("/api/todo").json() == ["This", "Is", "Working!"]


def test_value_mode_delete(client, monkeypatch):
    monkeypatch.setattr(app_module.SERVICE, "delete_mode", "value")
    client.post("/api/new", json={"item": "Is"})

    response = client.post("/api/delete", json={"item": "Is"})
    assert response.status_code == 200
    assert response.json() == ["This", "Working!", "Is"]

    missing = client.post("/api/delete", json={"item": "absent"})
    assert missing.status_code == 404
    assert missing.json()["code"] == "NOT_FOUND"


def test_health_reports_count_and_mode(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True, "items": 3, "delete_mode": "index"}


def test_root_page_serves_index_html(client, monkeypatch, tmp_path):
    page = tmp_path / "index.html"
    page.write_text("<html><body>list</body></html>", encoding="utf-8")
    monkeypatch.setattr(app_module, "INDEX_HTML", page)

    response = client.get("/")

    assert response.status_code == 200
    assert "list" in response.text


def test_root_page_missing_returns_404(client, monkeypatch, tmp_path):
    monkeypatch.setattr(app_module, "INDEX_HTML", tmp_path / "missing.html")

    assert client.get("/").status_code == 404


def test_concurrent_posts_all_land(client):
    app_module.STORE.reset([])
    payloads = [f"item-{n}" for n in range(40)]

    def post(item):
        return client.post("/api/new", json={"item": item}).status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(post, payloads))

    assert statuses == [200] * len(payloads)
    assert sorted(client.get("/api/todo").json()) == sorted(payloads)
