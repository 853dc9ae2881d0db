"""Integration smoke tests for REST API (using in-memory UoW via dependency override)."""
from __future__ import annotations

import uuid

import pytest
from fastapi.testclient import TestClient

from card_service.api.deps import get_uow
from card_service.app import create_app
from card_service.domain.value_objects.enums import Role
from tests.conftest import FakeUoW, make_card

CARD_FIELDS = {
    "id", "senderRole", "receiverRole", "cardType", "title",
    "icon", "message", "timestamp", "isRead",
}


@pytest.fixture
def app_with_uow():
    app = create_app()
    uow = FakeUoW()

    async def _override():
        yield uow

    app.dependency_overrides[get_uow] = _override
    return app, uow


@pytest.fixture
def client(app_with_uow):
    app, _ = app_with_uow
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def uow(app_with_uow):
    _, uow = app_with_uow
    return uow


def _send(client, sender="xiaoHuang", **overrides):
    body = {"senderRole": sender, "cardType": "hug", "title": "Hug", "icon": "heart", "message": ""}
    body.update(overrides)
    return client.post("/api/cards", json=body)


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_send_card(client, uow):
    resp = _send(client)

    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == CARD_FIELDS
    assert data["senderRole"] == "xiaoHuang"
    assert data["receiverRole"] == "xiaoZhang"
    assert data["isRead"] is False
    assert uuid.UUID(data["id"]) in uow.cards._store


def test_send_card_without_message(client):
    body = {"senderRole": "xiaoZhang", "cardType": "drink", "title": "Tea", "icon": "cup"}
    resp = client.post("/api/cards", json=body)

    assert resp.status_code == 200
    assert resp.json()["message"] == ""
    assert resp.json()["receiverRole"] == "xiaoHuang"


def test_send_card_null_message(client):
    resp = _send(client, message=None)
    assert resp.status_code == 200
    assert resp.json()["message"] == ""


def test_send_card_unknown_role_rejected(client, uow):
    resp = _send(client, sender="roleC")
    assert resp.status_code == 422
    assert uow.cards._store == {}


def test_send_card_missing_field_rejected(client):
    resp = client.post("/api/cards", json={"senderRole": "xiaoHuang", "cardType": "hug"})
    assert resp.status_code == 422


def test_received_and_unread_listing(client, uow):
    read = make_card(is_read=True)
    uow.add(read)
    _send(client, title="first")
    _send(client, title="second")
    _send(client, sender="xiaoZhang", title="to huang")

    received = client.get("/api/cards/xiaoZhang").json()
    unread = client.get("/api/cards/xiaoZhang/unread").json()

    assert len(received) == 3
    assert all(c["receiverRole"] == "xiaoZhang" for c in received)
    timestamps = [c["timestamp"] for c in received]
    assert timestamps == sorted(timestamps, reverse=True)
    assert {c["title"] for c in unread} == {"first", "second"}
    assert all(c["isRead"] is False for c in unread)


def test_unread_count_and_mark_as_read(client):
    card = _send(client).json()
    assert client.get("/api/cards/xiaoZhang/unread-count").json() == {"count": 1}

    resp = client.put(f"/api/cards/{card['id']}/read")

    assert resp.status_code == 200
    assert resp.json()["isRead"] is True
    assert resp.json()["id"] == card["id"]
    assert client.get("/api/cards/xiaoZhang/unread-count").json() == {"count": 0}


def test_mark_as_read_unknown_id(client, uow):
    existing = make_card()
    uow.add(existing)

    resp = client.put(f"/api/cards/{uuid.uuid4()}/read")

    assert resp.status_code == 404
    assert resp.content == b""
    assert list(uow.cards._store.values()) == [existing]


def test_mark_as_read_malformed_id(client):
    resp = client.put("/api/cards/not-a-card/read")
    assert resp.status_code == 404
    assert resp.content == b""


def test_mark_all_as_read(client, uow):
    uow.add(make_card(), make_card(), make_card(sender_role=Role.XIAO_ZHANG))

    resp = client.put("/api/cards/xiaoZhang/read-all")

    assert resp.status_code == 200
    assert resp.content == b""
    assert client.get("/api/cards/xiaoZhang/unread-count").json() == {"count": 0}
    assert client.get("/api/cards/xiaoHuang/unread-count").json() == {"count": 1}


def test_unknown_role_in_path_rejected(client):
    assert client.get("/api/cards/nobody").status_code == 422
    assert client.put("/api/cards/nobody/read-all").status_code == 422


def test_cors_allows_any_origin(client):
    resp = client.options(
        "/api/cards",
        headers={
            "Origin": "https://example.org",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code == 200
    assert "access-control-allow-origin" in resp.headers


def test_request_id_is_echoed(client):
    resp = client.get("/healthz", headers={"X-Request-ID": "abc123"})
    assert resp.headers["X-Request-ID"] == "abc123"
