import pytest

from app.core.exceptions import NotFoundError
from app.services import events as events_service

pytestmark = pytest.mark.asyncio


async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers["X-Request-ID"]


async def test_search_rejects_unknown_sort_column(client):
    r = await client.post(
        "/v1/events/search",
        json={"paginationConditions": {"sort_by": "password"}},
        headers={"X-Request-ID": "req-1"},
    )
    assert r.status_code == 422
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["request_id"] == "req-1"


async def test_create_requires_fields(client):
    r = await client.post("/v1/events", json={"name": "Signup"})
    assert r.status_code == 422


async def test_search_scopes_to_header_project(client, monkeypatch):
    seen = {}

    async def fake_list_events(req):
        seen["req"] = req
        return []

    monkeypatch.setattr(events_service, "list_events", fake_list_events)
    r = await client.post(
        "/v1/events/search",
        json={"eventType": "payment", "paginationConditions": {"limit": 5}},
        headers={"X-Project": "acme"},
    )
    assert r.status_code == 200
    assert r.json() == {"items": [], "limit": 5, "offset": None}
    assert seen["req"].projects == ["acme"]
    assert seen["req"].event_type == "payment"


async def test_search_falls_back_to_default_project(client, monkeypatch):
    seen = {}

    async def fake_list_events(req):
        seen["req"] = req
        return []

    monkeypatch.setattr(events_service, "list_events", fake_list_events)
    r = await client.post("/v1/events/search", json={})
    assert r.status_code == 200
    assert seen["req"].projects == ["test-project"]


async def test_app_error_rendering(client, monkeypatch):
    async def missing(project, event_id, body):
        raise NotFoundError("Event not found")

    monkeypatch.setattr(events_service, "update_event", missing)
    r = await client.patch("/v1/events/99", json={"name": "x"})
    assert r.status_code == 404
    assert r.json()["error"] == {"message": "Event not found", "code": "NOT_FOUND", "details": {}}
