"""Entity filters composed with pagination conditions, run on the in-memory backend."""

from datetime import datetime, timedelta

import pytest
from pydantic import BaseModel

from app.core.pagination import PaginationConditions
from app.db.memory import MemoryQuery
from app.schemas.requests import (
    GetCampaignsRequest,
    GetEventLogRequest,
    GetEventsRequest,
    GetRefereeRequest,
    GetRewardRequest,
    UpdateEventRequest,
)
from app.services.campaigns import build_campaigns_query
from app.services.documents import apply_update
from app.services.event_logs import build_event_logs_query
from app.services.events import build_events_query
from app.services.referees import build_referees_query
from app.services.referrers import generate_code
from app.services.rewards import build_rewards_query

pytestmark = pytest.mark.asyncio

T0 = datetime(2024, 3, 1)


def _event(id, project, key, event_type="simple"):
    return {
        "id": id,
        "project": project,
        "key": key,
        "name": key.title(),
        "event_type": event_type,
        "created_at": T0 + timedelta(days=id),
        "updated_at": T0 + timedelta(days=id),
    }


EVENTS = [
    _event(1, "alpha", "signup"),
    _event(2, "alpha", "purchase", "payment"),
    _event(3, "beta", "signup"),
    _event(4, "alpha", "renewal", "payment"),
    _event(5, "gamma", "purchase", "payment"),
]


async def test_events_filtered_by_projects_and_type():
    req = GetEventsRequest(projects=["alpha", "gamma"], event_type="payment")
    out = await build_events_query(req, MemoryQuery(EVENTS)).to_list()
    assert [e["id"] for e in out] == [5, 4, 2]


async def test_events_filters_combine_with_pagination():
    req = GetEventsRequest(
        projects=["alpha"],
        pagination_conditions=PaginationConditions(limit=1, order="ASC", greater_than_id=1),
    )
    out = await build_events_query(req, MemoryQuery(EVENTS)).to_list()
    assert [e["id"] for e in out] == [2]


async def test_events_by_key_without_projects_spans_all():
    out = await build_events_query(GetEventsRequest(key="signup"), MemoryQuery(EVENTS)).to_list()
    assert {e["project"] for e in out} == {"alpha", "beta"}


async def test_campaign_date_ranges(recording_query):
    req = GetCampaignsRequest(
        projects=["alpha"],
        is_default=True,
        start_date_min=T0,
        end_date_max=T0 + timedelta(days=30),
    )
    q = build_campaigns_query(req, recording_query)
    fields = [(c[1].field, c[1].op.value) for c in q.kinds("where")]
    assert fields == [
        ("project", "in"),
        ("is_default", "eq"),
        ("start_date", "gte"),
        ("end_date", "lte"),
    ]
    assert q.calls[-1][0] == "order"


async def test_campaigns_in_window():
    rows = [
        {"id": 1, "project": "alpha", "is_default": False, "start_date": T0, "end_date": T0 + timedelta(days=10)},
        {"id": 2, "project": "alpha", "is_default": True, "start_date": T0 + timedelta(days=5), "end_date": T0 + timedelta(days=40)},
        {"id": 3, "project": "alpha", "is_default": False, "start_date": T0 - timedelta(days=5), "end_date": T0 + timedelta(days=20)},
    ]
    req = GetCampaignsRequest(start_date_min=T0, end_date_max=T0 + timedelta(days=30))
    out = await build_campaigns_query(req, MemoryQuery(rows)).to_list()
    assert [c["id"] for c in out] == [1]


async def test_referees_by_referrer(recording_query):
    req = GetRefereeRequest(referrer_id=7, reference_id="cust-1")
    q = build_referees_query(req, recording_query)
    where = {c[1].field: c[1].value for c in q.kinds("where")}
    assert where == {"reference_id": "cust-1", "referrer_id": 7}


async def test_rewards_by_status_and_code():
    rows = [
        {"id": 1, "project": "alpha", "status": "pending", "referrer_code": "AAA", "amount": 5},
        {"id": 2, "project": "alpha", "status": "paid", "referrer_code": "AAA", "amount": 9},
        {"id": 3, "project": "alpha", "status": "paid", "referrer_code": "BBB", "amount": 1},
        {"id": 4, "project": "alpha", "status": "paid", "referrer_code": "AAA", "amount": 3},
    ]
    req = GetRewardRequest(
        status="paid",
        referrer_code="AAA",
        pagination_conditions=PaginationConditions(sort_by="amount", order="ASC"),
    )
    out = await build_rewards_query(req, MemoryQuery(rows)).to_list()
    assert [r["id"] for r in out] == [4, 2]


async def test_event_logs_without_filters_only_orders(recording_query):
    q = build_event_logs_query(GetEventLogRequest(), recording_query)
    assert len(q.calls) == 1
    assert q.calls[0][:2] == ("order", "id")


class _Doc(BaseModel):
    name: str
    description: str | None = None
    updated_at: datetime


async def test_apply_update_copies_sent_fields_only():
    doc = _Doc(name="Signup", description="first", updated_at=T0)
    changed = apply_update(doc, UpdateEventRequest.model_validate({"name": "Sign up"}))
    assert changed == ["name"]
    assert doc.name == "Sign up"
    assert doc.description == "first"
    assert doc.updated_at > T0


async def test_apply_update_no_changes_keeps_timestamp():
    doc = _Doc(name="Signup", updated_at=T0)
    assert apply_update(doc, UpdateEventRequest()) == []
    assert doc.updated_at == T0


async def test_generated_codes_are_upper_alphanumeric():
    for _ in range(20):
        code = generate_code()
        assert 0 < len(code) <= 10
        assert code == code.upper()
        assert code.isalnum()


async def test_apply_update_ignores_explicit_null():
    doc = _Doc(name="Signup", description="first", updated_at=T0)
    changed = apply_update(doc, UpdateEventRequest.model_validate({"name": None}))
    assert changed == []
    assert doc.name == "Signup"
    assert doc.updated_at == T0
