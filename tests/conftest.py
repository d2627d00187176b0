import os
import uuid
from datetime import datetime, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DB_NAME", "referrals_test")
os.environ.setdefault("DEFAULT_PROJECT", "test-project")

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


class RecordingQuery:
    """Query handle that records every call instead of building a query."""

    def __init__(self, calls=None):
        self.calls = list(calls or [])

    def _with(self, *call):
        return RecordingQuery(self.calls + [call])

    def with_offset(self, offset):
        return self._with("offset", offset)

    def with_where(self, predicate):
        return self._with("where", predicate)

    def with_order(self, field, direction):
        return self._with("order", field, direction)

    def with_limit(self, limit):
        return self._with("limit", limit)

    async def to_list(self):
        return []

    def kinds(self, kind):
        return [c for c in self.calls if c[0] == kind]


def make_rows(n: int = 25) -> list[dict]:
    """Rows with ids 1..n, created one hour apart, updated one day after creation."""
    rows = []
    for i in range(1, n + 1):
        created = BASE_TIME + timedelta(hours=i)
        rows.append(
            {
                "id": i,
                "name": f"row-{(i * 7) % n:02d}",
                "project": "alpha" if i % 2 else "beta",
                "created_at": created,
                "updated_at": created + timedelta(days=1),
            }
        )
    return rows


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def recording_query() -> RecordingQuery:
    return RecordingQuery()


@pytest.fixture
def rows() -> list[dict]:
    return make_rows()


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[None, None]:
    """Fresh in-memory MongoDB with all documents initialised."""
    from beanie import init_beanie
    from mongomock_motor import AsyncMongoMockClient

    from app.db.init import DOCUMENT_MODELS
    client = AsyncMongoMockClient()
    await init_beanie(
        database=client[f"referrals_test_{uuid.uuid4().hex[:8]}"],
        document_models=DOCUMENT_MODELS,
    )
    yield


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    from app.main import app
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
