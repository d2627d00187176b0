from datetime import datetime
from decimal import Decimal

from beanie import Document
from pydantic import Field


class EventLog(Document):
    id: int | None = None
    project: str
    event_key: str
    reference_id: str
    amount: Decimal | None = None
    data: str | None = None
    status: str = "pending"  # pending, processed, failed
    reward_id: int | None = None  # no reward for most logs
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "event_logs"
        indexes = [
            [("project", 1), ("event_key", 1)],
            [("reference_id", 1)],
        ]
