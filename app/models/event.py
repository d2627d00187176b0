from datetime import datetime

from beanie import Document
from pydantic import Field


class Event(Document):
    id: int | None = None
    project: str
    key: str
    name: str
    event_type: str  # simple, payment
    description: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "events"
        indexes = [
            [("project", 1), ("key", 1)],
        ]
