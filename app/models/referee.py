from datetime import datetime

from beanie import Document
from pydantic import Field


class Referee(Document):
    id: int | None = None
    project: str
    reference_id: str
    referrer_id: int
    referrer_reference_id: str
    email: str | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "referees"
        indexes = [
            [("project", 1), ("reference_id", 1)],
            [("referrer_id", 1)],
        ]
