from datetime import datetime

from beanie import Document
from pydantic import Field


class Referrer(Document):
    id: int | None = None
    project: str
    reference_id: str  # unique per project
    code: str
    email: str | None = None
    campaign_ids: list[int] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "referrers"
        indexes = [
            [("project", 1), ("reference_id", 1)],
            [("project", 1), ("code", 1)],
        ]
