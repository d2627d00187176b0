from datetime import datetime
from decimal import Decimal

from beanie import Document
from pydantic import Field


class Reward(Document):
    id: int | None = None
    project: str
    campaign_id: int
    referrer_id: int | None = None
    referrer_reference_id: str | None = None
    referrer_code: str | None = None
    referee_id: int | None = None
    referee_reference_id: str | None = None
    amount: Decimal = Decimal("0")
    status: str = "pending"  # pending, approved, paid, cancelled
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "rewards"
        indexes = [
            [("project", 1), ("status", 1)],
            [("campaign_id", 1)],
        ]
