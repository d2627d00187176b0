from datetime import datetime
from decimal import Decimal

from beanie import Document
from pydantic import Field


class Campaign(Document):
    id: int | None = None
    project: str
    name: str
    status: str = "active"
    reward_type: str  # flat_fee, percentage
    reward_value: Decimal
    reward_cap: Decimal | None = None
    invitee_reward_type: str | None = None
    invitee_reward_value: Decimal | None = None
    invitee_reward_cap: Decimal | None = None
    budget: Decimal | None = None
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_default: bool = False
    campaign_type_per_customer: str  # one_time, forever, months_per_customer, count_per_customer
    validity_months_per_customer: int | None = None
    max_occurrences_per_customer: int | None = None
    reward_cap_per_customer: Decimal | None = None
    event_keys: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Settings:
        name = "campaigns"
        indexes = [
            [("project", 1), ("status", 1)],
        ]
