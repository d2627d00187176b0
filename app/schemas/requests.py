"""Inbound request bodies. Every optional field is None when not sent."""

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.core.pagination import PaginationConditions

_BASE_SORTABLE = frozenset({"id", "created_at", "updated_at"})


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateEventRequest(RequestModel):
    key: str
    name: str
    event_type: str  # simple, payment
    description: str | None = None


class UpdateEventRequest(RequestModel):
    name: str | None = None
    description: str | None = None


class CreateCampaignRequest(RequestModel):
    name: str
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
    validity_months_per_customer: int | None = None  # months_per_customer
    max_occurrences_per_customer: int | None = None  # count_per_customer
    reward_cap_per_customer: Decimal | None = None

    event_keys: list[str] = Field(default_factory=list)


class UpdateCampaignRequest(RequestModel):
    name: str | None = None
    reward_type: str | None = None
    reward_value: Decimal | None = None
    reward_cap: Decimal | None = None
    invitee_reward_type: str | None = None
    invitee_reward_value: Decimal | None = None
    invitee_reward_cap: Decimal | None = None
    budget: Decimal | None = None
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    status: str | None = None
    is_default: bool | None = None

    campaign_type_per_customer: str | None = None
    validity_months_per_customer: int | None = None
    max_occurrences_per_customer: int | None = None
    reward_cap_per_customer: Decimal | None = None

    event_keys: list[str] | None = None


class CreateReferrerRequest(RequestModel):
    reference_id: str = Field(alias="referenceID")
    code: str | None = None
    campaign_ids: list[int] = Field(default_factory=list, alias="campaignIDs")
    email: str | None = None


class UpdateReferrerRequest(RequestModel):
    campaign_ids: list[int] | None = Field(default=None, alias="campaignIDs")
    email: str | None = None


class CreateRefereeRequest(RequestModel):
    reference_id: str = Field(alias="referenceID")
    code: str  # referrer's code
    email: str | None = None


class CreateEventLogRequest(RequestModel):
    event_key: str
    reference_id: str = Field(alias="referenceID")
    amount: Decimal | None = None
    data: str | None = None


class ListRequest(RequestModel):
    """
    Base for Get*Request bodies. sort_by is checked against SORTABLE here,
    before the value reaches a query.
    """

    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE

    projects: list[str] = Field(default_factory=list)
    id: int | None = None
    pagination_conditions: PaginationConditions = Field(default_factory=PaginationConditions)

    @model_validator(mode="after")
    def _check_sort_by(self):
        sort_by = self.pagination_conditions.sort_by
        if sort_by is not None and sort_by not in self.SORTABLE:
            raise ValueError(
                f"sort_by must be one of {sorted(self.SORTABLE)}, got {sort_by!r}"
            )
        return self


class GetEventsRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {"key", "name", "event_type"}

    key: str | None = None
    name: str | None = None
    event_type: str | None = None


class GetCampaignsRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {
        "name",
        "status",
        "start_date",
        "end_date",
        "budget",
    }

    name: str | None = None
    status: str | None = None
    is_default: bool | None = None
    start_date_min: datetime | None = None
    start_date_max: datetime | None = None
    end_date_min: datetime | None = None
    end_date_max: datetime | None = None


class GetReferrerRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {"reference_id", "code", "email"}

    reference_id: str | None = Field(default=None, alias="referenceID")
    code: str | None = None


class GetRefereeRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {"reference_id", "referrer_id"}

    reference_id: str | None = Field(default=None, alias="referenceID")
    referrer_reference_id: str | None = Field(default=None, alias="referrerReferenceID")
    referrer_id: int | None = Field(default=None, alias="referrerID")


class GetRewardRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {"amount", "status", "campaign_id"}

    campaign_id: int | None = Field(default=None, alias="campaignID")
    referee_id: int | None = Field(default=None, alias="refereeID")
    referee_reference_id: str | None = Field(default=None, alias="refereeReferenceID")
    referrer_id: int | None = Field(default=None, alias="referrerID")
    referrer_reference_id: str | None = Field(default=None, alias="referrerReferenceID")
    referrer_code: str | None = None
    status: str | None = None


class GetEventLogRequest(ListRequest):
    SORTABLE: ClassVar[frozenset[str]] = _BASE_SORTABLE | {"event_key", "reference_id", "status"}

    event_key: str | None = None
    reference_id: str | None = Field(default=None, alias="referenceID")
    status: str | None = None
    reward_id: int | None = Field(default=None, alias="rewardID")
