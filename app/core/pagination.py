"""Pagination, sorting and date-range conditions shared by every list request."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.query import (
    CREATED_FIELD,
    ID_FIELD,
    UPDATED_FIELD,
    Op,
    Predicate,
    Q,
    SortOrder,
)

T = TypeVar("T")

DEFAULT_SORT_BY = ID_FIELD
DEFAULT_ORDER = SortOrder.DESC


class Page(BaseModel, Generic[T]):
    items: list[T]
    limit: int | None = None
    offset: int | None = None


class PaginationConditions(BaseModel):
    """
    Every field is optional; None means "no constraint from this dimension".
    A present 0 for limit/offset is kept as 0 and only disables that clause.
    """

    model_config = ConfigDict(frozen=True)

    limit: int | None = None
    offset: int | None = None
    sort_by: str | None = None
    order: SortOrder | None = None
    greater_than_id: int | None = None  # keyset: id > value
    less_than_id: int | None = None  # keyset: id < value
    created_after: datetime | None = None
    created_before: datetime | None = None
    updated_after: datetime | None = None
    updated_before: datetime | None = None

    @field_validator("order", mode="before")
    @classmethod
    def _upper_order(cls, v):
        return v.upper() if isinstance(v, str) else v


def apply_pagination_conditions(query: Q, conditions: PaginationConditions) -> Q:
    """
    Compose conditions onto query in a fixed order:
    offset, id bounds, created bounds, updated bounds, order, limit.

    Field names are passed through untouched; callers must allow-list sort_by.
    Nothing is executed here, so backend errors surface at execution time.
    """
    if conditions.offset is not None and conditions.offset > 0:
        query = query.with_offset(conditions.offset)

    if conditions.greater_than_id is not None:
        query = query.with_where(Predicate(ID_FIELD, Op.GT, conditions.greater_than_id))
    if conditions.less_than_id is not None:
        query = query.with_where(Predicate(ID_FIELD, Op.LT, conditions.less_than_id))

    if conditions.created_after is not None:
        query = query.with_where(Predicate(CREATED_FIELD, Op.GTE, conditions.created_after))
    if conditions.created_before is not None:
        query = query.with_where(Predicate(CREATED_FIELD, Op.LTE, conditions.created_before))
    if conditions.updated_after is not None:
        query = query.with_where(Predicate(UPDATED_FIELD, Op.GTE, conditions.updated_after))
    if conditions.updated_before is not None:
        query = query.with_where(Predicate(UPDATED_FIELD, Op.LTE, conditions.updated_before))

    sort_by = conditions.sort_by if conditions.sort_by is not None else DEFAULT_SORT_BY
    order = conditions.order if conditions.order is not None else DEFAULT_ORDER
    query = query.with_order(sort_by, order)

    if conditions.limit is not None and conditions.limit > 0:
        query = query.with_limit(conditions.limit)

    return query
