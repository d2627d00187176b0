"""Backend-neutral query handle contract and predicate helpers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Protocol, TypeVar

ID_FIELD = "id"
CREATED_FIELD = "created_at"
UPDATED_FIELD = "updated_at"


class Op(str, Enum):
    EQ = "eq"
    IN = "in"
    GT = "gt"
    LT = "lt"
    GTE = "gte"
    LTE = "lte"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Predicate:
    field: str
    op: Op
    value: Any


Q = TypeVar("Q", bound="QueryHandle")


class QueryHandle(Protocol):
    """
    Composable, lazily executed query.
    Each with_* call returns a handle (a new one, or self mutated in place);
    predicates are AND-ed with those already on the handle.
    """

    def with_offset(self: Q, offset: int) -> Q: ...

    def with_where(self: Q, predicate: Predicate) -> Q: ...

    def with_order(self: Q, field: str, direction: Any) -> Q: ...

    def with_limit(self: Q, limit: int) -> Q: ...

    async def to_list(self) -> list[Any]: ...


def where_eq(query: Q, field: str, value: Any) -> Q:
    """Add field == value when value is not None."""
    if value is None:
        return query
    return query.with_where(Predicate(field, Op.EQ, value))


def where_in(query: Q, field: str, values: Iterable[Any] | None) -> Q:
    """Add field IN values when values is non-empty."""
    values = list(values or [])
    if not values:
        return query
    return query.with_where(Predicate(field, Op.IN, values))


def where_between(query: Q, field: str, low: Any = None, high: Any = None) -> Q:
    """Inclusive range; either bound may be None."""
    if low is not None:
        query = query.with_where(Predicate(field, Op.GTE, low))
    if high is not None:
        query = query.with_where(Predicate(field, Op.LTE, high))
    return query
