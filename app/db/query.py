"""MongoDB query handle backed by a Beanie FindMany."""

from typing import Any

from beanie import SortDirection
from beanie.odm.queries.find import FindMany

from app.core.query import ID_FIELD, Op, Predicate, SortOrder

_MONGO_OPS = {
    Op.EQ: "$eq",
    Op.IN: "$in",
    Op.GT: "$gt",
    Op.LT: "$lt",
    Op.GTE: "$gte",
    Op.LTE: "$lte",
}

_DIRECTIONS = {
    SortOrder.ASC: SortDirection.ASCENDING,
    SortOrder.DESC: SortDirection.DESCENDING,
}


def mongo_field(field: str) -> str:
    return "_id" if field == ID_FIELD else field


def sort_direction(direction: Any) -> SortDirection:
    """Map ASC/DESC (any case) to a Mongo sort direction; ValueError otherwise."""
    if isinstance(direction, str):
        direction = direction.upper()
    return _DIRECTIONS[SortOrder(direction)]


class BeanieQuery:
    """Wraps a FindMany; with_* calls mutate it in place and return self."""

    def __init__(self, find: FindMany):
        self.find = find

    def with_offset(self, offset: int) -> "BeanieQuery":
        self.find = self.find.skip(offset)
        return self

    def with_where(self, predicate: Predicate) -> "BeanieQuery":
        self.find = self.find.find(
            {mongo_field(predicate.field): {_MONGO_OPS[predicate.op]: predicate.value}}
        )
        return self

    def with_order(self, field: str, direction: Any) -> "BeanieQuery":
        self.find = self.find.sort((mongo_field(field), sort_direction(direction)))
        return self

    def with_limit(self, limit: int) -> "BeanieQuery":
        self.find = self.find.limit(limit)
        return self

    async def to_list(self) -> list[Any]:
        return await self.find.to_list()
