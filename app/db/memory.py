"""In-memory query handle: evaluates predicates, order, offset and limit over a row list."""

import dataclasses
import operator
from typing import Any, Callable, Mapping, Sequence

from app.core.query import Op, Predicate, SortOrder

_COMPARE: dict[Op, Callable[[Any, Any], bool]] = {
    Op.EQ: operator.eq,
    Op.IN: lambda a, b: a in b,
    Op.GT: operator.gt,
    Op.LT: operator.lt,
    Op.GTE: operator.ge,
    Op.LTE: operator.le,
}


def _value(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        if field not in row:
            raise KeyError(f"Unknown field: {field}")
        return row[field]
    if not hasattr(row, field):
        raise KeyError(f"Unknown field: {field}")
    return getattr(row, field)


@dataclasses.dataclass(frozen=True)
class MemoryQuery:
    """
    Immutable: every with_* call returns a new handle.
    Evaluation happens in to_list(): filter, stable sort, skip, then limit,
    regardless of the order clauses were added in. Rows may be mappings or objects.
    """

    rows: Sequence[Any]
    predicates: tuple[Predicate, ...] = ()
    order: tuple[str, Any] | None = None
    offset: int | None = None
    limit: int | None = None

    def with_offset(self, offset: int) -> "MemoryQuery":
        return dataclasses.replace(self, offset=offset)

    def with_where(self, predicate: Predicate) -> "MemoryQuery":
        return dataclasses.replace(self, predicates=self.predicates + (predicate,))

    def with_order(self, field: str, direction: Any) -> "MemoryQuery":
        return dataclasses.replace(self, order=(field, direction))

    def with_limit(self, limit: int) -> "MemoryQuery":
        return dataclasses.replace(self, limit=limit)

    def all(self) -> list[Any]:
        out = [
            row
            for row in self.rows
            if all(_COMPARE[p.op](_value(row, p.field), p.value) for p in self.predicates)
        ]
        if self.order is not None:
            field, direction = self.order
            if isinstance(direction, str):
                direction = direction.upper()
            reverse = SortOrder(direction) is SortOrder.DESC
            out.sort(key=lambda row: _value(row, field), reverse=reverse)
        if self.offset:
            out = out[self.offset:]
        if self.limit is not None:
            out = out[: self.limit]
        return out

    async def to_list(self) -> list[Any]:
        return self.all()
