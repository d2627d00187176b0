"""Event logs: raw occurrences of an event for a referee/referrer reference."""

from app.core.exceptions import NotFoundError
from app.core.logging import get_logger
from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_eq, where_in
from app.db.query import BeanieQuery
from app.db.sequence import next_id
from app.models.event import Event
from app.models.event_log import EventLog
from app.schemas.requests import CreateEventLogRequest, GetEventLogRequest

log = get_logger(__name__)


def build_event_logs_query(req: GetEventLogRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(EventLog.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "event_key", req.event_key)
    query = where_eq(query, "reference_id", req.reference_id)
    query = where_eq(query, "status", req.status)
    query = where_eq(query, "reward_id", req.reward_id)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_event_logs(req: GetEventLogRequest) -> list[EventLog]:
    return await build_event_logs_query(req).to_list()


async def create_event_log(project: str, body: CreateEventLogRequest) -> EventLog:
    """Record the occurrence; reward processing happens elsewhere."""
    event = await Event.find_one(Event.project == project, Event.key == body.event_key)
    if not event:
        raise NotFoundError("Unknown event key")
    entry = EventLog(id=await next_id("event_logs"), project=project, **body.model_dump())
    await entry.insert()
    log.info("event_log_created", event_log_id=entry.id, event_key=entry.event_key)
    return entry
