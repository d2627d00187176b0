"""Events: keys that event logs are recorded against and campaigns subscribe to."""

from app.core.exceptions import ConflictError
from app.core.logging import get_logger
from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_eq, where_in
from app.db.query import BeanieQuery
from app.db.sequence import next_id
from app.models.event import Event
from app.schemas.requests import CreateEventRequest, GetEventsRequest, UpdateEventRequest
from app.services.documents import apply_update, get_in_project

log = get_logger(__name__)


def build_events_query(req: GetEventsRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(Event.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "key", req.key)
    query = where_eq(query, "name", req.name)
    query = where_eq(query, "event_type", req.event_type)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_events(req: GetEventsRequest) -> list[Event]:
    return await build_events_query(req).to_list()


async def create_event(project: str, body: CreateEventRequest) -> Event:
    existing = await Event.find_one(Event.project == project, Event.key == body.key)
    if existing:
        raise ConflictError("Event key already exists", details={"key": body.key})
    event = Event(id=await next_id("events"), project=project, **body.model_dump())
    await event.insert()
    log.info("event_created", event_id=event.id, key=event.key)
    return event


async def update_event(project: str, event_id: int, body: UpdateEventRequest) -> Event:
    event = await get_in_project(Event, project, event_id, "Event")
    changed = apply_update(event, body)
    if changed:
        await event.save()
        log.info("event_updated", event_id=event.id, fields=changed)
    return event
