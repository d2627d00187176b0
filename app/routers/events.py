from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import CreateEventRequest, GetEventsRequest, UpdateEventRequest
from app.schemas.responses import document_out, page_out
from app.services import events as events_service

router = APIRouter()


@router.post("")
async def event_create(body: CreateEventRequest, project: str = Depends(get_project)):
    event = await events_service.create_event(project, body)
    return document_out(event)


@router.patch("/{event_id}")
async def event_update(event_id: int, body: UpdateEventRequest, project: str = Depends(get_project)):
    event = await events_service.update_event(project, event_id, body)
    return document_out(event)


@router.post("/search")
async def events_search(body: GetEventsRequest, project: str = Depends(get_project)):
    """List events matching filters, sorted and paginated by paginationConditions."""
    body = scope_to_project(body, project)
    items = await events_service.list_events(body)
    return page_out(items, body.pagination_conditions)
