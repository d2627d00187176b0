from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import CreateEventLogRequest, GetEventLogRequest
from app.schemas.responses import document_out, page_out
from app.services import event_logs as event_logs_service

router = APIRouter()


@router.post("")
async def event_log_create(body: CreateEventLogRequest, project: str = Depends(get_project)):
    entry = await event_logs_service.create_event_log(project, body)
    return document_out(entry)


@router.post("/search")
async def event_logs_search(body: GetEventLogRequest, project: str = Depends(get_project)):
    body = scope_to_project(body, project)
    items = await event_logs_service.list_event_logs(body)
    return page_out(items, body.pagination_conditions)
