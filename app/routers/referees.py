from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import CreateRefereeRequest, GetRefereeRequest
from app.schemas.responses import document_out, page_out
from app.services import referees as referees_service

router = APIRouter()


@router.post("")
async def referee_create(body: CreateRefereeRequest, project: str = Depends(get_project)):
    """Register a referee under the referrer owning body.code. 404 if the code is unknown."""
    referee = await referees_service.create_referee(project, body)
    return document_out(referee)


@router.post("/search")
async def referees_search(body: GetRefereeRequest, project: str = Depends(get_project)):
    body = scope_to_project(body, project)
    items = await referees_service.list_referees(body)
    return page_out(items, body.pagination_conditions)
