from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import CreateReferrerRequest, GetReferrerRequest, UpdateReferrerRequest
from app.schemas.responses import document_out, page_out
from app.services import referrers as referrers_service

router = APIRouter()


@router.post("")
async def referrer_create(body: CreateReferrerRequest, project: str = Depends(get_project)):
    """Create a referrer; a referral code is generated when none is given."""
    referrer = await referrers_service.create_referrer(project, body)
    return document_out(referrer)


@router.patch("/{referrer_id}")
async def referrer_update(
    referrer_id: int,
    body: UpdateReferrerRequest,
    project: str = Depends(get_project),
):
    referrer = await referrers_service.update_referrer(project, referrer_id, body)
    return document_out(referrer)


@router.post("/search")
async def referrers_search(body: GetReferrerRequest, project: str = Depends(get_project)):
    body = scope_to_project(body, project)
    items = await referrers_service.list_referrers(body)
    return page_out(items, body.pagination_conditions)
