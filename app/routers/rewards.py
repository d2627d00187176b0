from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import GetRewardRequest
from app.schemas.responses import page_out
from app.services import rewards as rewards_service

router = APIRouter()


@router.post("/search")
async def rewards_search(body: GetRewardRequest, project: str = Depends(get_project)):
    body = scope_to_project(body, project)
    items = await rewards_service.list_rewards(body)
    return page_out(items, body.pagination_conditions)
