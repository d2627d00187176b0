from fastapi import APIRouter, Depends

from app.deps import get_project, scope_to_project
from app.schemas.requests import CreateCampaignRequest, GetCampaignsRequest, UpdateCampaignRequest
from app.schemas.responses import document_out, page_out
from app.services import campaigns as campaigns_service

router = APIRouter()


@router.post("")
async def campaign_create(body: CreateCampaignRequest, project: str = Depends(get_project)):
    campaign = await campaigns_service.create_campaign(project, body)
    return document_out(campaign)


@router.patch("/{campaign_id}")
async def campaign_update(
    campaign_id: int,
    body: UpdateCampaignRequest,
    project: str = Depends(get_project),
):
    """Update only the fields present in the body."""
    campaign = await campaigns_service.update_campaign(project, campaign_id, body)
    return document_out(campaign)


@router.post("/search")
async def campaigns_search(body: GetCampaignsRequest, project: str = Depends(get_project)):
    body = scope_to_project(body, project)
    items = await campaigns_service.list_campaigns(body)
    return page_out(items, body.pagination_conditions)
