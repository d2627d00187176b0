"""Campaigns: reward configuration for referrers and invitees."""

from app.core.logging import get_logger
from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_between, where_eq, where_in
from app.db.query import BeanieQuery
from app.db.sequence import next_id
from app.models.campaign import Campaign
from app.schemas.requests import CreateCampaignRequest, GetCampaignsRequest, UpdateCampaignRequest
from app.services.documents import apply_update, get_in_project

log = get_logger(__name__)


def build_campaigns_query(req: GetCampaignsRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(Campaign.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "name", req.name)
    query = where_eq(query, "status", req.status)
    query = where_eq(query, "is_default", req.is_default)
    query = where_between(query, "start_date", req.start_date_min, req.start_date_max)
    query = where_between(query, "end_date", req.end_date_min, req.end_date_max)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_campaigns(req: GetCampaignsRequest) -> list[Campaign]:
    return await build_campaigns_query(req).to_list()


async def create_campaign(project: str, body: CreateCampaignRequest) -> Campaign:
    campaign = Campaign(id=await next_id("campaigns"), project=project, **body.model_dump())
    await campaign.insert()
    log.info("campaign_created", campaign_id=campaign.id, reward_type=campaign.reward_type)
    return campaign


async def update_campaign(project: str, campaign_id: int, body: UpdateCampaignRequest) -> Campaign:
    campaign = await get_in_project(Campaign, project, campaign_id, "Campaign")
    changed = apply_update(campaign, body)
    if changed:
        await campaign.save()
        log.info("campaign_updated", campaign_id=campaign.id, fields=changed)
    return campaign
