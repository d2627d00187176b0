"""Reward ledger lookups."""

from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_eq, where_in
from app.db.query import BeanieQuery
from app.models.reward import Reward
from app.schemas.requests import GetRewardRequest


def build_rewards_query(req: GetRewardRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(Reward.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "campaign_id", req.campaign_id)
    query = where_eq(query, "referee_id", req.referee_id)
    query = where_eq(query, "referee_reference_id", req.referee_reference_id)
    query = where_eq(query, "referrer_id", req.referrer_id)
    query = where_eq(query, "referrer_reference_id", req.referrer_reference_id)
    query = where_eq(query, "referrer_code", req.referrer_code)
    query = where_eq(query, "status", req.status)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_rewards(req: GetRewardRequest) -> list[Reward]:
    return await build_rewards_query(req).to_list()
