"""Referrers and their referral codes."""

import secrets

from app.core.exceptions import AppError, ConflictError
from app.core.logging import get_logger
from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_eq, where_in
from app.db.query import BeanieQuery
from app.db.sequence import next_id
from app.models.referrer import Referrer
from app.schemas.requests import CreateReferrerRequest, GetReferrerRequest, UpdateReferrerRequest
from app.services.documents import apply_update, get_in_project

log = get_logger(__name__)


def build_referrers_query(req: GetReferrerRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(Referrer.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "reference_id", req.reference_id)
    query = where_eq(query, "code", req.code)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_referrers(req: GetReferrerRequest) -> list[Referrer]:
    return await build_referrers_query(req).to_list()


def generate_code() -> str:
    return secrets.token_urlsafe(8).upper().replace("-", "").replace("_", "")[:10]


async def _unused_code(project: str) -> str:
    for _ in range(10):
        code = generate_code()
        if not await Referrer.find_one(Referrer.project == project, Referrer.code == code):
            return code
    raise AppError("Could not generate unique referral code", code="CODE_GENERATION_FAILED")


async def create_referrer(project: str, body: CreateReferrerRequest) -> Referrer:
    existing = await Referrer.find_one(
        Referrer.project == project,
        Referrer.reference_id == body.reference_id,
    )
    if existing:
        raise ConflictError("Referrer already exists", details={"referenceID": body.reference_id})
    if body.code:
        code = body.code.strip().upper()
        if await Referrer.find_one(Referrer.project == project, Referrer.code == code):
            raise ConflictError("Referral code already in use", details={"code": code})
    else:
        code = await _unused_code(project)
    referrer = Referrer(
        id=await next_id("referrers"),
        project=project,
        reference_id=body.reference_id,
        code=code,
        email=body.email,
        campaign_ids=body.campaign_ids,
    )
    await referrer.insert()
    log.info("referrer_created", referrer_id=referrer.id, reference_id=referrer.reference_id)
    return referrer


async def update_referrer(project: str, referrer_id: int, body: UpdateReferrerRequest) -> Referrer:
    referrer = await get_in_project(Referrer, project, referrer_id, "Referrer")
    changed = apply_update(referrer, body)
    if changed:
        await referrer.save()
        log.info("referrer_updated", referrer_id=referrer.id, fields=changed)
    return referrer
