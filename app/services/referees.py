"""Referees: customers who signed up with a referrer's code."""

from app.core.exceptions import ConflictError, NotFoundError
from app.core.logging import get_logger
from app.core.pagination import apply_pagination_conditions
from app.core.query import QueryHandle, where_eq, where_in
from app.db.query import BeanieQuery
from app.db.sequence import next_id
from app.models.referee import Referee
from app.models.referrer import Referrer
from app.schemas.requests import CreateRefereeRequest, GetRefereeRequest

log = get_logger(__name__)


def build_referees_query(req: GetRefereeRequest, query: QueryHandle | None = None) -> QueryHandle:
    if query is None:
        query = BeanieQuery(Referee.find())
    query = where_in(query, "project", req.projects)
    query = where_eq(query, "id", req.id)
    query = where_eq(query, "reference_id", req.reference_id)
    query = where_eq(query, "referrer_reference_id", req.referrer_reference_id)
    query = where_eq(query, "referrer_id", req.referrer_id)
    return apply_pagination_conditions(query, req.pagination_conditions)


async def list_referees(req: GetRefereeRequest) -> list[Referee]:
    return await build_referees_query(req).to_list()


async def create_referee(project: str, body: CreateRefereeRequest) -> Referee:
    code = body.code.strip().upper()
    referrer = await Referrer.find_one(Referrer.project == project, Referrer.code == code)
    if not referrer:
        raise NotFoundError("Invalid referral code")
    existing = await Referee.find_one(
        Referee.project == project,
        Referee.reference_id == body.reference_id,
    )
    if existing:
        raise ConflictError("Referee already exists", details={"referenceID": body.reference_id})
    referee = Referee(
        id=await next_id("referees"),
        project=project,
        reference_id=body.reference_id,
        referrer_id=referrer.id,
        referrer_reference_id=referrer.reference_id,
        email=body.email,
    )
    await referee.insert()
    log.info("referee_created", referee_id=referee.id, referrer_id=referrer.id)
    return referee
