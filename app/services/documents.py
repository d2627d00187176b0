"""Lookup and partial-update helpers shared by entity services."""

from datetime import datetime
from typing import TypeVar

from beanie import Document
from pydantic import BaseModel

from app.core.exceptions import NotFoundError

D = TypeVar("D", bound=Document)


async def get_in_project(model: type[D], project: str, doc_id: int, label: str) -> D:
    """Fetch by id within project; NotFoundError otherwise."""
    doc = await model.find_one(model.id == doc_id, model.project == project)
    if not doc:
        raise NotFoundError(f"{label} not found")
    return doc


def apply_update(doc: D, body: BaseModel) -> list[str]:
    """
    Copy the fields the client sent onto doc; return their names.
    An explicit null means "leave unchanged", never "store None".
    """
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(doc, field, value)
    if changes:
        doc.updated_at = datetime.utcnow()
    return sorted(changes)
