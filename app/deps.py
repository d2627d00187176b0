"""Shared FastAPI dependencies."""

from fastapi import Header

from app.core.config import get_settings
from app.schemas.requests import ListRequest

PROJECT_HEADER = "X-Project"


async def get_project(x_project: str | None = Header(None, alias=PROJECT_HEADER)) -> str:
    """Dependency: project from header, else the configured default."""
    project = (x_project or "").strip()
    return project or get_settings().default_project


def scope_to_project(body: ListRequest, project: str) -> ListRequest:
    """Restrict a list request to the caller's project when it names none."""
    if body.projects:
        return body
    return body.model_copy(update={"projects": [project]})
