from typing import Any

from beanie import Document

from app.core.pagination import Page, PaginationConditions


def document_out(doc: Document) -> dict[str, Any]:
    return doc.model_dump(mode="json", exclude={"revision_id"})


def page_out(docs: list[Document], conditions: PaginationConditions) -> dict[str, Any]:
    return Page[dict](
        items=[document_out(d) for d in docs],
        limit=conditions.limit,
        offset=conditions.offset,
    ).model_dump()
