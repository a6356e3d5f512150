"""Project listing routes."""

from typing import Any

from fastapi import APIRouter, Query

from api.dependencies.store import DocumentStore

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", summary="List a user's projects")
async def list_projects(
    store: DocumentStore,
    user_id: str = Query(..., alias="userId", min_length=1),
) -> list[dict[str, Any]]:
    """Get summaries of every project submitted by ``userId``."""
    return [project.to_document() for project in store.list_projects(user_id)]
