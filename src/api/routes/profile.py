"""Profile document routes."""

from typing import Any

from fastapi import APIRouter

from api.dependencies.store import DocumentStore
from api.schemas.profile import ProfileDocument

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get(
    "/{user_id}",
    response_model=ProfileDocument,
    summary="Get a profile",
    responses={404: {"description": "No profile stored for this user yet"}},
)
async def get_profile(user_id: str, store: DocumentStore) -> dict[str, Any]:
    """Get the stored profile document for a user."""
    return store.get_profile(user_id)


@router.put(
    "/{user_id}",
    response_model=ProfileDocument,
    summary="Create or replace a profile",
)
async def put_profile(user_id: str, body: ProfileDocument, store: DocumentStore) -> dict[str, Any]:
    """Store the full profile document. There is no partial update."""
    document = body.model_dump(mode="json")
    document["userId"] = user_id
    return store.put_profile(user_id, document)
