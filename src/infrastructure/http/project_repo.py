"""HTTP implementation of the project source."""

import httpx

from core.exceptions import StoreUnavailableError
from domain.entities.project import Project


class HTTPProjectRepository:
    """Projects reached through ``/api/projects?userId=...``."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def list_for_user(self, identity_id: str) -> list[Project]:
        try:
            response = await self._client.get("/api/projects", params={"userId": identity_id})
        except httpx.HTTPError as e:
            raise StoreUnavailableError("list projects", reason=str(e)) from e

        if not response.is_success:
            raise StoreUnavailableError("list projects", response.status_code, response.text[:200])

        try:
            documents = response.json()
        except ValueError as e:
            raise StoreUnavailableError(
                "list projects", response.status_code, "response is not JSON"
            ) from e
        if not isinstance(documents, list):
            raise StoreUnavailableError(
                "list projects", response.status_code, "response is not a JSON array"
            )

        return [Project.from_document(doc) for doc in documents if isinstance(doc, dict)]
