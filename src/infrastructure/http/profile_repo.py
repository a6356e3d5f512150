"""HTTP implementation of the profile store."""

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from core.exceptions import StoreUnavailableError
from domain.entities.profile import Profile

logger = structlog.get_logger()


class HTTPProfileRepository:
    """Profile store reached through ``/api/profile/{userId}``."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_profile(self, identity_id: str) -> Profile | None:
        response = await self._send("fetch", "GET", self._path(identity_id))
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug("profile_not_found", identity_id=identity_id)
            return None
        return self._profile(response, "fetch")

    async def create_profile(self, identity_id: str, seed: Profile) -> Profile:
        body = {**seed.to_document(), "userId": identity_id}
        return await self._put("create", identity_id, body)

    async def replace_profile(self, identity_id: str, full: Profile) -> Profile:
        return await self._put("replace", identity_id, full.to_document())

    async def _put(self, operation: str, identity_id: str, body: dict[str, Any]) -> Profile:
        response = await self._send(operation, "PUT", self._path(identity_id), json=body)
        if response.status_code == httpx.codes.NOT_FOUND:
            raise StoreUnavailableError(operation, response.status_code)
        return self._profile(response, operation)

    async def _send(self, operation: str, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise StoreUnavailableError(operation, reason=str(e)) from e

        if not response.is_success and response.status_code != httpx.codes.NOT_FOUND:
            raise StoreUnavailableError(operation, response.status_code, response.text[:200])
        return response

    @classmethod
    def _profile(cls, response: httpx.Response, operation: str) -> Profile:
        try:
            return Profile.from_document(cls._document(response, operation))
        except ValueError as e:
            logger.warning("profile_document_malformed", operation=operation, error=str(e))
            raise StoreUnavailableError(
                operation, response.status_code, f"malformed document: {e}"
            ) from e

    @staticmethod
    def _document(response: httpx.Response, operation: str) -> dict[str, Any]:
        try:
            document = response.json()
        except ValueError as e:
            raise StoreUnavailableError(
                operation, response.status_code, "response is not JSON"
            ) from e
        if not isinstance(document, dict):
            raise StoreUnavailableError(
                operation, response.status_code, "response is not a JSON object"
            )
        return document

    @staticmethod
    def _path(identity_id: str) -> str:
        return f"/api/profile/{quote(identity_id, safe='')}"
