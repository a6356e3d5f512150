"""HTTP implementation of the image uploader."""

import httpx
import structlog

from core.exceptions import UploadFailedError

logger = structlog.get_logger()


class HTTPImageUploader:
    """Uploads files to ``/api/upload`` and returns the stored URL."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        try:
            response = await self._client.post(
                "/api/upload",
                files={"file": (filename, content, content_type)},
            )
        except httpx.HTTPError as e:
            raise UploadFailedError(reason=str(e)) from e

        if response.status_code != httpx.codes.OK:
            raise UploadFailedError(response.status_code, response.text[:200])

        try:
            url = response.json().get("url")
        except (ValueError, AttributeError) as e:
            raise UploadFailedError(response.status_code, "response has no url") from e
        if not isinstance(url, str) or not url:
            raise UploadFailedError(response.status_code, "response has no url")

        logger.debug("image_uploaded", filename=filename, size=len(content), url=url)
        return url
