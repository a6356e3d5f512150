"""HTTP client construction for the document store."""

import httpx

from core.config import Settings, settings


def create_http_client(
    config: Settings = settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the shared async client used by every store call.

    Pass ``transport`` to route calls somewhere other than the network
    (for example an in-process ASGI app).
    """
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=config.request_timeout_seconds,
        transport=transport,
        headers={"Accept": "application/json"},
    )
