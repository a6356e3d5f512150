"""Image upload protocol."""

from typing import Protocol


class IImageUploader(Protocol):
    """Black-box file store that accepts bytes and returns a stable URL."""

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Upload a file and return its public URL."""
        ...
