"""Project domain entity (read-only summary)."""

from dataclasses import dataclass, field
from typing import Any

_KNOWN_KEYS = {"_id", "id", "userId", "title", "name", "description", "url", "imageUrl"}


@dataclass(frozen=True)
class Project:
    """Summary of a submitted project, owned by the submission subsystem."""

    id: str
    user_id: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    image_url: str = ""
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Project":
        return cls(
            id=str(document.get("_id") or document.get("id") or ""),
            user_id=str(document.get("userId") or ""),
            title=str(document.get("title") or document.get("name") or ""),
            description=str(document.get("description") or ""),
            url=str(document.get("url") or ""),
            image_url=str(document.get("imageUrl") or ""),
            extra={k: v for k, v in document.items() if k not in _KNOWN_KEYS},
        )

    def to_document(self) -> dict[str, Any]:
        return {
            **self.extra,
            "_id": self.id,
            "userId": self.user_id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "imageUrl": self.image_url,
        }
