"""In-memory document store backing the reference API."""

from dataclasses import dataclass
from typing import Any
from uuid import uuid4

import structlog

from core.exceptions import ProfileNotFoundError, UploadNotFoundError
from domain.entities.project import Project

logger = structlog.get_logger()

_IMAGE_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
}


@dataclass(frozen=True)
class StoredUpload:
    """Bytes kept for one uploaded file."""

    key: str
    content: bytes
    content_type: str
    filename: str


class InMemoryDocumentStore:
    """Profiles, projects and uploads kept in process memory.

    Profile documents are stored as given (last write wins). Projects are
    seeded by the caller; the store only reads them back by owner.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, dict[str, Any]] = {}
        self._projects: dict[str, list[Project]] = {}
        self._uploads: dict[str, StoredUpload] = {}

    # --- Profiles ---

    def get_profile(self, user_id: str) -> dict[str, Any]:
        document = self._profiles.get(user_id)
        if document is None:
            raise ProfileNotFoundError(user_id)
        return dict(document)

    def put_profile(self, user_id: str, document: dict[str, Any]) -> dict[str, Any]:
        created = user_id not in self._profiles
        self._profiles[user_id] = dict(document)
        logger.info("profile_stored", user_id=user_id, created=created)
        return dict(document)

    # --- Projects ---

    def add_project(self, project: Project) -> Project:
        self._projects.setdefault(project.user_id, []).append(project)
        return project

    def list_projects(self, user_id: str) -> list[Project]:
        return list(self._projects.get(user_id, []))

    # --- Uploads ---

    def save_upload(self, content: bytes, content_type: str, filename: str) -> StoredUpload:
        key = f"{uuid4().hex}{_IMAGE_EXTENSIONS.get(content_type, '')}"
        upload = StoredUpload(
            key=key,
            content=content,
            content_type=content_type,
            filename=filename,
        )
        self._uploads[key] = upload
        logger.info("upload_stored", key=key, size=len(content), content_type=content_type)
        return upload

    def get_upload(self, key: str) -> StoredUpload:
        upload = self._uploads.get(key)
        if upload is None:
            raise UploadNotFoundError(key)
        return upload

    def stats(self) -> dict[str, int]:
        return {
            "profiles": len(self._profiles),
            "projects": sum(len(items) for items in self._projects.values()),
            "uploads": len(self._uploads),
        }

    def clear(self) -> None:
        self._profiles.clear()
        self._projects.clear()
        self._uploads.clear()
