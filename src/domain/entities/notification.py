"""User-visible notification (toast) entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum


class NotificationLevel(StrEnum):
    """Severity of a user-visible notification."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class NotificationMessages:
    """Message constants shown to the user."""

    PROFILE_LOAD_FAILED = "Failed to load profile"
    PROFILE_CREATE_FAILED = "Failed to create profile"
    PROFILE_UPDATED = "Profile updated successfully"
    PROFILE_UPDATE_FAILED = "Failed to update profile"
    IMAGE_UPLOADED = "Image uploaded successfully"
    IMAGE_UPLOAD_FAILED = "Failed to upload image"
    PROJECTS_LOAD_FAILED = "Failed to load your projects"
    SHARE_LINK_COPIED = "Profile link copied to clipboard!"
    SHARE_LINK_FAILED = "Failed to copy link"


@dataclass(frozen=True)
class Notification:
    """A single message raised to the user."""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
