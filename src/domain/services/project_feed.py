"""Read-only feed of the projects an identity has submitted."""

from dataclasses import dataclass, field
from enum import StrEnum

import structlog

from core.exceptions import StoreUnavailableError
from domain.entities.notification import NotificationMessages
from domain.entities.project import Project
from domain.repositories.notifier import INotifier
from domain.repositories.project_repository import IProjectRepository

logger = structlog.get_logger()


class FeedStatus(StrEnum):
    """What the projects section should show."""

    PROJECTS = "projects"
    CALL_TO_ACTION = "call_to_action"
    HIDDEN = "hidden"


@dataclass(frozen=True)
class ProjectFeed:
    """Result of a feed load."""

    status: FeedStatus
    projects: tuple[Project, ...] = field(default_factory=tuple)

    @classmethod
    def from_projects(cls, projects: list[Project]) -> "ProjectFeed":
        if not projects:
            return cls(status=FeedStatus.CALL_TO_ACTION)
        return cls(status=FeedStatus.PROJECTS, projects=tuple(projects))


class ProjectFeedReader:
    """Loads an identity's projects without touching profile state."""

    def __init__(self, projects: IProjectRepository, notifier: INotifier) -> None:
        self._projects = projects
        self._notifier = notifier
        self._is_loading = False

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    async def load(self, identity_id: str) -> ProjectFeed:
        """Fetch the feed. Failures hide the section and notify the user."""
        self._is_loading = True
        try:
            projects = await self._projects.list_for_user(identity_id)
        except StoreUnavailableError as e:
            logger.warning(
                "projects_fetch_failed",
                identity_id=identity_id,
                error=e.message,
                upstream_status=e.upstream_status,
            )
            self._notifier.error(NotificationMessages.PROJECTS_LOAD_FAILED)
            return ProjectFeed(status=FeedStatus.HIDDEN)
        finally:
            self._is_loading = False

        logger.debug("projects_fetched", identity_id=identity_id, count=len(projects))
        return ProjectFeed.from_projects(projects)
