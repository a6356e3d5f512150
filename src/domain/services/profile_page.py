"""Profile page controller: mount orchestration for the signed-in view."""

import asyncio
from urllib.parse import quote

import structlog

from core.exceptions import (
    ClipboardUnavailableError,
    InvalidSessionStateError,
    SignInRequiredError,
)
from domain.entities.identity import CurrentIdentity
from domain.entities.notification import NotificationMessages
from domain.entities.profile import default_profile
from domain.repositories.clipboard import IClipboard
from domain.repositories.notifier import INotifier
from domain.repositories.profile_repository import IProfileRepository
from domain.repositories.project_repository import IProjectRepository
from domain.repositories.upload_repository import IImageUploader
from domain.services.edit_session import EditSession
from domain.services.profile_presenter import ProfileView, build_share_url, present_profile
from domain.services.profile_service import ProfileService
from domain.services.project_feed import FeedStatus, ProjectFeed, ProjectFeedReader

logger = structlog.get_logger()


def build_sign_in_redirect(sign_in_path: str, current_path: str) -> str:
    """Sign-in URL that returns the user to ``current_path`` afterwards."""
    return f"{sign_in_path}?redirect_url={quote(current_path, safe='')}"


class ProfilePage:
    """Ties identity, profile loading, project feed and edit session together."""

    def __init__(
        self,
        identity: CurrentIdentity | None,
        *,
        current_path: str,
        profiles: IProfileRepository,
        projects: IProjectRepository,
        uploader: IImageUploader,
        notifier: INotifier,
        sign_in_path: str = "/login",
        site_url: str = "",
        placeholder_image: str = "/placeholder.jpg",
    ) -> None:
        self._identity = identity
        self._current_path = current_path
        self._profiles = profiles
        self._uploader = uploader
        self._notifier = notifier
        self._sign_in_path = sign_in_path
        self._site_url = site_url
        self._placeholder_image = placeholder_image
        self._profile_service = ProfileService(profiles, notifier)
        self._feed_reader = ProjectFeedReader(projects, notifier)
        self._is_loading_profile = False
        self.session: EditSession | None = None
        self.feed = ProjectFeed(status=FeedStatus.HIDDEN)

    @property
    def identity(self) -> CurrentIdentity:
        if self._identity is None:
            raise SignInRequiredError(
                build_sign_in_redirect(self._sign_in_path, self._current_path)
            )
        return self._identity

    @property
    def is_loading_profile(self) -> bool:
        return self._is_loading_profile

    @property
    def is_loading_projects(self) -> bool:
        return self._feed_reader.is_loading

    @property
    def share_url(self) -> str:
        return build_share_url(self._site_url, self.identity.id)

    async def share(self, clipboard: IClipboard) -> str | None:
        """Copy the public profile link to ``clipboard``.

        Returns the link, or ``None`` if the copy failed.
        """
        url = self.share_url
        try:
            await clipboard.write_text(url)
        except ClipboardUnavailableError as e:
            logger.warning("profile_share_failed", identity_id=self.identity.id, error=str(e))
            self._notifier.error(NotificationMessages.SHARE_LINK_FAILED)
            return None
        self._notifier.success(NotificationMessages.SHARE_LINK_COPIED)
        return url

    async def mount(self) -> EditSession:
        """Load the profile (creating it if needed) and the project feed together.

        Raises:
            SignInRequiredError: if nobody is signed in.
        """
        identity = self.identity
        self._is_loading_profile = True
        try:
            profile, feed = await asyncio.gather(
                self._profile_service.load_or_create(identity),
                self._feed_reader.load(identity.id),
            )
        finally:
            self._is_loading_profile = False

        self.feed = feed
        self.session = EditSession(
            identity.id,
            profile,
            self._profiles,
            self._uploader,
            self._notifier,
        )
        logger.debug("profile_page_mounted", identity_id=identity.id, feed=feed.status.value)
        return self.session

    def require_session(self) -> EditSession:
        if self.session is None:
            raise InvalidSessionStateError("edit the profile", "loading")
        return self.session

    def view(self) -> ProfileView:
        """Render the current profile, falling back to defaults before mount."""
        if self.session is None:
            return present_profile(
                default_profile(),
                self._identity,
                placeholder_image=self._placeholder_image,
            )
        return present_profile(
            self.session.current,
            self._identity,
            editing=self.session.is_editing,
            uploading=self.session.is_uploading,
            placeholder_image=self._placeholder_image,
        )
