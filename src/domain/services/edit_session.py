"""Edit session controller for a single profile.

The session owns two values:

    committed   the last profile the store accepted (or the loaded/default one)
    draft       an independent deep copy, only present while editing

State machine::

    VIEWING --begin_edit--> EDITING --commit--> SAVING --ok--> VIEWING
                              |  ^                 |
                              |  +-----failed------+
                              +--discard--> VIEWING

Image upload is a side channel tracked by ``is_uploading``; it does not
change the state. A commit issued while an upload is pending persists the
draft as it was when the commit started.
"""

from enum import StrEnum

import structlog

from core.exceptions import (
    InvalidSessionStateError,
    StoreUnavailableError,
    UploadFailedError,
)
from domain.entities.notification import NotificationMessages
from domain.entities.profile import (
    DEFAULT_LINK_COUNT,
    Link,
    Profile,
    Role,
    SocialPlatform,
)
from domain.repositories.notifier import INotifier
from domain.repositories.profile_repository import IProfileRepository
from domain.repositories.upload_repository import IImageUploader

logger = structlog.get_logger()


class SessionState(StrEnum):
    """Edit session states."""

    VIEWING = "viewing"
    EDITING = "editing"
    SAVING = "saving"


class EditSession:
    """Controller for viewing, editing and committing one identity's profile."""

    def __init__(
        self,
        identity_id: str,
        profile: Profile,
        profiles: IProfileRepository,
        uploader: IImageUploader,
        notifier: INotifier,
    ) -> None:
        self._identity_id = identity_id
        self._profiles = profiles
        self._uploader = uploader
        self._notifier = notifier
        self._committed = profile.copy()
        self._draft: Profile | None = None
        self._state = SessionState.VIEWING
        self._is_uploading = False

    # --- Read access ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_editing(self) -> bool:
        return self._state is not SessionState.VIEWING

    @property
    def is_saving(self) -> bool:
        return self._state is SessionState.SAVING

    @property
    def is_uploading(self) -> bool:
        return self._is_uploading

    @property
    def committed(self) -> Profile:
        """A copy of the committed profile; only ``commit`` may replace it."""
        return self._committed.copy()

    @property
    def draft(self) -> Profile | None:
        """The live draft while editing, else None."""
        return self._draft

    @property
    def current(self) -> Profile:
        """The profile to render: the draft while editing, else the committed one."""
        if self._draft is not None:
            return self._draft
        return self._committed

    # --- Transitions ---

    def begin_edit(self) -> Profile:
        """Enter EDITING with a fresh copy of the committed profile."""
        if self._state is not SessionState.VIEWING:
            raise InvalidSessionStateError("start editing", self._state.value)
        self._draft = self._committed.copy()
        self._state = SessionState.EDITING
        logger.debug("profile_edit_started", identity_id=self._identity_id)
        return self._draft

    def discard(self) -> None:
        """Drop the draft and return to VIEWING. Unsaved edits are lost."""
        self._require_editing("discard changes")
        self._draft = None
        self._state = SessionState.VIEWING
        logger.debug("profile_edit_discarded", identity_id=self._identity_id)

    async def commit(self) -> bool:
        """Persist the draft with a full replace.

        Returns True on success. On a store failure the session goes back to
        EDITING with the draft untouched, the user is notified, and False is
        returned.
        """
        draft = self._require_editing("save changes")
        snapshot = draft.copy()
        self._state = SessionState.SAVING

        try:
            await self._profiles.replace_profile(self._identity_id, snapshot)
        except StoreUnavailableError as e:
            self._state = SessionState.EDITING
            logger.warning(
                "profile_commit_failed",
                identity_id=self._identity_id,
                error=e.message,
                upstream_status=e.upstream_status,
            )
            self._notifier.error(NotificationMessages.PROFILE_UPDATE_FAILED)
            return False
        except Exception:
            self._state = SessionState.EDITING
            raise

        self._committed = snapshot
        self._draft = None
        self._state = SessionState.VIEWING
        logger.info("profile_committed", identity_id=self._identity_id)
        self._notifier.success(NotificationMessages.PROFILE_UPDATED)
        return True

    async def upload_image(self, filename: str, content: bytes, content_type: str) -> bool:
        """Upload a new avatar and point the draft at it.

        Only one upload runs at a time. If the session leaves editing before
        the upload finishes, the uploaded URL is not applied anywhere.
        """
        draft = self._require_editing("upload an image")
        if self._is_uploading:
            raise InvalidSessionStateError("start another upload", "uploading")

        self._is_uploading = True
        try:
            url = await self._uploader.upload(filename, content, content_type)
        except UploadFailedError as e:
            logger.warning(
                "profile_image_upload_failed",
                identity_id=self._identity_id,
                error=e.message,
                upstream_status=e.upstream_status,
            )
            self._notifier.error(NotificationMessages.IMAGE_UPLOAD_FAILED)
            return False
        finally:
            self._is_uploading = False

        if self._draft is not draft:
            logger.warning(
                "profile_image_upload_orphaned",
                identity_id=self._identity_id,
                url=url,
            )
            return False

        draft.profile_image = url
        logger.info("profile_image_uploaded", identity_id=self._identity_id)
        self._notifier.success(NotificationMessages.IMAGE_UPLOADED)
        return True

    # --- Draft mutations ---

    def set_name(self, name: str) -> None:
        self._require_editing("edit the name").name = name or ""

    def set_bio(self, bio: str) -> None:
        self._require_editing("edit the bio").bio = bio or ""

    def set_social(self, platform: SocialPlatform | str, value: str) -> None:
        self._require_editing("edit socials").socials.set(SocialPlatform(platform), value)

    def set_link_name(self, index: int, name: str) -> None:
        self._require_editing("edit links").links[index].name = name or ""

    def set_link_url(self, index: int, url: str) -> None:
        self._require_editing("edit links").links[index].url = url or ""

    def add_link(self, name: str = "", url: str = "") -> int:
        """Append a custom link and return its index."""
        draft = self._require_editing("add a link")
        draft.links.append(Link(name=name, url=url))
        return len(draft.links) - 1

    def remove_link(self, index: int) -> bool:
        """Remove a custom link. Default slots and bad indices are refused."""
        draft = self._require_editing("remove a link")
        if index < DEFAULT_LINK_COUNT or index >= len(draft.links):
            logger.info(
                "profile_link_removal_refused",
                identity_id=self._identity_id,
                index=index,
                link_count=len(draft.links),
            )
            return False
        del draft.links[index]
        return True

    def toggle_role(self, role: Role | str) -> bool:
        """Add the role if absent, remove it if present. Returns new membership."""
        draft = self._require_editing("change roles")
        role = Role(role)
        if role in draft.roles:
            draft.roles.remove(role)
            return False
        draft.roles.append(role)
        return True

    def _require_editing(self, operation: str) -> Profile:
        if self._state is not SessionState.EDITING or self._draft is None:
            raise InvalidSessionStateError(operation, self._state.value)
        return self._draft
