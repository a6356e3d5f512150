"""Profile service: resolve or lazily create a profile for an identity."""

import structlog

from core.exceptions import StoreUnavailableError
from domain.entities.identity import CurrentIdentity
from domain.entities.notification import NotificationMessages
from domain.entities.profile import Profile, default_profile, seed_profile
from domain.repositories.notifier import INotifier
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


class ProfileService:
    """Service layer for fetch-or-create profile semantics."""

    def __init__(self, profiles: IProfileRepository, notifier: INotifier) -> None:
        self._profiles = profiles
        self._notifier = notifier

    async def load_or_create(self, identity: CurrentIdentity) -> Profile:
        """Return the stored profile, creating it from identity defaults on first visit.

        Store failures are soft: the user is notified and the default profile is
        returned so the page can still render.
        """
        try:
            profile = await self._profiles.fetch_profile(identity.id)
        except StoreUnavailableError as e:
            logger.warning(
                "profile_fetch_failed",
                identity_id=identity.id,
                error=e.message,
                upstream_status=e.upstream_status,
            )
            self._notifier.error(NotificationMessages.PROFILE_LOAD_FAILED)
            return default_profile()

        if profile is not None:
            return profile

        seed = seed_profile(identity)
        try:
            created = await self._profiles.create_profile(identity.id, seed)
        except StoreUnavailableError as e:
            logger.warning(
                "profile_create_failed",
                identity_id=identity.id,
                error=e.message,
                upstream_status=e.upstream_status,
            )
            self._notifier.error(NotificationMessages.PROFILE_CREATE_FAILED)
            return default_profile()

        logger.info("profile_created", identity_id=identity.id)
        return created
