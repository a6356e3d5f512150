"""Unit tests for ProfileService."""

from unittest.mock import AsyncMock

import pytest

from core.exceptions import StoreUnavailableError
from domain.entities.identity import CurrentIdentity
from domain.entities.notification import NotificationLevel, NotificationMessages
from domain.entities.profile import Profile, default_profile
from domain.services.profile_service import ProfileService
from infrastructure.notifications.toast_notifier import ToastNotifier


@pytest.fixture
def service(profiles: AsyncMock, notifier: ToastNotifier) -> ProfileService:
    return ProfileService(profiles, notifier)


@pytest.fixture
def identity() -> CurrentIdentity:
    return CurrentIdentity(id="u1", first_name="Alice", image_url="https://img/alice.png")


class TestLoadOrCreate:
    @pytest.mark.asyncio
    async def test_returns_existing_profile_without_creating(
        self, service: ProfileService, profiles: AsyncMock, identity, saved_profile: Profile
    ):
        profiles.fetch_profile.return_value = saved_profile

        result = await service.load_or_create(identity)

        assert result == saved_profile
        profiles.create_profile.assert_not_called()

    @pytest.mark.asyncio
    async def test_creates_seeded_profile_on_not_found(
        self, service: ProfileService, profiles: AsyncMock, identity
    ):
        profiles.fetch_profile.return_value = None
        profiles.create_profile.side_effect = lambda identity_id, seed: seed

        result = await service.load_or_create(identity)

        profiles.create_profile.assert_called_once()
        identity_id, seed = profiles.create_profile.call_args.args
        assert identity_id == "u1"
        assert seed.name == "Alice"
        assert seed.profile_image == "https://img/alice.png"
        assert result == seed

    @pytest.mark.asyncio
    async def test_fetch_failure_degrades_to_defaults(
        self, service: ProfileService, profiles: AsyncMock, notifier: ToastNotifier, identity
    ):
        profiles.fetch_profile.side_effect = StoreUnavailableError("fetch", 500)

        result = await service.load_or_create(identity)

        assert result == default_profile()
        profiles.create_profile.assert_not_called()
        assert [(n.level, n.message) for n in notifier.history] == [
            (NotificationLevel.ERROR, NotificationMessages.PROFILE_LOAD_FAILED)
        ]

    @pytest.mark.asyncio
    async def test_create_failure_degrades_to_defaults(
        self, service: ProfileService, profiles: AsyncMock, notifier: ToastNotifier, identity
    ):
        profiles.fetch_profile.return_value = None
        profiles.create_profile.side_effect = StoreUnavailableError("create", 502)

        result = await service.load_or_create(identity)

        assert result == default_profile()
        assert notifier.history[-1].message == NotificationMessages.PROFILE_CREATE_FAILED

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(
        self, service: ProfileService, profiles: AsyncMock, identity
    ):
        profiles.fetch_profile.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await service.load_or_create(identity)
