"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock

import pytest

from domain.entities.profile import Link, Profile, Role, Socials
from infrastructure.notifications.toast_notifier import ToastNotifier


@pytest.fixture
def profiles() -> AsyncMock:
    """Mock profile repository."""
    return AsyncMock()


@pytest.fixture
def projects() -> AsyncMock:
    """Mock project repository."""
    return AsyncMock()


@pytest.fixture
def uploader() -> AsyncMock:
    """Mock image uploader."""
    return AsyncMock()


@pytest.fixture
def notifier() -> ToastNotifier:
    """Real notifier so tests can inspect raised messages."""
    return ToastNotifier()


@pytest.fixture
def identity_id() -> str:
    return "u1"


@pytest.fixture
def saved_profile() -> Profile:
    """A profile with every field populated and two custom links."""
    return Profile(
        name="Alice",
        bio="Building onchain games",
        roles=[Role.DEVELOPER, Role.FOUNDER],
        links=[
            Link(name="Site", url="https://alice.dev"),
            Link(name="GitHub", url="https://github.com/alice"),
            Link(name="Blog", url="https://mirror.xyz/alice"),
            Link(name="Farcaster", url="https://warpcast.com/alice"),
        ],
        socials=Socials(telegram="alice", twitter="@alice"),
        profile_image="https://cdn.example/alice.png",
    )
