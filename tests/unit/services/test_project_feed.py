"""Unit tests for ProjectFeedReader."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from core.exceptions import StoreUnavailableError
from domain.entities.notification import NotificationMessages
from domain.entities.project import Project
from domain.services.project_feed import FeedStatus, ProjectFeedReader
from infrastructure.notifications.toast_notifier import ToastNotifier


@pytest.fixture
def reader(projects: AsyncMock, notifier: ToastNotifier) -> ProjectFeedReader:
    return ProjectFeedReader(projects, notifier)


class TestLoad:
    @pytest.mark.asyncio
    async def test_returns_projects(self, reader: ProjectFeedReader, projects: AsyncMock):
        items = [Project(id="p1", user_id="u1", title="Onchain Chess")]
        projects.list_for_user.return_value = items

        feed = await reader.load("u1")

        assert feed.status is FeedStatus.PROJECTS
        assert feed.projects == tuple(items)
        projects.list_for_user.assert_called_once_with("u1")

    @pytest.mark.asyncio
    async def test_empty_result_shows_call_to_action(
        self, reader: ProjectFeedReader, projects: AsyncMock, notifier: ToastNotifier
    ):
        projects.list_for_user.return_value = []

        feed = await reader.load("u1")

        assert feed.status is FeedStatus.CALL_TO_ACTION
        assert feed.projects == ()
        assert notifier.history == []

    @pytest.mark.asyncio
    async def test_failure_hides_feed_and_notifies(
        self, reader: ProjectFeedReader, projects: AsyncMock, notifier: ToastNotifier
    ):
        projects.list_for_user.side_effect = StoreUnavailableError("list projects", 500)

        feed = await reader.load("u1")

        assert feed.status is FeedStatus.HIDDEN
        assert feed.projects == ()
        assert notifier.history[-1].message == NotificationMessages.PROJECTS_LOAD_FAILED
        assert reader.is_loading is False

    @pytest.mark.asyncio
    async def test_is_loading_while_in_flight(self, reader: ProjectFeedReader, projects: AsyncMock):
        release = asyncio.Event()
        observed = []

        async def slow(identity_id: str) -> list[Project]:
            observed.append(reader.is_loading)
            await release.wait()
            return []

        projects.list_for_user.side_effect = slow
        task = asyncio.create_task(reader.load("u1"))
        await asyncio.sleep(0)
        release.set()
        await task

        assert observed == [True]
        assert reader.is_loading is False
