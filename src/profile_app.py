"""Wiring for the profile page client."""

import httpx

from core.config import Settings, settings
from domain.entities.identity import CurrentIdentity
from domain.repositories.notifier import INotifier
from domain.services.profile_page import ProfilePage
from infrastructure.http.profile_repo import HTTPProfileRepository
from infrastructure.http.project_repo import HTTPProjectRepository
from infrastructure.http.uploader import HTTPImageUploader
from infrastructure.notifications.toast_notifier import ToastNotifier


def build_profile_page(
    identity: CurrentIdentity | None,
    client: httpx.AsyncClient,
    *,
    current_path: str = "/profile",
    notifier: INotifier | None = None,
    config: Settings = settings,
) -> ProfilePage:
    """Build a profile page whose store calls all go through ``client``."""
    return ProfilePage(
        identity,
        current_path=current_path,
        profiles=HTTPProfileRepository(client),
        projects=HTTPProjectRepository(client),
        uploader=HTTPImageUploader(client),
        notifier=notifier or ToastNotifier(),
        sign_in_path=config.sign_in_path,
        site_url=config.site_url,
        placeholder_image=config.placeholder_image,
    )
