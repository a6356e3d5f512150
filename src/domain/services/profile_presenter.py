"""Render-time view of a profile."""

from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import quote

from domain.entities.identity import CurrentIdentity
from domain.entities.profile import ROLE_COLORS, Profile, Role, SocialPlatform
from domain.services.link_normalizer import normalize_link_url, normalize_social

NO_BIO_TEXT = "No bio yet"
DEFAULT_AVATAR_ALT = "Profile picture"


class AvatarAffordance(StrEnum):
    """What the avatar overlay offers."""

    NONE = "none"
    UPLOAD = "upload"
    BUSY = "busy"


@dataclass(frozen=True)
class RoleTag:
    role: Role
    color_class: str


@dataclass(frozen=True)
class RenderedLink:
    name: str
    url: str


@dataclass(frozen=True)
class RenderedSocial:
    platform: SocialPlatform
    url: str


@dataclass(frozen=True)
class ProfileView:
    """Everything a page needs to draw a profile card."""

    display_name: str
    bio: str
    avatar_url: str
    avatar_alt: str
    avatar_affordance: AvatarAffordance
    role_tags: tuple[RoleTag, ...]
    default_links: tuple[RenderedLink, ...]
    social_links: tuple[RenderedSocial, ...]
    custom_links: tuple[RenderedLink, ...]


def present_profile(
    profile: Profile,
    identity: CurrentIdentity | None = None,
    *,
    editing: bool = False,
    uploading: bool = False,
    placeholder_image: str = "/placeholder.jpg",
) -> ProfileView:
    """Apply display fallbacks and link normalization to a profile.

    Blank links and socials are left out rather than rendered as broken
    anchors.
    """
    first_name = identity.first_name if identity else None
    identity_image = identity.image_url if identity else None

    if not editing:
        affordance = AvatarAffordance.NONE
    elif uploading:
        affordance = AvatarAffordance.BUSY
    else:
        affordance = AvatarAffordance.UPLOAD

    default_links = []
    for link in profile.default_links:
        url = normalize_link_url(link.url)
        if url:
            default_links.append(RenderedLink(name=link.name, url=url))

    custom_links = []
    for link in profile.custom_links:
        url = normalize_link_url(link.url)
        if link.name.strip() and url:
            custom_links.append(RenderedLink(name=link.name, url=url))

    social_links = []
    for platform in SocialPlatform:
        url = normalize_social(platform, profile.socials.get(platform))
        if url:
            social_links.append(RenderedSocial(platform=platform, url=url))

    return ProfileView(
        display_name=profile.name or first_name or "",
        bio=profile.bio or NO_BIO_TEXT,
        avatar_url=profile.profile_image or identity_image or placeholder_image,
        avatar_alt=profile.name or DEFAULT_AVATAR_ALT,
        avatar_affordance=affordance,
        role_tags=tuple(RoleTag(role=role, color_class=ROLE_COLORS[role]) for role in profile.roles),
        default_links=tuple(default_links),
        social_links=tuple(social_links),
        custom_links=tuple(custom_links),
    )


def build_share_url(site_url: str, identity_id: str) -> str:
    """Public link to an identity's profile page."""
    return f"{site_url.rstrip('/')}/profile/{quote(identity_id, safe='')}"
