"""Profile domain entity."""

import copy
from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any

import structlog

from domain.entities.identity import CurrentIdentity

logger = structlog.get_logger()


class Role(StrEnum):
    """Builder category a user can tag their profile with."""

    DEVELOPER = "Developer"
    DESIGNER = "Designer"
    FOUNDER = "Founder"
    ARTIST = "Artist"
    CREATOR = "Creator"
    MARKETER = "Marketer"
    INVESTOR = "Investor"
    RESEARCHER = "Researcher"


ROLE_COLORS: dict[Role, str] = {
    Role.DEVELOPER: "bg-blue-100 text-blue-800",
    Role.DESIGNER: "bg-pink-100 text-pink-800",
    Role.FOUNDER: "bg-purple-100 text-purple-800",
    Role.ARTIST: "bg-orange-100 text-orange-800",
    Role.CREATOR: "bg-yellow-100 text-yellow-800",
    Role.MARKETER: "bg-green-100 text-green-800",
    Role.INVESTOR: "bg-emerald-100 text-emerald-800",
    Role.RESEARCHER: "bg-indigo-100 text-indigo-800",
}


class SocialPlatform(StrEnum):
    """Social networks a profile can link to."""

    TELEGRAM = "telegram"
    DISCORD = "discord"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"


DEFAULT_LINK_NAMES: tuple[str, ...] = ("Site", "GitHub")
DEFAULT_LINK_COUNT = len(DEFAULT_LINK_NAMES)


def _text(value: Any) -> str:
    """Coerce a possibly-missing wire value to a string."""
    if value is None:
        return ""
    return str(value)


def _field(document: dict[str, Any], key: str, kind: type) -> Any:
    """Read a container field; missing or null yields an empty one."""
    value = document.get(key)
    if value is None:
        return kind()
    if not isinstance(value, kind):
        raise ValueError(f"{key} must be a {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class Link:
    """A named URL shown on the profile."""

    name: str = ""
    url: str = ""

    def __post_init__(self) -> None:
        self.name = _text(self.name)
        self.url = _text(self.url)


@dataclass
class Socials:
    """Social handles or URLs, one per platform. Empty means unset."""

    telegram: str = ""
    discord: str = ""
    twitter: str = ""
    linkedin: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            setattr(self, f.name, _text(getattr(self, f.name)))

    def get(self, platform: SocialPlatform) -> str:
        return getattr(self, SocialPlatform(platform).value)

    def set(self, platform: SocialPlatform, value: str) -> None:
        setattr(self, SocialPlatform(platform).value, _text(value))

    def has_any(self) -> bool:
        return any(self.get(platform) for platform in SocialPlatform)


def default_links() -> list[Link]:
    """The reserved, non-removable link slots."""
    return [Link(name=name) for name in DEFAULT_LINK_NAMES]


@dataclass
class Profile:
    """Domain entity for a user's public profile.

    Invariants enforced on construction:
        - every string field is a string, never ``None``
        - ``roles`` holds no duplicates and keeps insertion order
        - ``links`` always has at least the default slots
    """

    name: str = ""
    bio: str = ""
    roles: list[Role] = field(default_factory=list)
    links: list[Link] = field(default_factory=default_links)
    socials: Socials = field(default_factory=Socials)
    profile_image: str = ""

    def __post_init__(self) -> None:
        self.name = _text(self.name)
        self.bio = _text(self.bio)
        self.profile_image = _text(self.profile_image)

        unique_roles: list[Role] = []
        for role in self.roles or []:
            role = Role(role)
            if role not in unique_roles:
                unique_roles.append(role)
        self.roles = unique_roles

        self.links = list(self.links or [])
        for index in range(len(self.links), DEFAULT_LINK_COUNT):
            self.links.append(Link(name=DEFAULT_LINK_NAMES[index]))

        if self.socials is None:
            self.socials = Socials()

    @property
    def default_links(self) -> list[Link]:
        return self.links[:DEFAULT_LINK_COUNT]

    @property
    def custom_links(self) -> list[Link]:
        return self.links[DEFAULT_LINK_COUNT:]

    def copy(self) -> "Profile":
        """Return a fully independent copy (no shared links or socials)."""
        return copy.deepcopy(self)

    def to_document(self) -> dict[str, Any]:
        """Serialize to the document shape the store speaks."""
        return {
            "name": self.name,
            "bio": self.bio,
            "roles": [role.value for role in self.roles],
            "links": [{"name": link.name, "url": link.url} for link in self.links],
            "socials": {
                platform.value: self.socials.get(platform) for platform in SocialPlatform
            },
            "profileImage": self.profile_image,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Profile":
        """Build a Profile from a store document, tolerating missing keys.

        Raises:
            ValueError: if ``roles``, ``links`` or ``socials`` has the wrong shape.
        """
        raw_roles = _field(document, "roles", list)
        raw_links = _field(document, "links", list)
        raw_socials = _field(document, "socials", dict)

        roles: list[Role] = []
        for raw_role in raw_roles:
            try:
                roles.append(Role(raw_role))
            except ValueError:
                logger.warning("profile_unknown_role_dropped", role=raw_role)

        links = [
            Link(name=item.get("name"), url=item.get("url"))
            for item in raw_links
            if isinstance(item, dict)
        ]

        socials = Socials(
            **{platform.value: raw_socials.get(platform.value) for platform in SocialPlatform}
        )

        return cls(
            name=document.get("name"),
            bio=document.get("bio"),
            roles=roles,
            links=links,
            socials=socials,
            profile_image=document.get("profileImage"),
        )


def default_profile() -> Profile:
    """The empty profile shown before anything is loaded."""
    return Profile()


def seed_profile(identity: CurrentIdentity) -> Profile:
    """Defaults for a first-time profile, filled from the identity provider."""
    return Profile(
        name=identity.first_name or "",
        profile_image=identity.image_url or "",
    )
