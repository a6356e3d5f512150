"""Turn free-text handles and URLs into clickable destinations.

Normalization happens only at render time. Stored profiles keep the raw
user input, so these functions never feed back into a commit.

    >>> normalize_social("twitter", "@alice")
    'https://twitter.com/alice'
    >>> normalize_social("telegram", "bob")
    'https://t.me/bob'
    >>> normalize_social("discord", "   ") is None
    True
"""

import re

from domain.entities.profile import SocialPlatform

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

TELEGRAM_TEMPLATE = "https://t.me/{value}"
DISCORD_TEMPLATE = "discord://-/users/{value}"
TWITTER_TEMPLATE = "https://twitter.com/{value}"
LINKEDIN_TEMPLATE = "https://{value}"


def has_scheme(value: str) -> bool:
    """True if ``value`` already starts with ``<scheme>://``."""
    return bool(_SCHEME_RE.match(value))


def normalize_social(platform: SocialPlatform | str, raw: str | None) -> str | None:
    """Build the URI for a social handle, or None when nothing should render.

    Raises:
        ValueError: if ``platform`` is not a known social platform.
    """
    platform = SocialPlatform(platform)
    value = (raw or "").strip()
    if not value:
        return None
    if has_scheme(value):
        return value

    if platform is SocialPlatform.TELEGRAM:
        return TELEGRAM_TEMPLATE.format(value=value)
    if platform is SocialPlatform.DISCORD:
        return DISCORD_TEMPLATE.format(value=value)
    if platform is SocialPlatform.TWITTER:
        handle = value.removeprefix("@")
        return TWITTER_TEMPLATE.format(value=handle) if handle else None
    # LinkedIn handles are not expanded to /in/<handle>; only the scheme is added.
    return LINKEDIN_TEMPLATE.format(value=value)


def normalize_link_url(raw: str | None) -> str | None:
    """URL for a site/custom link, or None when it is blank."""
    value = (raw or "").strip()
    return value or None
