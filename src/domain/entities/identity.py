"""Identity supplied by the external sign-in provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentIdentity:
    """The signed-in user for one session.

    Injected once per session rather than read from ambient state.
    """

    id: str
    first_name: str | None = None
    image_url: str | None = None
    email: str | None = None
