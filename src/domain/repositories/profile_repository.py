"""Profile store protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Remote document store for profiles, keyed by identity id."""

    async def fetch_profile(self, identity_id: str) -> Profile | None:
        """Get a profile, or None when the store has none for this identity."""
        ...

    async def create_profile(self, identity_id: str, seed: Profile) -> Profile:
        """Store a first-time profile. Calling twice is last-write-wins."""
        ...

    async def replace_profile(self, identity_id: str, full: Profile) -> Profile:
        """Overwrite the whole profile document."""
        ...
