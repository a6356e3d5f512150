"""Project source protocol."""

from typing import Protocol

from domain.entities.project import Project


class IProjectRepository(Protocol):
    """Read-only access to submitted projects."""

    async def list_for_user(self, identity_id: str) -> list[Project]:
        """Get all projects submitted by an identity."""
        ...
