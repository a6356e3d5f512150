"""User notification channel protocol."""

from typing import Protocol

from domain.entities.notification import Notification


class INotifier(Protocol):
    """Channel for user-visible success and error messages."""

    def success(self, message: str) -> Notification:
        """Raise a success notification."""
        ...

    def error(self, message: str) -> Notification:
        """Raise an error notification."""
        ...
