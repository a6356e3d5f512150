"""In-process toast notifier."""

from collections import deque

import structlog

from domain.entities.notification import Notification, NotificationLevel

logger = structlog.get_logger()

MAX_HISTORY = 50


class ToastNotifier:
    """Collects user-visible notifications for the UI layer to display.

    Every notification is also written to the log.
    """

    def __init__(self, max_history: int = MAX_HISTORY) -> None:
        self._history: deque[Notification] = deque(maxlen=max_history)

    @property
    def history(self) -> list[Notification]:
        return list(self._history)

    def success(self, message: str) -> Notification:
        return self._raise(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._raise(NotificationLevel.ERROR, message)

    def info(self, message: str) -> Notification:
        return self._raise(NotificationLevel.INFO, message)

    def drain(self) -> list[Notification]:
        """Return and forget everything raised so far."""
        pending = list(self._history)
        self._history.clear()
        return pending

    def _raise(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self._history.append(notification)
        logger.info("notification_raised", level=level.value, message=message)
        return notification
