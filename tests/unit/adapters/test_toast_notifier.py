"""Unit tests for ToastNotifier."""

from domain.entities.notification import NotificationLevel
from infrastructure.notifications.toast_notifier import ToastNotifier


class TestToastNotifier:
    def test_records_levels_and_messages(self):
        notifier = ToastNotifier()

        notifier.success("saved")
        notifier.error("failed")
        notifier.info("fyi")

        assert [(n.level, n.message) for n in notifier.history] == [
            (NotificationLevel.SUCCESS, "saved"),
            (NotificationLevel.ERROR, "failed"),
            (NotificationLevel.INFO, "fyi"),
        ]

    def test_history_is_bounded(self):
        notifier = ToastNotifier(max_history=2)

        for i in range(5):
            notifier.error(f"e{i}")

        assert [n.message for n in notifier.history] == ["e3", "e4"]

    def test_drain_returns_and_clears(self):
        notifier = ToastNotifier()
        notifier.success("one")

        drained = notifier.drain()

        assert [n.message for n in drained] == ["one"]
        assert notifier.history == []
