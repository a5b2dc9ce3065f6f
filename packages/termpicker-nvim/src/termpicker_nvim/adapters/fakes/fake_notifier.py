"""Fake notifier for testing."""

from __future__ import annotations

from dataclasses import dataclass

from termpicker_nvim.adapters.ports import NotificationLevel


@dataclass(frozen=True)
class Notification:
    """Record of a single notification.

    Attributes:
        message: Notification text.
        level: Severity.
    """

    message: str
    level: NotificationLevel


class FakeNotifier:
    """Fake notifier that captures notifications for assertion.

    Example:
        notifier = FakeNotifier()
        installer.install()
        assert notifier.messages(NotificationLevel.WARN) == [...]
    """

    def __init__(self) -> None:
        """Initialize with no recorded notifications."""
        self._notifications: list[Notification] = []

    @property
    def notifications(self) -> list[Notification]:
        """Return a copy of all recorded notifications."""
        return list(self._notifications)

    def messages(self, level: NotificationLevel | None = None) -> list[str]:
        """Return recorded messages, optionally filtered by level."""
        return [
            n.message
            for n in self._notifications
            if level is None or n.level is level
        ]

    def notify(self, message: str, level: NotificationLevel) -> None:
        """Record a notification."""
        self._notifications.append(Notification(message, level))

    def clear(self) -> None:
        """Clear all recorded notifications."""
        self._notifications.clear()
