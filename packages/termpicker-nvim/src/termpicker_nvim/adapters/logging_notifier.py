"""Notifier adapter that routes user notifications to stdlib logging."""

from __future__ import annotations

import logging

from termpicker_nvim.adapters.ports import NotificationLevel

_LEVELS: dict[NotificationLevel, int] = {
    NotificationLevel.INFO: logging.INFO,
    NotificationLevel.WARN: logging.WARNING,
    NotificationLevel.ERROR: logging.ERROR,
}


class LoggingNotifier:
    """Adapter implementing NotifierPort on top of a logging.Logger.

    Args:
        logger: Logger to write to. Defaults to the ``termpicker_nvim`` logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("termpicker_nvim")

    def notify(self, message: str, level: NotificationLevel) -> None:
        """Log message at the logging level matching level."""
        self._logger.log(_LEVELS[level], message)
