"""Unit tests for LoggingNotifier adapter."""

import logging

import pytest

from termpicker_nvim.adapters.logging_notifier import LoggingNotifier
from termpicker_nvim.adapters.ports import NotificationLevel, NotifierPort


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.LoggingNotifier")
class TestLoggingNotifier:
    """Test notifications are routed to logging."""

    def test_satisfies_protocol(self):
        assert isinstance(LoggingNotifier(), NotifierPort)

    @pytest.mark.parametrize(
        "level,expected",
        [
            (NotificationLevel.INFO, logging.INFO),
            (NotificationLevel.WARN, logging.WARNING),
            (NotificationLevel.ERROR, logging.ERROR),
        ],
    )
    def test_level_mapping(self, caplog, level, expected):
        caplog.set_level(logging.DEBUG, logger="termpicker_nvim")

        LoggingNotifier().notify("Downloading termpicker binary...", level)

        assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
            ("termpicker_nvim", expected, "Downloading termpicker binary...")
        ]

    def test_custom_logger(self, caplog):
        logger = logging.getLogger("editor.notify")
        caplog.set_level(logging.INFO, logger="editor.notify")

        LoggingNotifier(logger).notify("hello", NotificationLevel.INFO)

        assert caplog.records[0].name == "editor.notify"
