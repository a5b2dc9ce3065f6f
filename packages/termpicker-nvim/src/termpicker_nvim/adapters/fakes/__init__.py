"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real processes, network or terminals.
"""

from termpicker_nvim.adapters.fakes.fake_archive_downloader import FakeArchiveDownloader
from termpicker_nvim.adapters.fakes.fake_archive_extractor import FakeArchiveExtractor
from termpicker_nvim.adapters.fakes.fake_command_runner import FakeCommandRunner
from termpicker_nvim.adapters.fakes.fake_file_probe import FakeFileProbe
from termpicker_nvim.adapters.fakes.fake_notifier import FakeNotifier, Notification
from termpicker_nvim.adapters.fakes.fake_picker_launcher import FakePickerLauncher
from termpicker_nvim.adapters.fakes.fake_platform_detector import FakePlatformDetector

__all__ = [
    "FakeArchiveDownloader",
    "FakeArchiveExtractor",
    "FakeCommandRunner",
    "FakeFileProbe",
    "FakeNotifier",
    "FakePickerLauncher",
    "FakePlatformDetector",
    "Notification",
]
