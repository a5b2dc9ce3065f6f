"""Interface adapters: ports and their process, filesystem and network implementations."""

from termpicker_nvim.adapters.ports import (
    ArchiveDownloaderPort,
    ArchiveExtractorPort,
    CommandRunnerPort,
    FileProbePort,
    NotificationLevel,
    NotifierPort,
    PickerLauncherPort,
    PlatformDetectorPort,
)
from termpicker_nvim.adapters.filesystem_probe import OsFileProbe
from termpicker_nvim.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from termpicker_nvim.adapters.logging_notifier import LoggingNotifier
from termpicker_nvim.adapters.platform_detector import OsPlatformDetector
from termpicker_nvim.adapters.subprocess_command_runner import SubprocessCommandRunner
from termpicker_nvim.adapters.subprocess_picker_launcher import SubprocessPickerLauncher
from termpicker_nvim.adapters.tarfile_archive_extractor import TarfileArchiveExtractor

__all__ = [
    "ArchiveDownloaderPort",
    "ArchiveExtractorPort",
    "CommandRunnerPort",
    "FileProbePort",
    "HttpxArchiveDownloader",
    "LoggingNotifier",
    "NotificationLevel",
    "NotifierPort",
    "OsFileProbe",
    "OsPlatformDetector",
    "PickerLauncherPort",
    "PlatformDetectorPort",
    "SubprocessCommandRunner",
    "SubprocessPickerLauncher",
    "TarfileArchiveExtractor",
]
