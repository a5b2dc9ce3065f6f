"""Factory functions wiring use cases to their production adapters."""

from __future__ import annotations

from collections.abc import Mapping

from termpicker_nvim.adapters.filesystem_probe import OsFileProbe
from termpicker_nvim.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from termpicker_nvim.adapters.logging_notifier import LoggingNotifier
from termpicker_nvim.adapters.platform_detector import OsPlatformDetector
from termpicker_nvim.adapters.ports import CommandRunnerPort, NotifierPort
from termpicker_nvim.adapters.subprocess_command_runner import SubprocessCommandRunner
from termpicker_nvim.adapters.subprocess_picker_launcher import SubprocessPickerLauncher
from termpicker_nvim.adapters.tarfile_archive_extractor import TarfileArchiveExtractor
from termpicker_nvim.domain.settings import InstallSettings, PathSettings, PickerOptions
from termpicker_nvim.usecases.binary_installer import BinaryInstaller
from termpicker_nvim.usecases.binary_resolver import BinaryResolver
from termpicker_nvim.usecases.candidate_sources import default_sources
from termpicker_nvim.usecases.color_picker import ColorPicker, ConfirmCallback


def create_resolver(
    environ: Mapping[str, str] | None = None,
    runner: CommandRunnerPort | None = None,
    settings: InstallSettings | None = None,
) -> BinaryResolver:
    """Create a BinaryResolver searching the standard locations.

    Args:
        environ: Environment mapping (defaults to os.environ).
        runner: Command runner for the PATH lookup.
        settings: Install settings naming the binary.

    Returns:
        A resolver with its own empty cache.
    """
    settings = settings or InstallSettings()
    paths = PathSettings.from_environ(environ)
    return BinaryResolver(
        file_probe=OsFileProbe(),
        sources=default_sources(runner or SubprocessCommandRunner(), paths, settings),
    )


def create_installer(
    resolver: BinaryResolver | None = None,
    environ: Mapping[str, str] | None = None,
    notifier: NotifierPort | None = None,
    settings: InstallSettings | None = None,
) -> BinaryInstaller:
    """Create a BinaryInstaller backed by subprocess, httpx and tarfile.

    Args:
        resolver: Resolver to update on success. Created if omitted.
        environ: Environment mapping (defaults to os.environ).
        notifier: Notification sink (defaults to LoggingNotifier).
        settings: Install settings (defaults to the upstream project).

    Returns:
        A ready-to-use installer.
    """
    settings = settings or InstallSettings()
    runner = SubprocessCommandRunner()
    return BinaryInstaller(
        resolver=resolver or create_resolver(environ, runner, settings),
        runner=runner,
        platform_detector=OsPlatformDetector(),
        downloader=HttpxArchiveDownloader(),
        extractor=TarfileArchiveExtractor(),
        notifier=notifier or LoggingNotifier(),
        paths=PathSettings.from_environ(environ),
        settings=settings,
    )


def create_color_picker(
    confirm: ConfirmCallback | None = None,
    options: PickerOptions | None = None,
    environ: Mapping[str, str] | None = None,
    notifier: NotifierPort | None = None,
) -> ColorPicker:
    """Create a ColorPicker sharing one resolver with its installer.

    Args:
        confirm: Callback asked before installing a missing binary.
        options: Global picker options.
        environ: Environment mapping (defaults to os.environ).
        notifier: Notification sink (defaults to LoggingNotifier).

    Returns:
        A ready-to-use color picker.
    """
    notifier = notifier or LoggingNotifier()
    resolver = create_resolver(environ)
    installer = create_installer(resolver=resolver, environ=environ, notifier=notifier)
    return ColorPicker(
        resolver=resolver,
        installer=installer,
        launcher=SubprocessPickerLauncher(),
        notifier=notifier,
        options=options,
        confirm=confirm,
    )
