"""Binary installer use case for obtaining the termpicker executable.

Tries ``go install`` first and falls back to downloading the release
archive for the current platform into the per-user data directory.
No exception escapes install()/run(): each failure is reported through
the notifier and turned into an InstallOutcome.
"""

from __future__ import annotations

import logging
import stat
import tempfile
import uuid
from pathlib import Path

from termpicker_nvim.adapters.ports import (
    ArchiveDownloaderPort,
    ArchiveExtractorPort,
    CommandRunnerPort,
    NotificationLevel,
    NotifierPort,
    PlatformDetectorPort,
)
from termpicker_nvim.domain.binary import InstallOutcome
from termpicker_nvim.domain.exceptions import (
    ArchiveExtractionError,
    BinaryDownloadError,
    PostInstallVerificationError,
    UnsupportedPlatformError,
)
from termpicker_nvim.domain.settings import InstallSettings, PathSettings
from termpicker_nvim.usecases.binary_resolver import BinaryResolver

logger = logging.getLogger(__name__)

GO_PROGRAM = "go"


class BinaryInstaller:
    """Use case for installing the termpicker binary.

    Steps, in order:
    1. Already resolvable: succeed without side effects.
    2. Go available: ``go install <module>``, then re-resolve.
    3. Otherwise, or if step 2 did not yield a live binary: detect the
       platform, download the release archive to a temporary file,
       extract it into the local install directory, mark the binary
       executable and verify it.
    """

    def __init__(
        self,
        resolver: BinaryResolver,
        runner: CommandRunnerPort,
        platform_detector: PlatformDetectorPort,
        downloader: ArchiveDownloaderPort,
        extractor: ArchiveExtractorPort,
        notifier: NotifierPort,
        paths: PathSettings,
        settings: InstallSettings | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        """Initialize the binary installer.

        Args:
            resolver: Resolver whose cache is refreshed on success.
            runner: Port for running ``go install`` and looking up ``go``.
            platform_detector: Port for detecting the download platform.
            downloader: Port for fetching the release archive.
            extractor: Port for unpacking the release archive.
            notifier: Port receiving user-facing progress and errors.
            paths: Filesystem roots (data home) from the environment.
            settings: Install constants. Defaults to the upstream project.
            temp_dir: Directory for the temporary archive. Defaults to the
                system temporary directory.
        """
        self._resolver = resolver
        self._runner = runner
        self._platform_detector = platform_detector
        self._downloader = downloader
        self._extractor = extractor
        self._notifier = notifier
        self._paths = paths
        self._settings = settings or InstallSettings()
        self._temp_dir = temp_dir

    @property
    def install_dir(self) -> Path:
        """Return the local install directory."""
        return self._settings.local_install_dir(self._paths)

    @property
    def binary_path(self) -> Path:
        """Return the path the release archive installs to."""
        return self._settings.local_binary_path(self._paths)

    def install(self) -> bool:
        """Install the binary unless it is already available.

        Returns:
            True if a live binary is available afterwards.
        """
        return self.run().success

    def run(self) -> InstallOutcome:
        """Install the binary and describe what happened.

        Returns:
            InstallOutcome with the resolved path on success.
        """
        existing = self._resolver.path()
        if existing is not None:
            message = f"Termpicker is already installed at {existing}"
            self._notify(message, NotificationLevel.INFO)
            return InstallOutcome.create_success(existing, message)

        self._resolver.invalidate()

        if self._runner.which(GO_PROGRAM) is not None:
            outcome = self._install_with_go()
            if outcome.success:
                return outcome
            self._notify(
                "Go installation failed, trying binary download...",
                NotificationLevel.WARN,
            )
        else:
            self._notify("Go not found, using binary download...", NotificationLevel.INFO)

        return self._install_from_release()

    def _install_with_go(self) -> InstallOutcome:
        self._notify("Installing termpicker with Go...", NotificationLevel.INFO)

        result = self._runner.run([GO_PROGRAM, "install", self._settings.go_module])
        if not result.succeeded:
            return self._fail(
                f"Failed to install termpicker with Go: {result.output.strip()}"
            )

        self._resolver.invalidate()
        path = self._resolver.path()
        if path is None:
            message = "Go installation succeeded but binary not found in expected locations"
            self._notify(message, NotificationLevel.WARN)
            return InstallOutcome.create_failure(message)

        message = f"Termpicker installed successfully with Go to {path}"
        self._notify(message, NotificationLevel.INFO)
        return InstallOutcome.create_success(path, message)

    def _install_from_release(self) -> InstallOutcome:
        try:
            platform = self._platform_detector.detect()
        except UnsupportedPlatformError as e:
            logger.debug("Platform detection failed: %s", e.message)
            return self._fail(
                f"Unsupported platform for binary installation: {e.system}/{e.machine}"
            )

        install_dir = self.install_dir
        binary_path = self.binary_path
        try:
            install_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._fail(f"Failed to create install directory {install_dir}: {e}")

        url = self._settings.release_url(platform)
        temp_file = self._temp_archive_path()

        self._notify("Downloading termpicker binary...", NotificationLevel.INFO)
        try:
            self._downloader.download(url, temp_file)
        except BinaryDownloadError as e:
            temp_file.unlink(missing_ok=True)
            return self._fail(f"Failed to download termpicker: {e.message}")

        try:
            self._extractor.extract(temp_file, install_dir)
        except ArchiveExtractionError as e:
            return self._fail(f"Failed to extract termpicker: {e.message}")
        finally:
            temp_file.unlink(missing_ok=True)

        self._make_executable(binary_path)

        try:
            self._verify(binary_path)
        except PostInstallVerificationError as e:
            return self._fail(str(e))

        message = f"Termpicker binary installed successfully to {binary_path}"
        self._notify(message, NotificationLevel.INFO)
        return InstallOutcome.create_success(binary_path, message)

    def _temp_archive_path(self) -> Path:
        base = self._temp_dir or Path(tempfile.gettempdir())
        return base / f"termpicker-{uuid.uuid4().hex}.tar.gz"

    def _make_executable(self, path: Path) -> None:
        try:
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            # Reported by the verification step that follows
            logger.warning("Could not mark %s executable: %s", path, e)

    def _verify(self, path: Path) -> None:
        if not self._resolver.remember(path):
            raise PostInstallVerificationError(path)

    def _fail(self, message: str) -> InstallOutcome:
        self._notify(message, NotificationLevel.ERROR)
        return InstallOutcome.create_failure(message)

    def _notify(self, message: str, level: NotificationLevel) -> None:
        self._notifier.notify(message, level)
