"""Port interfaces for the termpicker-nvim core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from termpicker_nvim.domain.binary import CommandResult, Platform


class NotificationLevel(Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@runtime_checkable
class CommandRunnerPort(Protocol):
    """Port interface for running external commands.

    Contract:
        - run(args) executes the command and waits for it to finish
        - run() never raises for a non-zero exit; the status is in the result
        - run() output is stdout and stderr combined
        - which(name) searches the command search path, None if not found
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Argument vector; args[0] is the program.

        Returns:
            CommandResult with exit status and combined output.
        """
        ...

    def which(self, name: str) -> Path | None:
        """Locate a program on the command search path.

        Args:
            name: Program name.

        Returns:
            Absolute path to the program, or None if not found.
        """
        ...


@runtime_checkable
class FileProbePort(Protocol):
    """Port interface for liveness checks on candidate binaries.

    Contract:
        - is_file(path) is True only for an existing regular file
        - is_executable(path) is True only if the current user may execute it
        - Both perform a real check on every call (no caching)
    """

    def is_file(self, path: Path) -> bool:
        """Check that path exists and is a regular file."""
        ...

    def is_executable(self, path: Path) -> bool:
        """Check that path has execute permission for the current user."""
        ...


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the current platform.

    Contract:
        - detect() returns the normalized Platform of the running host
        - Raises UnsupportedPlatformError for an unrecognized OS or arch
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Raises:
            UnsupportedPlatformError: If OS or architecture is not recognized.
        """
        ...


@runtime_checkable
class ArchiveDownloaderPort(Protocol):
    """Port interface for fetching a release archive.

    Contract:
        - download(url, destination) writes the response body to destination
        - The parent directory of destination must exist
        - Raises BinaryDownloadError on network or HTTP failure
    """

    def download(self, url: str, destination: Path) -> None:
        """Download url to destination.

        Raises:
            BinaryDownloadError: If the archive cannot be fetched or written.
        """
        ...


@runtime_checkable
class ArchiveExtractorPort(Protocol):
    """Port interface for unpacking a gzip-compressed tar archive.

    Contract:
        - extract(archive, destination) unpacks all members into destination
        - Raises ArchiveExtractionError if the archive is unreadable or unsafe
    """

    def extract(self, archive: Path, destination: Path) -> None:
        """Extract archive into destination.

        Raises:
            ArchiveExtractionError: If extraction fails.
        """
        ...


@runtime_checkable
class NotifierPort(Protocol):
    """Port interface for user-facing notifications.

    Contract:
        - notify() is fire-and-forget (no return value, no exceptions propagated)
        - level is consumed by the host's notification surface
    """

    def notify(self, message: str, level: NotificationLevel) -> None:
        """Deliver a notification.

        Args:
            message: Human-readable message.
            level: Severity of the message.
        """
        ...


@runtime_checkable
class PickerLauncherPort(Protocol):
    """Port interface for running the interactive picker.

    Contract:
        - launch(args) runs the picker attached to the user's terminal
        - The picker UI renders on stderr; stdout is captured
        - Returns the captured stdout lines in order
    """

    def launch(self, args: Sequence[str]) -> list[str]:
        """Run the picker and return its stdout lines."""
        ...
