"""Domain exceptions.

Exception hierarchy:
- TermpickerError: Base domain exception.
  - TermpickerConfigError: Invalid settings or picker options.
  - UnsupportedPlatformError: OS/architecture pair has no release artifact.
  - ProcessFailureError: An external command exited non-zero.
  - BinaryDownloadError: Release archive could not be fetched.
  - ArchiveExtractionError: Release archive could not be unpacked.
  - PostInstallVerificationError: Installed file is not a live executable.

Adapters raise these; use cases catch them and convert them into
result objects plus user notifications.
"""

from __future__ import annotations

from pathlib import Path


class TermpickerError(Exception):
    """Base exception for all termpicker-nvim domain errors."""

    pass


class TermpickerConfigError(TermpickerError):
    """Raised when settings or picker options are invalid.

    Raised by domain value objects (e.g., Platform, PickerOptions)
    from their __post_init__ validation.
    """

    pass


class UnsupportedPlatformError(TermpickerError):
    """Raised when the current OS or architecture is not recognized.

    Fatal for the binary download path only; a package-manager install
    may still succeed on such a platform.

    Attributes:
        system: Raw OS name as reported by the host.
        machine: Raw machine/architecture name as reported by the host.
    """

    def __init__(self, message: str, system: str, machine: str) -> None:
        """Initialize UnsupportedPlatformError.

        Args:
            message: Human-readable error description.
            system: Raw OS name that was inspected.
            machine: Raw architecture name that was inspected.
        """
        super().__init__(message)
        self.message = message
        self.system = system
        self.machine = machine


class ProcessFailureError(TermpickerError):
    """Raised when an external command returns a non-zero exit status.

    Attributes:
        command: The argument vector that was executed.
        returncode: Exit status of the process.
        output: Combined stdout and stderr captured from the process.
    """

    def __init__(self, command: list[str], returncode: int, output: str) -> None:
        """Initialize ProcessFailureError.

        Args:
            command: The argument vector that was executed.
            returncode: Exit status of the process.
            output: Combined stdout and stderr text.
        """
        message = f"Command {' '.join(command)!r} exited with status {returncode}"
        if output:
            message = f"{message}: {output.strip()}"
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.output = output


class BinaryDownloadError(TermpickerError):
    """Raised when the release archive download fails.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to download (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize BinaryDownloadError.

        Args:
            message: Human-readable error description.
            url: The URL that failed to download.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error


class ArchiveExtractionError(TermpickerError):
    """Raised when a downloaded archive cannot be extracted.

    Attributes:
        message: Human-readable error description.
        archive: Path of the archive that failed to extract.
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        archive: Path,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.archive = archive
        self.original_error = original_error


class PostInstallVerificationError(TermpickerError):
    """Raised when an extracted binary fails the liveness check.

    Attributes:
        path: The path that was expected to hold an executable.
    """

    def __init__(self, path: Path) -> None:
        super().__init__("Installation completed but binary is not executable")
        self.path = path
