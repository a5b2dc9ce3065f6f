"""Binary-related domain value objects.

This module contains value objects for locating and installing the
termpicker binary: the normalized platform identifier, the outcome of
an install attempt, and the result of running an external command.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from termpicker_nvim.domain.exceptions import (
    TermpickerConfigError,
    UnsupportedPlatformError,
)

OsName = Literal["linux", "darwin", "windows"]
ArchName = Literal["amd64", "arm64", "arm"]

# Raw OS names (lowercased) mapped to release artifact OS names
OS_MAP: dict[str, OsName] = {
    "linux": "linux",
    "darwin": "darwin",
    "windows": "windows",
}

# Raw machine names (lowercased) mapped to release artifact arch names
ARCH_MAP: dict[str, ArchName] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "arm64": "arm64",
    "aarch64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
}


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Immutable value object that selects which release artifact to
    download. Its string form is the ``<os>-<arch>`` identifier used
    in release archive names.

    Attributes:
        os: Operating system, one of 'linux', 'darwin', 'windows'.
        arch: Architecture, one of 'amd64', 'arm64', 'arm'.
    """

    os: OsName
    arch: ArchName

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a valid value."""
        valid_os = tuple(sorted(set(OS_MAP.values())))
        if self.os not in valid_os:
            raise TermpickerConfigError(
                f"os must be one of {valid_os}, got: {self.os!r}"
            )

    def _validate_arch(self) -> None:
        """Validate arch is a valid value."""
        valid_arch = tuple(sorted(set(ARCH_MAP.values())))
        if self.arch not in valid_arch:
            raise TermpickerConfigError(
                f"arch must be one of {valid_arch}, got: {self.arch!r}"
            )

    @classmethod
    def from_raw(cls, system: str, machine: str) -> Platform:
        """Normalize raw OS-reported strings into a Platform.

        Accepts values such as those returned by ``platform.system()``
        and ``platform.machine()`` ('Darwin', 'x86_64', 'aarch64', ...).

        Args:
            system: Raw operating system name.
            machine: Raw machine/architecture name.

        Returns:
            Platform instance.

        Raises:
            UnsupportedPlatformError: If either value is not recognized.
        """
        os_name = OS_MAP.get(system.lower())
        arch_name = ARCH_MAP.get(machine.lower())

        if os_name is None or arch_name is None:
            raise UnsupportedPlatformError(
                f"Unsupported platform for binary installation: {system!r}/{machine!r}",
                system=system,
                machine=machine,
            )

        return cls(os=os_name, arch=arch_name)

    @property
    def identifier(self) -> str:
        """Return the ``<os>-<arch>`` release identifier."""
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.identifier


@dataclass(frozen=True)
class CommandResult:
    """Result of running an external command.

    Attributes:
        returncode: Process exit status.
        output: Combined stdout and stderr text.
    """

    returncode: int
    output: str

    @property
    def succeeded(self) -> bool:
        """Return True if the command exited with status 0."""
        return self.returncode == 0


@dataclass(frozen=True)
class InstallOutcome:
    """Result of an install attempt.

    Immutable value object reported to the caller; never persisted.

    Attributes:
        success: True if a live binary is available after the attempt.
        message: Human-readable description of what happened.
        path: Resolved binary path on success, None otherwise.
    """

    success: bool
    message: str
    path: Path | None = None

    @classmethod
    def create_success(cls, path: Path, message: str) -> InstallOutcome:
        """Create a success outcome.

        Args:
            path: Path to the live binary.
            message: Description of how the binary was obtained.

        Returns:
            InstallOutcome indicating success.
        """
        return cls(success=True, message=message, path=path)

    @classmethod
    def create_failure(cls, message: str) -> InstallOutcome:
        """Create a failure outcome.

        Args:
            message: Description of the step that failed.

        Returns:
            InstallOutcome indicating failure.
        """
        return cls(success=False, message=message, path=None)
