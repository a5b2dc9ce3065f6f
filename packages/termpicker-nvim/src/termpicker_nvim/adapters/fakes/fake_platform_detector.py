"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from termpicker_nvim.domain.binary import Platform
from termpicker_nvim.domain.exceptions import UnsupportedPlatformError


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector.from_raw("Linux", "x86_64")
        >>> fake.detect()
        Platform(os='linux', arch='amd64')
    """

    def __init__(
        self,
        platform: Platform | None = None,
        exception: BaseException | None = None,
    ) -> None:
        """Initialize with the platform to return or the error to raise.

        Args:
            platform: The Platform value object to return from detect().
            exception: Exception to raise from detect() instead.
        """
        self._platform = platform
        self._exception = exception
        self.detect_count = 0

    @classmethod
    def from_raw(cls, system: str, machine: str) -> FakePlatformDetector:
        """Create a detector behaving like a host reporting these raw values.

        Unrecognized values produce a detector whose detect() raises
        the same UnsupportedPlatformError the real adapter would.
        """
        try:
            return cls(platform=Platform.from_raw(system, machine))
        except UnsupportedPlatformError as e:
            return cls(exception=e)

    def detect(self) -> Platform:
        """Return the configured platform or raise the configured error."""
        self.detect_count += 1
        if self._exception is not None:
            raise self._exception
        assert self._platform is not None
        return self._platform
