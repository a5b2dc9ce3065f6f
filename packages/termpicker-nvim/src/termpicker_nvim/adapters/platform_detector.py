"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from termpicker_nvim.domain.binary import Platform


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by passing platform.system() and
    platform.machine() through Platform.from_raw().

    Supported platforms:
        - OS: linux, darwin, windows
        - Architecture: amd64, arm64, arm

    Machine type mappings:
        - x86_64, AMD64 -> amd64
        - aarch64, arm64 -> arm64
        - armv7l, armv6l -> arm
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            UnsupportedPlatformError: If the current OS or architecture is not supported.
        """
        return Platform.from_raw(platform.system(), platform.machine())
