"""Unit tests for OsPlatformDetector adapter."""

from unittest.mock import patch

import pytest

from termpicker_nvim.adapters.platform_detector import OsPlatformDetector
from termpicker_nvim.adapters.ports import PlatformDetectorPort
from termpicker_nvim.domain.binary import Platform
from termpicker_nvim.domain.exceptions import UnsupportedPlatformError


@pytest.mark.tier(1)
@pytest.mark.unit
@pytest.mark.tra("Adapter.OsPlatformDetector")
class TestOsPlatformDetector:
    """Test OsPlatformDetector implementation."""

    def test_satisfies_protocol(self) -> None:
        """Test that OsPlatformDetector satisfies PlatformDetectorPort protocol."""
        assert isinstance(OsPlatformDetector(), PlatformDetectorPort)

    @patch("platform.system")
    @patch("platform.machine")
    def test_detect_on_linux_amd64(self, mock_machine, mock_system) -> None:
        """Test detection on Linux x86_64 system."""
        mock_system.return_value = "Linux"
        mock_machine.return_value = "x86_64"

        result = OsPlatformDetector().detect()

        assert result == Platform(os="linux", arch="amd64")

    @patch("platform.system")
    @patch("platform.machine")
    def test_detect_on_darwin_arm64(self, mock_machine, mock_system) -> None:
        """Test detection on Apple Silicon."""
        mock_system.return_value = "Darwin"
        mock_machine.return_value = "arm64"

        result = OsPlatformDetector().detect()

        assert result.identifier == "darwin-arm64"

    @patch("platform.system")
    @patch("platform.machine")
    def test_detect_on_raspberry_pi(self, mock_machine, mock_system) -> None:
        """Test 32-bit ARM maps to arm."""
        mock_system.return_value = "Linux"
        mock_machine.return_value = "armv7l"

        assert OsPlatformDetector().detect().identifier == "linux-arm"

    @patch("platform.system")
    @patch("platform.machine")
    def test_unsupported_os_raises(self, mock_machine, mock_system) -> None:
        """Test that an unknown OS raises UnsupportedPlatformError."""
        mock_system.return_value = "SunOS"
        mock_machine.return_value = "x86_64"

        with pytest.raises(UnsupportedPlatformError) as exc_info:
            OsPlatformDetector().detect()

        assert exc_info.value.system == "SunOS"

    @patch("platform.system")
    @patch("platform.machine")
    def test_unsupported_arch_raises(self, mock_machine, mock_system) -> None:
        """Test that an unknown architecture raises UnsupportedPlatformError."""
        mock_system.return_value = "Linux"
        mock_machine.return_value = "s390x"

        with pytest.raises(UnsupportedPlatformError, match="s390x"):
            OsPlatformDetector().detect()
