"""Domain layer: Entities with zero external dependencies."""

from termpicker_nvim.domain.binary import CommandResult, InstallOutcome, Platform
from termpicker_nvim.domain.color import ColorFormat, extract_color, is_color
from termpicker_nvim.domain.exceptions import (
    ArchiveExtractionError,
    BinaryDownloadError,
    PostInstallVerificationError,
    ProcessFailureError,
    TermpickerConfigError,
    TermpickerError,
    UnsupportedPlatformError,
)
from termpicker_nvim.domain.settings import (
    BehaviorOptions,
    InstallSettings,
    PathSettings,
    PickerOptions,
    PreviewOptions,
)

__all__ = [
    "ArchiveExtractionError",
    "BehaviorOptions",
    "BinaryDownloadError",
    "ColorFormat",
    "CommandResult",
    "InstallOutcome",
    "InstallSettings",
    "PathSettings",
    "PickerOptions",
    "Platform",
    "PostInstallVerificationError",
    "PreviewOptions",
    "ProcessFailureError",
    "TermpickerConfigError",
    "TermpickerError",
    "UnsupportedPlatformError",
    "extract_color",
    "is_color",
]
