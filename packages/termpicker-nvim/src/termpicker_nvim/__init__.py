"""termpicker-nvim: locate, install and drive the termpicker color picker."""

__version__ = "0.1.0"

from termpicker_nvim.domain.color import extract_color, is_color
from termpicker_nvim.domain.exceptions import TermpickerConfigError, TermpickerError
from termpicker_nvim.domain.settings import PickerOptions
from termpicker_nvim.factories import (
    create_color_picker,
    create_installer,
    create_resolver,
)
from termpicker_nvim.usecases.binary_installer import BinaryInstaller
from termpicker_nvim.usecases.binary_resolver import BinaryResolver
from termpicker_nvim.usecases.color_picker import ColorPicker, PickResult

__all__ = [
    "BinaryInstaller",
    "BinaryResolver",
    "ColorPicker",
    "PickResult",
    "PickerOptions",
    "TermpickerConfigError",
    "TermpickerError",
    "create_color_picker",
    "create_installer",
    "create_resolver",
    "extract_color",
    "is_color",
]
