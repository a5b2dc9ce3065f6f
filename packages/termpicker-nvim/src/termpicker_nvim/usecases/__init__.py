"""Use cases: Application logic layer."""

from termpicker_nvim.usecases.binary_installer import BinaryInstaller
from termpicker_nvim.usecases.binary_resolver import BinaryResolver
from termpicker_nvim.usecases.candidate_sources import (
    CandidateSource,
    FixedPathsSource,
    SearchPathSource,
    default_sources,
)
from termpicker_nvim.usecases.color_picker import ColorPicker, PickResult
from termpicker_nvim.usecases.picker_command import (
    build_picker_args,
    parse_picker_output,
    select_starting_color,
)

__all__ = [
    "BinaryInstaller",
    "BinaryResolver",
    "CandidateSource",
    "ColorPicker",
    "FixedPathsSource",
    "PickResult",
    "SearchPathSource",
    "build_picker_args",
    "default_sources",
    "parse_picker_output",
    "select_starting_color",
]
