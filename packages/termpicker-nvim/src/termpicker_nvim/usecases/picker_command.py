"""Construction of termpicker command lines."""

from __future__ import annotations

from pathlib import Path

from termpicker_nvim.domain.color import is_color
from termpicker_nvim.domain.settings import PickerOptions


def select_starting_color(
    options: PickerOptions,
    initial_color: str | None,
) -> str | None:
    """Choose the color passed to ``--color``.

    Precedence:
    1. options.starting_color, when behavior.prefer_config_color is set
    2. initial_color (e.g. taken from the visual selection)
    3. options.starting_color
    4. None, leaving termpicker's own default

    Candidates that are not a valid color are skipped.
    """
    configured = options.starting_color if is_color(options.starting_color) else None

    if options.behavior.prefer_config_color and configured:
        return configured
    if is_color(initial_color):
        return initial_color
    return configured


def build_picker_args(
    binary: Path,
    options: PickerOptions,
    initial_color: str | None = None,
) -> list[str]:
    """Build the argument vector for a one-shot termpicker run.

    Args:
        binary: Path to the termpicker executable.
        options: Merged picker options.
        initial_color: Color found in the user's selection, if any.

    Returns:
        Argument vector starting with the binary path.
    """
    args = [str(binary), "--oneshot"]

    color = select_starting_color(options, initial_color)
    if color is not None:
        args.extend(["--color", color])

    preview = options.preview
    if preview.text is not None:
        args.extend(["--sample-text", preview.text])
    if preview.background is not None:
        args.extend(["--background-sample", preview.background])
    if preview.foreground is not None:
        args.extend(["--foreground-sample", preview.foreground])

    return args


def parse_picker_output(lines: list[str]) -> str | None:
    """Return the last stdout line that is a color once trimmed."""
    color = None
    for line in lines:
        trimmed = line.strip()
        if trimmed and is_color(trimmed):
            color = trimmed
    return color
