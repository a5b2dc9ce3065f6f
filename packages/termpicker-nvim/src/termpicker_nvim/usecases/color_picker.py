"""Color picker use case tying resolution, installation and the picker together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from termpicker_nvim.adapters.ports import (
    NotificationLevel,
    NotifierPort,
    PickerLauncherPort,
)
from termpicker_nvim.domain.color import extract_color
from termpicker_nvim.domain.exceptions import ProcessFailureError
from termpicker_nvim.domain.settings import PickerOptions
from termpicker_nvim.usecases.binary_installer import BinaryInstaller
from termpicker_nvim.usecases.binary_resolver import BinaryResolver
from termpicker_nvim.usecases.picker_command import (
    build_picker_args,
    parse_picker_output,
)

logger = logging.getLogger(__name__)

INSTALL_PROMPT = "Termpicker binary not found. Would you like to install it?"

ConfirmCallback = Callable[[str], bool]


@dataclass(frozen=True)
class PickResult:
    """Result of a picker run.

    Attributes:
        color: The picked color, or None if nothing was picked.
        output: Destination from the merged options: None for the cursor,
            otherwise a register name.
        preserve_selection: True if the selection should be left alone
            and the color delivered to ``output`` instead.
    """

    color: str | None
    output: str | None = None
    preserve_selection: bool = False

    @property
    def picked(self) -> bool:
        """Return True if a color was picked."""
        return self.color is not None


class ColorPicker:
    """Use case for picking a color with termpicker.

    Holds the global picker options (see configure()) and merges
    per-call overrides on top of them for each pick.
    """

    def __init__(
        self,
        resolver: BinaryResolver,
        installer: BinaryInstaller,
        launcher: PickerLauncherPort,
        notifier: NotifierPort,
        options: PickerOptions | None = None,
        confirm: ConfirmCallback | None = None,
    ) -> None:
        """Initialize the color picker.

        Args:
            resolver: Resolver for the termpicker binary.
            installer: Installer used when the binary is missing.
            launcher: Port that runs the interactive picker.
            notifier: Port receiving user-facing messages.
            options: Global picker options. Defaults to PickerOptions().
            confirm: Asked before installing a missing binary. Without it
                a missing binary is never installed.
        """
        self._resolver = resolver
        self._installer = installer
        self._launcher = launcher
        self._notifier = notifier
        self._options = options or PickerOptions()
        self._confirm = confirm

    @property
    def options(self) -> PickerOptions:
        """Return the global picker options."""
        return self._options

    def configure(self, overrides: Mapping[str, Any] | None) -> PickerOptions:
        """Deep-merge overrides into the global options.

        Raises:
            TermpickerConfigError: If an override names an unknown option.
        """
        self._options = self._options.merged(overrides)
        return self._options

    def ensure_available(self) -> bool:
        """Make sure the binary is available, offering to install it.

        Returns:
            True if the binary is available or was installed.
        """
        if self._resolver.exists():
            return True

        if self._confirm is not None and self._confirm(INSTALL_PROMPT):
            return self._installer.install()

        self._notifier.notify("Termpicker installation cancelled", NotificationLevel.WARN)
        return False

    def pick(
        self,
        initial_text: str | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> PickResult:
        """Run the picker and return the chosen color.

        Args:
            initial_text: Selected text; a color found in it seeds the picker.
            overrides: Per-call options merged over the global options.

        Returns:
            PickResult whose color is None if the picker was cancelled,
            the binary is unavailable, or the picker could not start.
        """
        options = self._options.merged(overrides)

        if not self.ensure_available():
            return _result(options, None)

        binary = self._resolver.path()
        if binary is None:
            self._notifier.notify("Termpicker binary not found", NotificationLevel.ERROR)
            return _result(options, None)

        args = build_picker_args(binary, options, extract_color(initial_text))
        try:
            lines = self._launcher.launch(args)
        except ProcessFailureError as e:
            self._notifier.notify(
                f"Failed to run termpicker: {e.output}", NotificationLevel.ERROR
            )
            return _result(options, None)

        color = parse_picker_output(lines)
        logger.debug("Picker returned %r", color)
        return _result(options, color)


def _result(options: PickerOptions, color: str | None) -> PickResult:
    return PickResult(
        color=color,
        output=options.output,
        preserve_selection=options.behavior.preserve_selection,
    )
