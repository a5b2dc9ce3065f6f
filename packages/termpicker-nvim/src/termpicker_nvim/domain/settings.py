"""Settings domain entities.

Value objects for filesystem locations, install constants and the
per-call picker options. All are frozen and validated on construction.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from termpicker_nvim.domain.binary import Platform
from termpicker_nvim.domain.exceptions import TermpickerConfigError

DEFAULT_BINARY_NAME = "termpicker"
DEFAULT_PLUGIN_NAME = "termpicker"
DEFAULT_GO_MODULE = "github.com/ChausseBenjamin/termpicker@latest"
DEFAULT_RELEASE_URL_TEMPLATE = (
    "https://github.com/ChausseBenjamin/termpicker/releases/latest/download/"
    "termpicker-{platform}.tar.gz"
)
DEFAULT_STARTING_COLOR = "#7F7F7F"


@dataclass(frozen=True)
class PathSettings:
    """Filesystem roots consulted when resolving and installing the binary.

    Attributes:
        data_home: XDG data home (``$XDG_DATA_HOME`` or ``~/.local/share``).
        home: User home directory, or None if ``$HOME`` is unset.
        gopath: Go workspace root from ``$GOPATH``, or None if unset/empty.
    """

    data_home: Path
    home: Path | None = None
    gopath: Path | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> PathSettings:
        """Build path settings from environment variables.

        Args:
            environ: Environment mapping. Defaults to ``os.environ``.

        Returns:
            PathSettings populated from XDG_DATA_HOME, HOME and GOPATH.
        """
        env = os.environ if environ is None else environ

        home_value = env.get("HOME")
        home = Path(home_value) if home_value else None

        xdg_data = env.get("XDG_DATA_HOME")
        if xdg_data:
            data_home = Path(xdg_data)
        else:
            data_home = (home or Path.home()) / ".local" / "share"

        gopath_value = env.get("GOPATH")
        gopath = Path(gopath_value) if gopath_value else None

        return cls(data_home=data_home, home=home, gopath=gopath)


@dataclass(frozen=True)
class InstallSettings:
    """Constants describing where the binary comes from and where it goes.

    Defaults point at the upstream termpicker project.

    Attributes:
        binary_name: Executable file name to look for and install.
        plugin_name: Directory name under ``<data_home>/nvim``.
        go_module: Argument passed to ``go install``.
        release_url_template: Release archive URL with a ``{platform}`` field.
    """

    binary_name: str = DEFAULT_BINARY_NAME
    plugin_name: str = DEFAULT_PLUGIN_NAME
    go_module: str = DEFAULT_GO_MODULE
    release_url_template: str = DEFAULT_RELEASE_URL_TEMPLATE

    def __post_init__(self) -> None:
        """Validate install settings."""
        self._validate_names()
        self._validate_template()

    def _validate_names(self) -> None:
        """Validate binary and plugin names are plain, non-empty file names."""
        for name in ("binary_name", "plugin_name"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise TermpickerConfigError(f"{name} cannot be empty")
            if "/" in value or "\\" in value:
                raise TermpickerConfigError(
                    f"{name} must be a file name, got: {value!r}"
                )

    def _validate_template(self) -> None:
        """Validate the release URL template has a platform placeholder."""
        if "{platform}" not in self.release_url_template:
            raise TermpickerConfigError(
                "release_url_template must contain '{platform}', "
                f"got: {self.release_url_template!r}"
            )

    def local_install_dir(self, paths: PathSettings) -> Path:
        """Return ``<data_home>/nvim/<plugin_name>``."""
        return paths.data_home / "nvim" / self.plugin_name

    def local_binary_path(self, paths: PathSettings) -> Path:
        """Return the canonical local install location of the binary."""
        return self.local_install_dir(paths) / self.binary_name

    def release_url(self, platform: Platform) -> str:
        """Return the release archive URL for a platform."""
        return self.release_url_template.format(platform=platform.identifier)


@dataclass(frozen=True)
class PreviewOptions:
    """Sample text shown by the picker.

    None leaves the termpicker default in place.

    Attributes:
        text: Text previewed in the picked color (``--sample-text``).
        background: Background used when previewing as foreground.
        foreground: Foreground used when previewing as background.
    """

    text: str | None = None
    background: str | None = None
    foreground: str | None = None


@dataclass(frozen=True)
class BehaviorOptions:
    """Behavior switches.

    Attributes:
        prefer_config_color: starting_color overrides the selected text.
        preserve_selection: Do not replace the selection, use ``output`` instead.
    """

    prefer_config_color: bool = False
    preserve_selection: bool = False


@dataclass(frozen=True)
class PickerOptions:
    """Options for one picker invocation.

    Attributes:
        output: None inserts at the cursor; a string names a register.
        starting_color: Initial color passed with ``--color``.
        preview: Preview/sample text options.
        behavior: Behavior switches.
    """

    output: str | None = None
    starting_color: str | None = DEFAULT_STARTING_COLOR
    preview: PreviewOptions = field(default_factory=PreviewOptions)
    behavior: BehaviorOptions = field(default_factory=BehaviorOptions)

    def __post_init__(self) -> None:
        """Validate picker options."""
        if self.output is not None and not isinstance(self.output, str):
            raise TermpickerConfigError(
                f"output must be None or a register name, got: {self.output!r}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> PickerOptions:
        """Build options from a nested mapping over the defaults."""
        return cls().merged(values)

    def merged(self, overrides: Mapping[str, Any] | None) -> PickerOptions:
        """Return a copy with ``overrides`` deep-merged on top.

        Nested mappings are merged key by key; override values win.

        Args:
            overrides: Nested mapping, e.g. ``{"preview": {"text": "Aa"}}``.

        Returns:
            New PickerOptions instance.

        Raises:
            TermpickerConfigError: If a key does not name an option.
        """
        if not overrides:
            return self
        return _merge(self, overrides, prefix="")


def _merge(target: Any, overrides: Mapping[str, Any], prefix: str) -> Any:
    known = {f.name for f in fields(target)}
    changes: dict[str, Any] = {}

    for key, value in overrides.items():
        if key not in known:
            raise TermpickerConfigError(f"Unknown picker option: {prefix}{key!r}")
        current = getattr(target, key)
        if isinstance(value, Mapping):
            if not hasattr(current, "__dataclass_fields__"):
                raise TermpickerConfigError(
                    f"Picker option {prefix}{key!r} does not take a table"
                )
            changes[key] = _merge(current, value, prefix=f"{prefix}{key}.")
        elif hasattr(current, "__dataclass_fields__"):
            raise TermpickerConfigError(
                f"Picker option {prefix}{key!r} must be a table, got: {value!r}"
            )
        else:
            changes[key] = value

    return replace(target, **changes)
