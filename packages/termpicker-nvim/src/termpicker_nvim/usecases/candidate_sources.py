"""Candidate sources searched by BinaryResolver.

Each source yields paths where the termpicker binary might live. The
resolver walks an ordered list of sources and keeps the first live
candidate, so the search order is the order of the list returned by
default_sources().
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from termpicker_nvim.adapters.ports import CommandRunnerPort
from termpicker_nvim.domain.settings import InstallSettings, PathSettings


@runtime_checkable
class CandidateSource(Protocol):
    """A named producer of candidate binary paths."""

    name: str

    def candidates(self) -> Iterator[Path]:
        """Yield candidate paths in priority order."""
        ...


@dataclass(frozen=True)
class SearchPathSource:
    """Candidate from the command search path (the ``which`` lookup)."""

    runner: CommandRunnerPort
    binary_name: str
    name: str = "PATH"

    def candidates(self) -> Iterator[Path]:
        found = self.runner.which(self.binary_name)
        if found is not None:
            yield found


@dataclass(frozen=True)
class FixedPathsSource:
    """Candidates at fixed locations, computed when the source is built."""

    name: str
    paths: tuple[Path, ...]

    def candidates(self) -> Iterator[Path]:
        yield from self.paths


def default_sources(
    runner: CommandRunnerPort,
    paths: PathSettings,
    settings: InstallSettings,
) -> list[CandidateSource]:
    """Build the standard search order.

    1. Command search path
    2. ``$GOPATH/bin``
    3. ``~/go/bin`` then ``~/.go/bin``
    4. ``<data_home>/nvim/<plugin>``

    Args:
        runner: Command runner used for the search path lookup.
        paths: Filesystem roots from the environment.
        settings: Install settings naming the binary and plugin directory.

    Returns:
        Candidate sources in priority order.
    """
    name = settings.binary_name

    gopath_bins: Sequence[Path] = ()
    if paths.gopath is not None:
        gopath_bins = (paths.gopath / "bin" / name,)

    home_bins: Sequence[Path] = ()
    if paths.home is not None:
        home_bins = (
            paths.home / "go" / "bin" / name,
            paths.home / ".go" / "bin" / name,
        )

    return [
        SearchPathSource(runner=runner, binary_name=name),
        FixedPathsSource(name="GOPATH", paths=tuple(gopath_bins)),
        FixedPathsSource(name="default GOPATH", paths=tuple(home_bins)),
        FixedPathsSource(
            name="local install",
            paths=(settings.local_binary_path(paths),),
        ),
    ]
