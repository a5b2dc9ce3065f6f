"""Fake command runner for testing.

Provides a test double for CommandRunnerPort that returns preconfigured
results without spawning processes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from termpicker_nvim.domain.binary import CommandResult


class FakeCommandRunner:
    """Fake implementation of CommandRunnerPort for testing.

    Programs are looked up by name in a configurable table for which(),
    and results are returned per program name for run(). Every call is
    recorded for assertion.

    Example:
        >>> fake = FakeCommandRunner()
        >>> fake.add_program("go", Path("/usr/bin/go"))
        >>> fake.set_result("go", CommandResult(returncode=0, output=""))
        >>> fake.run(["go", "install", "x@latest"]).succeeded
        True
        >>> fake.calls
        [['go', 'install', 'x@latest']]
    """

    def __init__(self) -> None:
        """Initialize with an empty program table."""
        self._programs: dict[str, Path] = {}
        self._results: dict[str, CommandResult] = {}
        self._side_effects: dict[str, Callable[[list[str]], None]] = {}
        self._calls: list[list[str]] = []
        self._which_calls: list[str] = []

    @property
    def calls(self) -> list[list[str]]:
        """Return argument vectors passed to run(), in order."""
        return list(self._calls)

    @property
    def which_calls(self) -> list[str]:
        """Return program names passed to which(), in order."""
        return list(self._which_calls)

    def add_program(self, name: str, path: Path) -> None:
        """Make which(name) return path."""
        self._programs[name] = path

    def remove_program(self, name: str) -> None:
        """Make which(name) return None."""
        self._programs.pop(name, None)

    def set_result(
        self,
        program: str,
        result: CommandResult,
        side_effect: Callable[[list[str]], None] | None = None,
    ) -> None:
        """Configure the result of running program.

        Args:
            program: Program name (args[0]).
            result: Result to return.
            side_effect: Optional callable invoked with the argument vector
                before returning, e.g. to create the installed file.
        """
        self._results[program] = result
        if side_effect is not None:
            self._side_effects[program] = side_effect

    def run(self, args: Sequence[str]) -> CommandResult:
        """Record the call and return the configured result.

        Unconfigured programs behave as if they could not be started.
        """
        argv = list(args)
        self._calls.append(argv)
        side_effect = self._side_effects.get(argv[0])
        if side_effect is not None:
            side_effect(argv)
        return self._results.get(
            argv[0], CommandResult(returncode=127, output=f"{argv[0]}: not found")
        )

    def which(self, name: str) -> Path | None:
        """Return the configured path for name, or None."""
        self._which_calls.append(name)
        return self._programs.get(name)
