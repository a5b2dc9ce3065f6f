"""Fake picker launcher for testing."""

from __future__ import annotations

from collections.abc import Sequence


class FakePickerLauncher:
    """Fake implementation of PickerLauncherPort for testing.

    Returns preconfigured stdout lines instead of running the picker
    and records the argument vectors it was given.
    """

    def __init__(self, stdout: list[str] | None = None) -> None:
        """Initialize with the lines to return.

        Args:
            stdout: Lines the fake picker prints on stdout.
        """
        self._stdout = list(stdout or [])
        self._exception: BaseException | None = None
        self._calls: list[list[str]] = []

    @property
    def calls(self) -> list[list[str]]:
        """Return argument vectors passed to launch(), in order."""
        return list(self._calls)

    def set_stdout(self, stdout: list[str]) -> None:
        """Configure the lines returned by launch()."""
        self._stdout = list(stdout)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from launch()."""
        self._exception = exception

    def launch(self, args: Sequence[str]) -> list[str]:
        """Record the call, then raise or return the configured lines."""
        self._calls.append(list(args))
        if self._exception is not None:
            raise self._exception
        return list(self._stdout)
