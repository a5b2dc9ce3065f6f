"""Fake file probe for testing."""

from __future__ import annotations

from pathlib import Path


class FakeFileProbe:
    """Fake implementation of FileProbePort for testing.

    Keeps an in-memory set of regular files and the subset that is
    executable, and counts probe calls so tests can assert how much
    filesystem work a lookup performed.

    Example:
        >>> probe = FakeFileProbe(live={Path("/usr/bin/termpicker")})
        >>> probe.is_file(Path("/usr/bin/termpicker"))
        True
        >>> probe.probe_count
        1
    """

    def __init__(
        self,
        live: set[Path] | None = None,
        non_executable: set[Path] | None = None,
    ) -> None:
        """Initialize with preconfigured files.

        Args:
            live: Paths that exist and are executable.
            non_executable: Paths that exist but lack execute permission.
        """
        self._executable: set[Path] = set(live or ())
        self._files: set[Path] = self._executable | set(non_executable or ())
        self._probed: list[Path] = []

    @property
    def probed(self) -> list[Path]:
        """Return every path passed to is_file(), in order."""
        return list(self._probed)

    @property
    def probe_count(self) -> int:
        """Return the number of is_file() calls."""
        return len(self._probed)

    def add_live(self, path: Path) -> None:
        """Create an executable file at path."""
        self._files.add(path)
        self._executable.add(path)

    def add_non_executable(self, path: Path) -> None:
        """Create a regular file without execute permission at path."""
        self._files.add(path)
        self._executable.discard(path)

    def remove(self, path: Path) -> None:
        """Delete the file at path."""
        self._files.discard(path)
        self._executable.discard(path)

    def reset_counts(self) -> None:
        """Forget recorded probe calls."""
        self._probed.clear()

    def is_file(self, path: Path) -> bool:
        """Return True if path is a known file."""
        self._probed.append(path)
        return path in self._files

    def is_executable(self, path: Path) -> bool:
        """Return True if path is a known executable file."""
        return path in self._executable
