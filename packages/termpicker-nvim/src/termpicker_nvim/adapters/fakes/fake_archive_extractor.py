"""Fake archive extractor for testing."""

from __future__ import annotations

from pathlib import Path


class FakeArchiveExtractor:
    """Fake implementation of ArchiveExtractorPort for testing.

    Instead of reading the archive, writes a preconfigured set of member
    files into the destination directory.
    """

    def __init__(self, members: dict[str, bytes] | None = None) -> None:
        """Initialize with the files to produce.

        Args:
            members: Relative file name to content mapping.
        """
        self._members = dict(members or {})
        self._exception: BaseException | None = None
        self._calls: list[tuple[Path, Path]] = []
        self.archive_existed: list[bool] = []

    @property
    def calls(self) -> list[tuple[Path, Path]]:
        """Return list of (archive, destination) tuples from extract() calls."""
        return list(self._calls)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from extract()."""
        self._exception = exception

    def extract(self, archive: Path, destination: Path) -> None:
        """Record the call, then raise or write the configured members."""
        self._calls.append((archive, destination))
        self.archive_existed.append(archive.exists())

        if self._exception is not None:
            raise self._exception

        for name, content in self._members.items():
            target = destination / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
