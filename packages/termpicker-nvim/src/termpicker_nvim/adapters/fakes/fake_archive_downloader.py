"""Fake archive downloader for testing.

Provides a test double for ArchiveDownloaderPort that writes
preconfigured bytes without network operations.
"""

from __future__ import annotations

from pathlib import Path


class FakeArchiveDownloader:
    """Fake implementation of ArchiveDownloaderPort for testing.

    Writes preconfigured content to the destination, supports
    configuring exceptions for error path testing and records all calls
    for assertion in tests.
    """

    def __init__(self, content: bytes = b"archive") -> None:
        """Initialize with the bytes to write on download().

        Args:
            content: Bytes written to the destination on success.
        """
        self._content = content
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, Path]] = []

    @property
    def calls(self) -> list[tuple[str, Path]]:
        """Return list of (url, destination) tuples from download() calls."""
        return list(self._calls)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from download().

        Args:
            exception: Exception to raise on download(), or None to clear.
        """
        self._exception = exception

    def download(self, url: str, destination: Path) -> None:
        """Record the call, then raise or write the configured content."""
        self._calls.append((url, destination))

        if self._exception is not None:
            raise self._exception

        destination.write_bytes(self._content)
