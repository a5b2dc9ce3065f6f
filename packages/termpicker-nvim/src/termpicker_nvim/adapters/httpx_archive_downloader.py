"""HTTPX-based implementation of the ArchiveDownloaderPort.

This adapter uses httpx to download termpicker release archives.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from termpicker_nvim.adapters.ports import ArchiveDownloaderPort
from termpicker_nvim.domain.exceptions import BinaryDownloadError

logger = logging.getLogger(__name__)


class HttpxArchiveDownloader:
    """HTTPX-based adapter for downloading release archives.

    GitHub serves ``releases/latest/download`` through redirects, so
    redirects are always followed.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the HTTPX archive downloader.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._client = client

    def download(self, url: str, destination: Path) -> None:
        """Download url and write the body to destination.

        Args:
            url: Remote URL of the archive.
            destination: Local file to write. The parent directory must exist.

        Raises:
            BinaryDownloadError: For network failures, HTTP errors (4xx, 5xx)
                or filesystem errors while writing the archive.
        """
        logger.debug("Downloading %s to %s", url, destination)
        try:
            content = self._fetch(url)
        except httpx.HTTPError as e:
            raise BinaryDownloadError(
                f"Failed to download {url}: {e}", url=url, original_error=e
            ) from e

        try:
            destination.write_bytes(content)
        except OSError as e:
            destination.unlink(missing_ok=True)
            raise BinaryDownloadError(
                f"Failed to write archive to {destination}: {e}",
                url=url,
                original_error=e,
            ) from e

        logger.debug("Downloaded %d bytes from %s", len(content), url)

    def _fetch(self, url: str) -> bytes:
        if self._client is not None:
            response = self._client.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.content

        with httpx.Client(follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content


# Runtime protocol check
assert isinstance(HttpxArchiveDownloader(), ArchiveDownloaderPort)
