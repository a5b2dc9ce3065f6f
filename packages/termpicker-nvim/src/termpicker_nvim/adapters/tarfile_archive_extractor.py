"""Tarfile-based implementation of the ArchiveExtractorPort."""

from __future__ import annotations

import logging
import tarfile
from pathlib import Path

from termpicker_nvim.domain.exceptions import ArchiveExtractionError

logger = logging.getLogger(__name__)


class TarfileArchiveExtractor:
    """Adapter that unpacks gzip-compressed tar archives.

    Uses the ``data`` extraction filter, which rejects absolute paths,
    links escaping the destination and device files.
    """

    def extract(self, archive: Path, destination: Path) -> None:
        """Extract archive into destination.

        Args:
            archive: Path to a ``.tar.gz`` file.
            destination: Existing directory to unpack into.

        Raises:
            ArchiveExtractionError: If the archive is missing, corrupt,
                or contains members rejected by the extraction filter.
        """
        logger.debug("Extracting %s into %s", archive, destination)
        try:
            with tarfile.open(archive, "r:gz") as tar:
                tar.extractall(destination, filter="data")
        except (tarfile.TarError, OSError) as e:
            raise ArchiveExtractionError(
                f"Failed to extract {archive}: {e}",
                archive=archive,
                original_error=e,
            ) from e
