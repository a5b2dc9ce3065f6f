"""Binary resolver use case for locating a live termpicker executable."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from termpicker_nvim.adapters.ports import FileProbePort
from termpicker_nvim.usecases.candidate_sources import CandidateSource

logger = logging.getLogger(__name__)


class BinaryResolver:
    """Use case for resolving the termpicker binary location.

    Walks an ordered list of candidate sources and returns the first
    candidate that passes the liveness check (regular file with execute
    permission). The winning path is cached on the instance.

    The cache is an optimization only: every public call re-validates
    the cached path before trusting it, and a stale entry is dropped
    and the full search repeated.
    """

    def __init__(
        self,
        file_probe: FileProbePort,
        sources: Sequence[CandidateSource],
    ) -> None:
        """Initialize the binary resolver.

        Args:
            file_probe: Port used for liveness checks.
            sources: Candidate sources in priority order.
        """
        self._file_probe = file_probe
        self._sources = list(sources)
        self._cached_path: Path | None = None

    @property
    def cached_path(self) -> Path | None:
        """Return the cached path without validating it."""
        return self._cached_path

    def is_live(self, path: Path) -> bool:
        """Check that path is a regular file the user may execute."""
        return self._file_probe.is_file(path) and self._file_probe.is_executable(path)

    def exists(self) -> bool:
        """Return True if a live binary can be resolved."""
        return self.path() is not None

    def path(self) -> Path | None:
        """Return the path of a live binary, or None if none is found."""
        if self._cached_path is not None:
            if self.is_live(self._cached_path):
                return self._cached_path
            logger.debug("Cached termpicker path %s is stale", self._cached_path)
            self._cached_path = None

        for source in self._sources:
            for candidate in source.candidates():
                if self.is_live(candidate):
                    logger.debug("Resolved termpicker via %s: %s", source.name, candidate)
                    self._cached_path = candidate
                    return candidate

        return None

    def remember(self, path: Path) -> bool:
        """Cache path if it is live.

        Args:
            path: Freshly installed binary.

        Returns:
            True if path passed the liveness check and was cached.
        """
        if not self.is_live(path):
            return False
        self._cached_path = path
        return True

    def invalidate(self) -> None:
        """Drop the cached path so the next lookup searches again."""
        self._cached_path = None
