"""Filesystem liveness probe adapter.

Implements FileProbePort with a real stat and an access check on
every call, so a binary removed while the editor is running is noticed
on the next lookup.
"""

from __future__ import annotations

import os
from pathlib import Path


class OsFileProbe:
    """Adapter that checks candidate binaries on the local filesystem."""

    def is_file(self, path: Path) -> bool:
        """Return True if path exists and is a regular file.

        Symlinks are followed, so a link to a regular file counts.
        """
        try:
            return path.is_file()
        except OSError:
            return False

    def is_executable(self, path: Path) -> bool:
        """Return True if the current user may execute path."""
        return os.access(path, os.X_OK)
