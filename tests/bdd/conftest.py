"""Shared fixtures for BDD tests."""

import io
import tarfile
from pathlib import Path

import pytest

from termpicker_nvim.domain.settings import PathSettings


@pytest.fixture
def home_paths(tmp_path: Path) -> PathSettings:
    """Create a temporary home with the default data home beneath it.

    Returns:
        PathSettings rooted in a fresh home directory, GOPATH unset.
    """
    home = tmp_path / "home"
    home.mkdir()
    return PathSettings(data_home=home / ".local" / "share", home=home, gopath=None)


@pytest.fixture
def release_archive() -> bytes:
    """Return a gzip-compressed tar archive shaped like a termpicker release.

    Returns:
        Archive bytes holding a ``termpicker`` member and a README.
    """
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name, content, mode in (
            ("termpicker", b"\x7fELF", 0o644),
            ("README.md", b"termpicker", 0o644),
        ):
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = mode
            tar.addfile(info, io.BytesIO(content))
    return buffer.getvalue()
