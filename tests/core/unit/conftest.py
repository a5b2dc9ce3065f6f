"""Shared fixtures for termpicker-nvim core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from termpicker_nvim.adapters.fakes import (
    FakeArchiveDownloader,
    FakeArchiveExtractor,
    FakeCommandRunner,
    FakeNotifier,
    FakePlatformDetector,
)
from termpicker_nvim.adapters.filesystem_probe import OsFileProbe
from termpicker_nvim.domain.settings import InstallSettings, PathSettings
from termpicker_nvim.usecases.binary_installer import BinaryInstaller
from termpicker_nvim.usecases.binary_resolver import BinaryResolver
from termpicker_nvim.usecases.candidate_sources import default_sources


def _make_executable(path: Path, content: bytes = b"#!/bin/sh\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    path.chmod(0o755)
    return path


@pytest.fixture
def make_executable():
    """Return a helper creating an executable file (and its parents) at a path."""
    return _make_executable


@pytest.fixture
def paths(tmp_path: Path) -> PathSettings:
    """Path settings rooted in a temporary home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return PathSettings(data_home=home / ".local" / "share", home=home, gopath=None)


@pytest.fixture
def install_settings() -> InstallSettings:
    """Install settings with upstream defaults."""
    return InstallSettings()


@pytest.fixture
def local_binary(paths: PathSettings, install_settings: InstallSettings) -> Path:
    """Canonical local install location (not created)."""
    return install_settings.local_binary_path(paths)


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    """Command runner with no programs on PATH."""
    return FakeCommandRunner()


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    """Notifier recording every notification."""
    return FakeNotifier()


@pytest.fixture
def fake_downloader() -> FakeArchiveDownloader:
    """Downloader writing placeholder archive bytes."""
    return FakeArchiveDownloader()


@pytest.fixture
def fake_extractor() -> FakeArchiveExtractor:
    """Extractor producing a ``termpicker`` file."""
    return FakeArchiveExtractor(members={"termpicker": b"\x7fELF"})


@pytest.fixture
def linux_amd64() -> FakePlatformDetector:
    """Platform detector reporting linux-amd64."""
    return FakePlatformDetector.from_raw("Linux", "x86_64")


@pytest.fixture
def resolver(
    fake_runner: FakeCommandRunner,
    paths: PathSettings,
    install_settings: InstallSettings,
) -> BinaryResolver:
    """Resolver over the real filesystem with a fake PATH lookup."""
    return BinaryResolver(
        file_probe=OsFileProbe(),
        sources=default_sources(fake_runner, paths, install_settings),
    )


@pytest.fixture
def installer(
    resolver: BinaryResolver,
    fake_runner: FakeCommandRunner,
    linux_amd64: FakePlatformDetector,
    fake_downloader: FakeArchiveDownloader,
    fake_extractor: FakeArchiveExtractor,
    fake_notifier: FakeNotifier,
    paths: PathSettings,
    install_settings: InstallSettings,
    tmp_path: Path,
) -> BinaryInstaller:
    """Installer wired to fakes, writing into the temporary home."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    return BinaryInstaller(
        resolver=resolver,
        runner=fake_runner,
        platform_detector=linux_amd64,
        downloader=fake_downloader,
        extractor=fake_extractor,
        notifier=fake_notifier,
        paths=paths,
        settings=install_settings,
        temp_dir=temp_dir,
    )
