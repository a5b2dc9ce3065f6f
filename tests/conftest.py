"""
Root conftest.py for the termpicker-nvim test suite.

Pytest plugin that checks every test declares:
- a TRA (Test Responsibility Anchor) marker naming what it protects
- a tier marker deciding when it runs and how long it may take

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.BinaryInstaller")
    def test_something():
        ...

Configuration:
    TRA_ENFORCE=1 fails collection on missing/invalid markers (default: warn)
    TRA_ENFORCE=0 disables the check
    TIER_TIMEOUT_MULTIPLIER scales tier timeouts (needs pytest-timeout)
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Valid TRA namespace prefixes
VALID_TRA_PREFIXES = (
    "Domain.Invariant.",
    "Domain.Policy.",
    "UseCase.",
    "Port.",
    "Adapter.",
    "Contract.",
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: " + ", ".join(p.rstrip(".") for p in VALID_TRA_PREFIXES),
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )
    config.addinivalue_line("markers", "unit: Unit tests (no network, no real installs)")
    config.addinivalue_line("markers", "property: Property-based tests using Hypothesis")


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args and isinstance(marker.args[0], int) and 0 <= marker.args[0] <= 4:
            return marker.args[0]
    return None


def _marker_errors(item: Item) -> list[str]:
    errors = []
    tra_markers = list(item.iter_markers(name="tra"))

    if not tra_markers:
        errors.append(f"{item.nodeid}: Missing @pytest.mark.tra('...')")
    else:
        anchor = tra_markers[0].args[0] if tra_markers[0].args else None
        if not isinstance(anchor, str) or not anchor.startswith(VALID_TRA_PREFIXES):
            errors.append(f"{item.nodeid}: Invalid TRA anchor {anchor!r}")

    if _get_tier(item) is None:
        errors.append(f"{item.nodeid}: Missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier when pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and tier markers at collection time."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")

    if enforce_mode != "0":
        errors = [error for item in items for error in _marker_errors(item)]
        if errors and enforce_mode == "warn":
            print("\nTRA/Tier Enforcement Warnings:")
            for error in errors:
                print(f"  {error}")
        elif errors:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )

    _apply_tier_timeouts(items)


def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA/Tier enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
