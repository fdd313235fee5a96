"""Shared test fixtures for backup-options.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from datetime import datetime

import pytest

from backup_options.resolver.clock import Clock, fixed_clock


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "backup_options"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def now() -> datetime:
    """A fixed 'current instant' shared by the time-based tests."""
    return datetime(2024, 1, 31, 12, 0, 0)


@pytest.fixture()
def clock(now: datetime) -> Clock:
    """A clock pinned to :func:`now`."""
    return fixed_clock(now)


@pytest.fixture()
def full_raw() -> dict[str, str]:
    """A raw option set that sets every recognised option."""
    return {
        "full": "yes",
        "volsize": "10",
        "totalsize": "2gb",
        "auto-cleanup": "",
        "full-if-older-than": "1M",
        "signature-control-files": "a.db;b.db",
        "signature-cache-path": "/var/cache/sig",
        "skip-file-hash-checks": "off",
        "file-to-restore": "docs/report.txt",
        "restore-time": "-2D",
        "disable-filetime-check": "TRUE",
        "force": "no",
    }
