"""Injectable source of the current instant.

The time accessors never read the wall clock directly; they call a
``Clock`` supplied by the caller so resolution is deterministic under
test.
"""
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current local time as a naive ``datetime``."""
    return datetime.now()


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports ``instant``."""

    def _clock() -> datetime:
        return instant

    return _clock
