from __future__ import annotations

from voltdate.config import host_timezone
from voltdate.instant import Instant


def to_timezone(instant: Instant, tz: str) -> Instant:
    """The same point in time, displayed in ``tz``."""
    return Instant(instant, tz=tz)


def to_utc(instant: Instant) -> Instant:
    return to_timezone(instant, "UTC")


def to_local(instant: Instant) -> Instant:
    return to_timezone(instant, host_timezone())
