from __future__ import annotations

from datetime import timedelta

from babel.dates import format_timedelta

from voltdate import intl
from voltdate.instant import Instant
from voltdate.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND

# (unit, length in ms, upper bound on the rounded count before moving up a unit)
_STEPS: tuple[tuple[str, int, int | None], ...] = (
    ("second", MS_PER_SECOND, 60),
    ("minute", MS_PER_MINUTE, 60),
    ("hour", MS_PER_HOUR, 24),
    ("day", MS_PER_DAY, 30),
    ("month", 30 * MS_PER_DAY, 12),
    ("year", 365 * MS_PER_DAY, None),
)


def _phrase(delta_ms: int, locale: str) -> str:
    for _, length, limit in _STEPS:
        count = round(delta_ms / length)
        if limit is None or abs(count) < limit:
            break
    # Every larger unit holds fewer than |count| of itself, so this threshold
    # pins Babel to the unit picked above (it would otherwise prefer weeks).
    return format_timedelta(
        timedelta(milliseconds=count * length),
        threshold=max(abs(count), 1),
        add_direction=True,
        locale=intl.babel_locale(locale),
    )


def from_now(instant: Instant, now: Instant | None = None) -> str:
    """"in 5 minutes" / "3 days ago", relative to ``now`` (default: the present)."""
    if now is None:
        now = Instant(tz=instant.timezone, locale=instant.locale)
    return _phrase(instant.epoch_millis - now.epoch_millis, instant.locale)


def to_now(instant: Instant, now: Instant | None = None) -> str:
    """The mirror of :func:`from_now`: how ``now`` relates to ``instant``."""
    if now is None:
        now = Instant(tz=instant.timezone, locale=instant.locale)
    return _phrase(now.epoch_millis - instant.epoch_millis, instant.locale)
