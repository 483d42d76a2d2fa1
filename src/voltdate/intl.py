"""
Host internationalisation facility.

Everything locale- or zone-database-dependent goes through this module:
``zoneinfo`` answers "what is the wall clock at this instant in zone X" and
"which instant shows this wall clock in zone X"; Babel's CLDR data answers
month, weekday and day-period names.  Nothing here applies fixed offsets.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from babel.dates import get_day_names, get_month_names, get_period_names

from voltdate._exceptions import InvalidInstant, UnknownTimezone

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_NAIVE = datetime(1970, 1, 1)
ONE_MS = timedelta(milliseconds=1)

_FALLBACK_LOCALE = "en_US"


# ── zones ────────────────────────────────────────────────────────────────

@lru_cache(maxsize=None)
def zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise UnknownTimezone(tz) from exc


def wall_clock(epoch_ms: int, tz: str) -> datetime:
    """The aware datetime showing ``epoch_ms`` on the wall clock of ``tz``."""
    tzinfo = zone(tz)
    try:
        return (EPOCH + timedelta(milliseconds=epoch_ms)).astimezone(tzinfo)
    except OverflowError as exc:
        raise InvalidInstant(f"{epoch_ms} ms is outside the representable range in {tz}") from exc


def from_wall_clock(wall_ms: int, tz: str) -> int:
    """
    Map a wall-clock reading (expressed as if it were UTC milliseconds) back to
    absolute epoch milliseconds in ``tz``.

    Skipped and repeated wall times resolve with ``fold=0``.
    """
    tzinfo = zone(tz)
    try:
        naive = _EPOCH_NAIVE + timedelta(milliseconds=wall_ms)
    except OverflowError as exc:
        raise InvalidInstant(f"{wall_ms} ms is outside the representable range") from exc
    offset = naive.replace(tzinfo=tzinfo).utcoffset() or timedelta(0)
    return wall_ms - offset // ONE_MS


def utc_offset_minutes(epoch_ms: int, tz: str) -> int:
    offset = wall_clock(epoch_ms, tz).utcoffset() or timedelta(0)
    return offset // timedelta(minutes=1)


def short_gmt_offset(epoch_ms: int, tz: str) -> str:
    """``GMT``, ``GMT+9``, ``GMT-4`` or ``GMT+5:30``."""
    total = utc_offset_minutes(epoch_ms, tz)
    if total == 0:
        return "GMT"
    sign = "+" if total > 0 else "-"
    hours, minutes = divmod(abs(total), 60)
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"


# ── locales ──────────────────────────────────────────────────────────────

@lru_cache(maxsize=64)
def babel_locale(tag: str) -> Locale:
    """Babel locale for an ``en-US`` style tag; unknown tags fall back to en_US."""
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        logger.debug("Locale %r is not known to Babel; falling back to %s", tag, _FALLBACK_LOCALE)
        return Locale.parse(_FALLBACK_LOCALE)


def month_name(month: int, locale: str, width: str = "wide") -> str:
    """Stand-alone name of ``month`` (1-12); width is wide, abbreviated or narrow."""
    names = get_month_names(width, context="stand-alone", locale=babel_locale(locale))
    return str(names[month])


def weekday_name(weekday: int, locale: str, width: str = "wide") -> str:
    """Stand-alone name of ``weekday`` (0=Sunday)."""
    names = get_day_names(width, context="stand-alone", locale=babel_locale(locale))
    # Babel numbers weekdays from Monday.
    return str(names[(weekday + 6) % 7])


def meridiem(hour: int, locale: str) -> str:
    names = get_period_names("abbreviated", context="format", locale=babel_locale(locale))
    return str(names["pm" if hour >= 12 else "am"])
