from __future__ import annotations

from dataclasses import dataclass
from datetime import date as _date
from typing import TYPE_CHECKING

from voltdate import intl
from voltdate.calendar import days_before_month, days_in_month, is_leap_year, normalize_month, utc_millis
from voltdate.units import FIELD_UNITS, Unit
from voltdate._exceptions import UnknownUnit

if TYPE_CHECKING:
    from voltdate.instant.instant import Instant


@dataclass(frozen=True, slots=True)
class Fields:
    """Calendar fields of an instant as seen in its display timezone."""

    year: int
    month: int          # 1-12
    date: int           # day of month
    day: int            # weekday, 0=Sunday
    hour: int
    minute: int
    second: int
    millisecond: int

    @property
    def quarter(self) -> int:
        return (self.month + 2) // 3


def decompose(instant: Instant) -> Fields:
    dt = intl.wall_clock(instant.epoch_millis, instant.timezone)
    return Fields(
        year=dt.year,
        month=dt.month,
        date=dt.day,
        day=dt.isoweekday() % 7,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
        millisecond=dt.microsecond // 1000,
    )


def compose(
    instant: Instant,
    year: int,
    month: int,
    date: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> Instant:
    """
    New instant showing the given wall-clock fields in the display timezone of
    ``instant``.  Out-of-range fields carry into the next larger field.
    """
    wall = utc_millis(year, month, date, hour, minute, second, millisecond)
    return instant._derive(intl.from_wall_clock(wall, instant.timezone))


def _replace(instant: Instant, **changes: int) -> Instant:
    f = decompose(instant)
    values = {
        "year": f.year,
        "month": f.month,
        "date": f.date,
        "hour": f.hour,
        "minute": f.minute,
        "second": f.second,
        "millisecond": f.millisecond,
    }
    values.update(changes)
    return compose(instant, **values)


# ── setters ──────────────────────────────────────────────────────────────

def set_year(instant: Instant, value: int) -> Instant:
    return _replace(instant, year=int(value))


def set_month(instant: Instant, value: int) -> Instant:
    f = decompose(instant)
    year, month = normalize_month(f.year, int(value))
    # Jan 31 -> Feb clamps to the end of February instead of rolling into March.
    day = min(f.date, days_in_month(year, month))
    return _replace(instant, year=year, month=month, date=day)


def set_date(instant: Instant, value: int) -> Instant:
    f = decompose(instant)
    day = max(1, min(int(value), days_in_month(f.year, f.month)))
    return _replace(instant, date=day)


def set_day(instant: Instant, value: int) -> Instant:
    f = decompose(instant)
    return _replace(instant, date=f.date + int(value) - f.day)


def set_hour(instant: Instant, value: int) -> Instant:
    return _replace(instant, hour=int(value))


def set_minute(instant: Instant, value: int) -> Instant:
    return _replace(instant, minute=int(value))


def set_second(instant: Instant, value: int) -> Instant:
    return _replace(instant, second=int(value))


def set_millisecond(instant: Instant, value: int) -> Instant:
    return _replace(instant, millisecond=int(value))


_SETTERS = {
    Unit.YEAR: set_year,
    Unit.MONTH: set_month,
    Unit.DATE: set_date,
    Unit.DAY: set_day,
    Unit.HOUR: set_hour,
    Unit.MINUTE: set_minute,
    Unit.SECOND: set_second,
    Unit.MILLISECOND: set_millisecond,
}


def get_field(instant: Instant, unit: Unit | str) -> int:
    u = Unit.parse(unit, aliases=True)
    if u not in FIELD_UNITS:
        raise UnknownUnit(unit)
    return getattr(decompose(instant), u.value)


def set_field(instant: Instant, unit: Unit | str, value: int) -> Instant:
    u = Unit.parse(unit, aliases=True)
    if u not in FIELD_UNITS:
        raise UnknownUnit(unit)
    return _SETTERS[u](instant, value)


# ── derived fields ───────────────────────────────────────────────────────

def day_of_year(instant: Instant) -> int:
    f = decompose(instant)
    return days_before_month(f.year, f.month) + f.date


def week_of_year(instant: Instant) -> int:
    """ISO-8601 week number (weeks start on Monday, week 1 holds January 4th)."""
    f = decompose(instant)
    return _date(f.year, f.month, f.date).isocalendar()[1]


def leap_year(instant: Instant) -> bool:
    return bool(is_leap_year(decompose(instant).year))


def month_length(instant: Instant) -> int:
    f = decompose(instant)
    return days_in_month(f.year, f.month)
