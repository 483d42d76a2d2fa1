from __future__ import annotations

import numpy as np

from voltdate.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND

ArrayLike = int | np.ndarray

_DAYS_IN_MONTH: np.ndarray = np.array(
    [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64
)

# Prefix sums over month lengths: entry m is the number of days before month m+1.
_DAYS_BEFORE_MONTH: np.ndarray = np.zeros(13, dtype=np.int64)
np.cumsum(_DAYS_IN_MONTH, out=_DAYS_BEFORE_MONTH[1:])
_DAYS_BEFORE_MONTH_LEAP: np.ndarray = _DAYS_BEFORE_MONTH + (np.arange(13) >= 2)

# Days from 0001-01-01 to 1970-01-01.
_EPOCH_DAYS = 719_162

_DAYS_IN_MONTH.setflags(write=False)
_DAYS_BEFORE_MONTH.setflags(write=False)
_DAYS_BEFORE_MONTH_LEAP.setflags(write=False)


def is_leap_year(year: ArrayLike) -> bool | np.ndarray:
    """Proleptic Gregorian leap-year test; accepts scalars or integer arrays."""
    y = np.asarray(year, dtype=np.int64)
    leap = (y % 4 == 0) & ((y % 100 != 0) | (y % 400 == 0))
    return bool(leap) if leap.ndim == 0 else leap


def days_in_month(year: int, month: int) -> int:
    """Length of ``month`` (1-12, carried into adjacent years when out of range)."""
    year, month = normalize_month(year, month)
    if month == 2 and is_leap_year(year):
        return 29
    return int(_DAYS_IN_MONTH[month - 1])


def days_before_month(year: int, month: int) -> int:
    table = _DAYS_BEFORE_MONTH_LEAP if is_leap_year(year) else _DAYS_BEFORE_MONTH
    return int(table[month - 1])


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Carry a 1-based month outside 1..12 into the year, floor-style."""
    carry, month0 = divmod(month - 1, 12)
    return year + carry, month0 + 1


def days_from_civil(year: int, month: int, day: int) -> int:
    """
    Days since 1970-01-01 for a (year, month, day) triple.

    ``month`` and ``day`` carry into the next larger field: month 13 is
    January of the next year, day 0 is the last day of the previous month.
    """
    year, month = normalize_month(year, month)
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day - 1 - _EPOCH_DAYS


def utc_millis(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Milliseconds since the epoch for UTC wall fields, with full field carry."""
    return (
        days_from_civil(year, month, day) * MS_PER_DAY
        + hour * MS_PER_HOUR
        + minute * MS_PER_MINUTE
        + second * MS_PER_SECOND
        + millisecond
    )
