from __future__ import annotations

from typing import TYPE_CHECKING

from voltdate._exceptions import UnknownUnit
from voltdate.calendar import days_in_month
from voltdate.instant.fields import compose, decompose, month_length
from voltdate.units import ARITHMETIC_UNITS, BOUNDARY_UNITS, FIXED_MS, MS_PER_DAY, Unit

if TYPE_CHECKING:
    from voltdate.instant.instant import Instant


def _arithmetic_unit(unit: Unit | str) -> Unit:
    u = Unit.parse(unit)
    if u not in ARITHMETIC_UNITS:
        raise UnknownUnit(unit)
    return u


def _truncated_quotient(numerator: int, denominator: int) -> int:
    q = abs(numerator) // denominator
    return q if numerator >= 0 else -q


# ── add / subtract ───────────────────────────────────────────────────────

def add(instant: Instant, amount: int | float, unit: Unit | str) -> Instant:
    u = _arithmetic_unit(unit)

    if u is Unit.WEEK:
        return add(instant, int(amount) * 7, Unit.DAY)

    if u in (Unit.YEAR, Unit.MONTH, Unit.DAY):
        f = decompose(instant)
        year, month, day = f.year, f.month, f.date
        if u is Unit.YEAR:
            year += int(amount)
            # Clamp before the year changes so Feb 29 never becomes Mar 1.
            day = min(day, days_in_month(year, month))
        elif u is Unit.MONTH:
            total = month - 1 + int(amount)
            year += total // 12
            month = total % 12 + 1
            day = min(day, days_in_month(year, month))
        else:
            day += int(amount)
        return compose(instant, year, month, day, f.hour, f.minute, f.second, f.millisecond)

    # Clock units are elapsed time, not wall-clock time.
    return instant._derive(instant.epoch_millis + int(amount * FIXED_MS[u]))


def subtract(instant: Instant, amount: int | float, unit: Unit | str) -> Instant:
    return add(instant, -amount, unit)


# ── unit boundaries ──────────────────────────────────────────────────────

def start_of(instant: Instant, unit: Unit | str) -> Instant:
    u = Unit.parse(unit)
    if u not in BOUNDARY_UNITS:
        raise UnknownUnit(unit)
    if u is Unit.MILLISECOND:
        return instant.clone()

    f = decompose(instant)
    if u is Unit.YEAR:
        return compose(instant, f.year, 1, 1)
    if u is Unit.MONTH:
        return compose(instant, f.year, f.month, 1)
    if u is Unit.WEEK:
        return compose(instant, f.year, f.month, f.date - f.day)
    if u is Unit.DAY:
        return compose(instant, f.year, f.month, f.date)
    if u is Unit.HOUR:
        return compose(instant, f.year, f.month, f.date, f.hour)
    if u is Unit.MINUTE:
        return compose(instant, f.year, f.month, f.date, f.hour, f.minute)
    return compose(instant, f.year, f.month, f.date, f.hour, f.minute, f.second)


def end_of(instant: Instant, unit: Unit | str) -> Instant:
    u = Unit.parse(unit)
    if u not in BOUNDARY_UNITS:
        raise UnknownUnit(unit)
    if u is Unit.MILLISECOND:
        return instant.clone()

    f = decompose(instant)
    if u is Unit.YEAR:
        return compose(instant, f.year, 12, 31, 23, 59, 59, 999)
    if u is Unit.MONTH:
        # Day 0 of the next month is the last day of this one.
        return compose(instant, f.year, f.month + 1, 0, 23, 59, 59, 999)
    if u is Unit.WEEK:
        return compose(instant, f.year, f.month, f.date + 6 - f.day, 23, 59, 59, 999)
    if u is Unit.DAY:
        return compose(instant, f.year, f.month, f.date, 23, 59, 59, 999)
    if u is Unit.HOUR:
        return compose(instant, f.year, f.month, f.date, f.hour, 59, 59, 999)
    if u is Unit.MINUTE:
        return compose(instant, f.year, f.month, f.date, f.hour, f.minute, 59, 999)
    return compose(instant, f.year, f.month, f.date, f.hour, f.minute, f.second, 999)


# ── differences ──────────────────────────────────────────────────────────

def _month_index(instant: Instant) -> int:
    f = decompose(instant)
    return f.year * 12 + f.month - 1


def _month_fraction(instant: Instant) -> float:
    """How far into its month ``instant`` is, in units of that month's length."""
    elapsed = instant.epoch_millis - start_of(instant, Unit.MONTH).epoch_millis
    return elapsed / (month_length(instant) * MS_PER_DAY)


def _month_diff(instant: Instant, other: Instant, precise: bool) -> int | float:
    """
    Month boundaries crossed going from ``other`` to ``instant``: both sides
    are reduced to the start of their month first, so Jan 31 -> Feb 1 counts
    as one month.  ``precise`` adds the receiver's progress through its month
    and removes the other's.
    """
    months = _month_index(instant) - _month_index(other)
    if not precise:
        return months
    return months + _month_fraction(instant) - _month_fraction(other)


def diff(
    instant: Instant,
    other: Instant,
    unit: Unit | str = Unit.MILLISECOND,
    precise: bool = False,
) -> int | float:
    u = _arithmetic_unit(unit)

    if u is Unit.YEAR:
        months = _month_diff(instant, other, precise)
        if precise:
            return months / 12
        return months // 12
    if u is Unit.MONTH:
        return _month_diff(instant, other, precise)

    delta = instant.epoch_millis - other.epoch_millis
    if u is Unit.MILLISECOND:
        return delta
    # DAY and WEEK are fixed 24h/168h spans; DST-shortened days are not corrected.
    if precise:
        return delta / FIXED_MS[u]
    return _truncated_quotient(delta, FIXED_MS[u])
