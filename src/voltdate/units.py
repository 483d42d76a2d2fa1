from __future__ import annotations

from enum import Enum

from ._exceptions import UnknownUnit


class Unit(str, Enum):
    """Closed set of calendar and clock units."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DATE = "date"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @classmethod
    def parse(cls, value: Unit | str, *, aliases: bool = False) -> Unit:
        """
        Resolve a unit name at a dynamic boundary.

        Short field aliases (``D``, ``d``, ``H``, ``m``, ``s``, ``ms``) are only
        honoured with ``aliases=True``; they are case-sensitive.
        """
        if isinstance(value, Unit):
            return value
        if isinstance(value, str):
            if aliases and value in _FIELD_ALIASES:
                return _FIELD_ALIASES[value]
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnknownUnit(value)


_FIELD_ALIASES: dict[str, Unit] = {
    "D": Unit.DATE,
    "d": Unit.DAY,
    "H": Unit.HOUR,
    "m": Unit.MINUTE,
    "s": Unit.SECOND,
    "ms": Unit.MILLISECOND,
}

# Units that can be read or written through get()/set().
FIELD_UNITS = frozenset(
    {
        Unit.YEAR,
        Unit.MONTH,
        Unit.DATE,
        Unit.DAY,
        Unit.HOUR,
        Unit.MINUTE,
        Unit.SECOND,
        Unit.MILLISECOND,
    }
)

# Units accepted by add(), subtract() and diff().
ARITHMETIC_UNITS = frozenset(
    {
        Unit.YEAR,
        Unit.MONTH,
        Unit.WEEK,
        Unit.DAY,
        Unit.HOUR,
        Unit.MINUTE,
        Unit.SECOND,
        Unit.MILLISECOND,
    }
)

# Units accepted by start_of() and end_of(); MILLISECOND is the identity.
BOUNDARY_UNITS = ARITHMETIC_UNITS

MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY

FIXED_MS: dict[Unit, int] = {
    Unit.MILLISECOND: 1,
    Unit.SECOND: MS_PER_SECOND,
    Unit.MINUTE: MS_PER_MINUTE,
    Unit.HOUR: MS_PER_HOUR,
    Unit.DAY: MS_PER_DAY,
    Unit.WEEK: MS_PER_WEEK,
}
