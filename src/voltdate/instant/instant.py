from __future__ import annotations

import math
import numbers
import time
from collections.abc import Mapping
from datetime import date, datetime
from functools import total_ordering
from typing import Any, Sequence, Union

from dateutil import parser as _dateutil_parser

from voltdate import intl
from voltdate._exceptions import InvalidInstant
from voltdate.calendar import utc_millis
from voltdate.config import InstantConfig
from voltdate.format.formatter import format_instant
from voltdate.format.parser import parse_epoch_millis
from voltdate.instant import arithmetic, fields, query
from voltdate.instant.fields import Fields
from voltdate.units import MS_PER_DAY, Unit

InstantInput = Union["Instant", datetime, date, str, int, float, Sequence[int], Mapping[str, int], None]

MIN_EPOCH_MILLIS = utc_millis(1, 1, 1)
MAX_EPOCH_MILLIS = utc_millis(9999, 12, 31, 23, 59, 59, 999)

_RECORD_DEFAULTS = (("hour", 0), ("minute", 0), ("second", 0), ("millisecond", 0))


def _check_range(epoch_ms: int, tz: str) -> int:
    """
    Reject instants whose UTC time, or whose wall clock in ``tz``, falls
    outside years 1-9999.
    """
    if not MIN_EPOCH_MILLIS <= epoch_ms <= MAX_EPOCH_MILLIS:
        raise InvalidInstant(f"{epoch_ms} ms is outside the representable range")
    # UTC offsets stay under a day, so only the first and last days can overflow.
    if epoch_ms - MIN_EPOCH_MILLIS < MS_PER_DAY or MAX_EPOCH_MILLIS - epoch_ms < MS_PER_DAY:
        intl.wall_clock(epoch_ms, tz)
    return epoch_ms


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInstant(f"{name} must be a number; got {value!r}")
    if not math.isfinite(value):
        raise InvalidInstant(f"{name} must be finite; got {value!r}")
    return int(value)


def _from_datetime(value: datetime, tz: str) -> int:
    if value.tzinfo is not None and value.utcoffset() is not None:
        return (value - intl.EPOCH) // intl.ONE_MS
    wall = utc_millis(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    return intl.from_wall_clock(wall, tz)


def _from_string(text: str, tz: str) -> int:
    try:
        parsed = _dateutil_parser.isoparse(text)
    except (ValueError, OverflowError):
        try:
            parsed = _dateutil_parser.parse(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidInstant(f"Invalid date: {text!r}") from exc
    return _from_datetime(parsed, tz)


def _from_sequence(values: Sequence[Any]) -> int:
    if not values:
        raise InvalidInstant("Positional form needs at least a year")
    if len(values) > 7:
        raise InvalidInstant(f"Positional form takes at most 7 fields; got {len(values)}")
    year, month0, day, hour, minute, second, ms = [
        _as_int(v, "field") for v in values
    ] + [0, 0, 1, 0, 0, 0, 0][len(values):]
    return utc_millis(year, month0 + 1, day, hour, minute, second, ms)


def _from_record(record: Mapping[str, Any]) -> int:
    if record.get("year") is None:
        raise InvalidInstant("Record form needs a 'year'")
    year = _as_int(record["year"], "year")
    month = _as_int(record.get("month") or 1, "month")
    day = _as_int(record.get("date") or 1, "date")
    rest = [_as_int(record.get(name, default), name) for name, default in _RECORD_DEFAULTS]
    return utc_millis(year, month, day, *rest)


def _to_epoch_millis(value: InstantInput, tz: str) -> int:
    if value is None:
        return time.time_ns() // 1_000_000
    if isinstance(value, Instant):
        return value.epoch_millis
    if isinstance(value, datetime):
        return _from_datetime(value, tz)
    if isinstance(value, date):
        return intl.from_wall_clock(utc_millis(value.year, value.month, value.day), tz)
    if isinstance(value, str):
        return _from_string(value, tz)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return _as_int(value, "timestamp")
    if isinstance(value, Mapping):
        return _from_record(value)
    if isinstance(value, (list, tuple)):
        return _from_sequence(value)
    raise InvalidInstant(f"Cannot build an Instant from {type(value).__name__}")


@total_ordering
class Instant:
    """
    One absolute point in time (milliseconds since the Unix epoch) plus the
    timezone and locale used to display it.

    Instants are immutable: setters and arithmetic return new Instants.
    Ordering, equality and hashing look at ``epoch_millis`` only.

    Positional (``[year, month0, day, ...]``) and record (``{"year": ...}``)
    inputs are read as UTC fields whatever the display timezone; naive
    datetimes and strings without an offset are read on the display
    timezone's wall clock.
    """

    __slots__ = ("_ms", "_tz", "_locale")

    def __init__(
        self,
        value: InstantInput = None,
        config: InstantConfig | None = None,
        *,
        tz: str | None = None,
        locale: str | None = None,
    ) -> None:
        config = config or InstantConfig()
        tz = tz or config.tz
        locale = locale or config.locale
        if isinstance(value, Instant):
            tz = tz or value.timezone
            locale = locale or value.locale
        resolved = InstantConfig(tz=tz, locale=locale).resolve()
        intl.zone(resolved.tz)

        self._tz: str = resolved.tz
        self._locale: str = resolved.locale
        self._ms: int = _check_range(_to_epoch_millis(value, self._tz), self._tz)

    @classmethod
    def _from_parts(cls, epoch_ms: int, tz: str, locale: str) -> Instant:
        obj = cls.__new__(cls)
        obj._ms = _check_range(epoch_ms, tz)
        obj._tz = tz
        obj._locale = locale
        return obj

    def _derive(self, epoch_ms: int) -> Instant:
        """A new Instant at ``epoch_ms`` with this one's timezone and locale."""
        return Instant._from_parts(epoch_ms, self._tz, self._locale)

    def _coerce(self, other: InstantInput) -> Instant:
        if isinstance(other, Instant):
            return other
        return Instant(other, tz=self._tz, locale=self._locale)

    @classmethod
    def parse(
        cls,
        text: str,
        pattern: str,
        locale: str | None = None,
        tz: str | None = None,
    ) -> Instant:
        """Parse ``text`` with ``pattern``; fields are read as UTC."""
        return cls(parse_epoch_millis(text, pattern), tz=tz, locale=locale)

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def epoch_millis(self) -> int:
        return self._ms

    @property
    def timezone(self) -> str:
        return self._tz

    @property
    def locale(self) -> str:
        return self._locale

    def clone(self) -> Instant:
        return self._derive(self._ms)

    def to_datetime(self) -> datetime:
        """A fresh timezone-aware UTC datetime."""
        return intl.wall_clock(self._ms, "UTC")

    def to_iso_string(self) -> str:
        dt = self.to_datetime()
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
        )

    # ── fields ───────────────────────────────────────────────────────────

    def fields(self) -> Fields:
        return fields.decompose(self)

    @property
    def year(self) -> int:
        return self.fields().year

    @property
    def month(self) -> int:
        return self.fields().month

    @property
    def date(self) -> int:
        return self.fields().date

    @property
    def day(self) -> int:
        return self.fields().day

    @property
    def hour(self) -> int:
        return self.fields().hour

    @property
    def minute(self) -> int:
        return self.fields().minute

    @property
    def second(self) -> int:
        return self.fields().second

    @property
    def millisecond(self) -> int:
        return self.fields().millisecond

    @property
    def quarter(self) -> int:
        return self.fields().quarter

    def get(self, unit: Unit | str) -> int:
        return fields.get_field(self, unit)

    def set(self, unit: Unit | str, value: int) -> Instant:
        return fields.set_field(self, unit, value)

    def set_year(self, value: int) -> Instant:
        return fields.set_year(self, value)

    def set_month(self, value: int) -> Instant:
        return fields.set_month(self, value)

    def set_date(self, value: int) -> Instant:
        return fields.set_date(self, value)

    def set_day(self, value: int) -> Instant:
        return fields.set_day(self, value)

    def set_hour(self, value: int) -> Instant:
        return fields.set_hour(self, value)

    def set_minute(self, value: int) -> Instant:
        return fields.set_minute(self, value)

    def set_second(self, value: int) -> Instant:
        return fields.set_second(self, value)

    def set_millisecond(self, value: int) -> Instant:
        return fields.set_millisecond(self, value)

    def days_in_month(self) -> int:
        return fields.month_length(self)

    def day_of_year(self) -> int:
        return fields.day_of_year(self)

    def week_of_year(self) -> int:
        return fields.week_of_year(self)

    def is_leap_year(self) -> bool:
        return fields.leap_year(self)

    def to_dict(self) -> dict[str, int]:
        f = self.fields()
        return {
            "years": f.year,
            "months": f.month,
            "date": f.date,
            "hours": f.hour,
            "minutes": f.minute,
            "seconds": f.second,
            "milliseconds": f.millisecond,
        }

    def to_list(self) -> list[int]:
        f = self.fields()
        return [f.year, f.month - 1, f.date, f.hour, f.minute, f.second, f.millisecond]

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, amount: int | float, unit: Unit | str) -> Instant:
        return arithmetic.add(self, amount, unit)

    def subtract(self, amount: int | float, unit: Unit | str) -> Instant:
        return arithmetic.subtract(self, amount, unit)

    def start_of(self, unit: Unit | str) -> Instant:
        return arithmetic.start_of(self, unit)

    def end_of(self, unit: Unit | str) -> Instant:
        return arithmetic.end_of(self, unit)

    def diff(
        self,
        other: InstantInput,
        unit: Unit | str = Unit.MILLISECOND,
        precise: bool = False,
    ) -> int | float:
        # Calendar units are counted on this instant's wall clock.
        other = self._derive(self._coerce(other).epoch_millis)
        return arithmetic.diff(self, other, unit, precise)

    # ── queries ──────────────────────────────────────────────────────────

    def is_before(self, other: InstantInput, unit: Unit | str | None = None) -> bool:
        return query.is_before(self, self._coerce(other), unit)

    def is_after(self, other: InstantInput, unit: Unit | str | None = None) -> bool:
        return query.is_after(self, self._coerce(other), unit)

    def is_same(self, other: InstantInput, unit: Unit | str | None = None) -> bool:
        return query.is_same(self, self._coerce(other), unit)

    def is_same_or_before(self, other: InstantInput, unit: Unit | str | None = None) -> bool:
        return query.is_same_or_before(self, self._coerce(other), unit)

    def is_same_or_after(self, other: InstantInput, unit: Unit | str | None = None) -> bool:
        return query.is_same_or_after(self, self._coerce(other), unit)

    def is_between(
        self,
        start: InstantInput,
        end: InstantInput,
        unit: Unit | str | None = None,
        inclusivity: str = "[)",
    ) -> bool:
        return query.is_between(self, self._coerce(start), self._coerce(end), unit, inclusivity)

    # ── formatting ───────────────────────────────────────────────────────

    def format(self, pattern: str) -> str:
        return format_instant(self, pattern)

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms == other._ms

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._ms < other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __str__(self) -> str:
        return self.format("ddd MMM DD YYYY HH:mm:ss Z")

    def __repr__(self) -> str:
        return (
            f"Instant({self.to_iso_string()!r}, "
            f"tz={self._tz!r}, "
            f"locale={self._locale!r})"
        )
