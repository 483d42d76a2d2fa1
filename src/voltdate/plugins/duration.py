from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import timedelta

from babel.dates import format_timedelta

from voltdate import intl
from voltdate._exceptions import UnknownUnit
from voltdate.config import InstantConfig
from voltdate.instant import Instant
from voltdate.units import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, MS_PER_WEEK

# Calendar units use mean lengths; a Duration carries no anchor date.
UNIT_MS: dict[str, float] = {
    "years": 365.25 * MS_PER_DAY,
    "months": 30.44 * MS_PER_DAY,
    "weeks": MS_PER_WEEK,
    "days": MS_PER_DAY,
    "hours": MS_PER_HOUR,
    "minutes": MS_PER_MINUTE,
    "seconds": MS_PER_SECOND,
    "milliseconds": 1,
}

_SINGULAR = {name[:-1]: name for name in UNIT_MS}
_SHORT = {"y": "years", "M": "months", "w": "weeks", "d": "days", "h": "hours", "m": "minutes", "s": "seconds", "ms": "milliseconds"}

INVALID_TEXT = "Invalid duration"
_DICT_UNITS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")


def _unit_ms(unit: str) -> float:
    key = _SHORT.get(unit) or _SINGULAR.get(unit) or (unit if unit in UNIT_MS else None)
    if key is None:
        raise UnknownUnit(unit)
    return UNIT_MS[key]


def _total(value: float | Mapping[str, float] | Duration, unit: str) -> float:
    if isinstance(value, Duration):
        return value.milliseconds
    if isinstance(value, Mapping):
        return sum(float(amount) * _unit_ms(key) for key, amount in value.items())
    return float(value) * _unit_ms(unit)


class Duration:
    """
    A length of time held as a millisecond count.

    ``Duration(90, "minutes")``, ``Duration({"hours": 1, "minutes": 30})`` and
    ``Duration(5_400_000)`` are all the same duration.  Invalid amounts (NaN,
    infinities) produce a Duration whose :meth:`is_valid` is False.
    """

    __slots__ = ("_ms", "_locale")

    def __init__(
        self,
        value: float | Mapping[str, float] | Duration = 0,
        unit: str = "milliseconds",
        *,
        locale: str | None = None,
    ) -> None:
        self._ms = _total(value, unit)
        self._locale = locale

    @property
    def milliseconds(self) -> float:
        return self._ms

    def is_valid(self) -> bool:
        return math.isfinite(self._ms)

    # ── Conversions ──────────────────────────────────────────────────────────

    def as_unit(self, unit: str) -> float:
        return self._ms / _unit_ms(unit)

    def as_milliseconds(self) -> float:
        return self._ms

    def as_seconds(self) -> float:
        return self._ms / MS_PER_SECOND

    def as_minutes(self) -> float:
        return self._ms / MS_PER_MINUTE

    def as_hours(self) -> float:
        return self._ms / MS_PER_HOUR

    def as_days(self) -> float:
        return self._ms / MS_PER_DAY

    def as_weeks(self) -> float:
        return self._ms / MS_PER_WEEK

    def as_months(self) -> float:
        return self._ms / UNIT_MS["months"]

    def as_years(self) -> float:
        return self._ms / UNIT_MS["years"]

    def as_dict(self) -> dict[str, int]:
        """
        Whole units, largest first; each unit takes what the larger ones left
        over.  An invalid duration breaks down to all zeros.
        """
        if not self.is_valid():
            return dict.fromkeys(_DICT_UNITS, 0)
        remaining = int(self._ms)
        sign = -1 if remaining < 0 else 1
        remaining = abs(remaining)
        out: dict[str, int] = {}
        for name in _DICT_UNITS:
            count, remaining = divmod(remaining, round(UNIT_MS[name]))
            out[name] = sign * int(count)
        return out

    # ── Arithmetic ───────────────────────────────────────────────────────────

    def add(self, value: float | Mapping[str, float] | Duration, unit: str = "milliseconds") -> Duration:
        return Duration(self._ms + _total(value, unit), locale=self._locale)

    def subtract(self, value: float | Mapping[str, float] | Duration, unit: str = "milliseconds") -> Duration:
        return Duration(self._ms - _total(value, unit), locale=self._locale)

    def humanize(self, locale: str | None = None) -> str:
        """Approximate length in words, e.g. ``"2 hours"``, or ``INVALID_TEXT``."""
        if not self.is_valid():
            return INVALID_TEXT
        tag = locale or self._locale or InstantConfig().resolve().locale
        return format_timedelta(timedelta(milliseconds=self._ms), locale=intl.babel_locale(tag))

    # ── Dunder ───────────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._ms == other._ms

    def __hash__(self) -> int:
        return hash(self._ms)

    def __repr__(self) -> str:
        return f"Duration(milliseconds={self._ms!r})"


def to_duration(instant: Instant, other: Instant | None = None) -> Duration:
    """
    The duration since the epoch, or from ``other`` to ``instant`` when given.
    """
    base = 0 if other is None else other.epoch_millis
    return Duration(instant.epoch_millis - base, locale=instant.locale)
