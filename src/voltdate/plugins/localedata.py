from __future__ import annotations

from dataclasses import dataclass

from voltdate import intl
from voltdate.instant import Instant


@dataclass(frozen=True, slots=True)
class LocaleData:
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays: tuple[str, ...]          # Sunday first
    weekdays_short: tuple[str, ...]
    weekdays_min: tuple[str, ...]
    meridiem_am: str
    meridiem_pm: str


def locale_data(instant: Instant) -> LocaleData:
    """Month, weekday and day-period names for the instant's locale."""
    locale = instant.locale
    return LocaleData(
        months=tuple(intl.month_name(m, locale, "wide") for m in range(1, 13)),
        months_short=tuple(intl.month_name(m, locale, "abbreviated") for m in range(1, 13)),
        weekdays=tuple(intl.weekday_name(d, locale, "wide") for d in range(7)),
        weekdays_short=tuple(intl.weekday_name(d, locale, "abbreviated") for d in range(7)),
        weekdays_min=tuple(intl.weekday_name(d, locale, "narrow") for d in range(7)),
        meridiem_am=intl.meridiem(0, locale),
        meridiem_pm=intl.meridiem(12, locale),
    )
