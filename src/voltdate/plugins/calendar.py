from __future__ import annotations

from collections.abc import Mapping

from voltdate.instant import Instant

DEFAULT_FORMATS: dict[str, str] = {
    "sameDay": "[Today at] HH:mm",
    "lastDay": "[Yesterday at] HH:mm",
    "lastWeek": "dddd [at] HH:mm",
    "sameElse": "DD/MM/YYYY",
    "nextDay": "[Tomorrow at] HH:mm",
    "nextWeek": "dddd [at] HH:mm",
}


def calendar(
    instant: Instant,
    formats: Mapping[str, str] | None = None,
    now: Instant | None = None,
) -> str:
    """
    Render ``instant`` relative to ``now`` ("Today at 14:30", "Monday at
    09:00", ...).  Days are compared on the instant's wall clock.
    """
    patterns = {**DEFAULT_FORMATS, **(formats or {})}
    if now is None:
        now = Instant(tz=instant.timezone, locale=instant.locale)

    today = now.start_of("day")
    target = instant.start_of("day")

    if target.is_same(today, "day"):
        key = "sameDay"
    elif target.is_same(today.subtract(1, "day"), "day"):
        key = "lastDay"
    elif target.is_same(today.add(1, "day"), "day"):
        key = "nextDay"
    elif target.is_before(today) and target.is_after(today.subtract(7, "day")):
        key = "lastWeek"
    elif target.is_after(today) and target.is_before(today.add(7, "day")):
        key = "nextWeek"
    else:
        key = "sameElse"
    return instant.format(patterns[key])
