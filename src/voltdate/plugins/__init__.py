# src/voltdate/plugins/__init__.py
"""
voltdate.plugins
~~~~~~~~~~~~~~~~

Optional helpers built only on the public ``Instant`` API.  Nothing in the
core imports this package; each module is a set of free functions that take
an Instant as their first argument.

Basic usage::

    from voltdate import Instant
    from voltdate.plugins import from_now, max_instant, to_timezone

    a = Instant("2024-06-15T14:30:00Z", tz="UTC", locale="en-US")
    b = a.add(3, "day")

    max_instant(a, b) == b                         # → True
    from_now(a, now=b)                             # → '3 days ago'
    to_timezone(a, "Asia/Tokyo").format("HH:mm")   # → '23:30'

Durations::

    from voltdate.plugins import Duration

    Duration({"hours": 1, "minutes": 30}).as_minutes()   # → 90.0
    Duration(2, "hours").humanize("en-US")               # → '2 hours'

Public API
----------
max_instant / min_instant    Latest / earliest of several instants.
LocaleData, locale_data      Month, weekday and day-period names of a locale.
calendar                     "Today at 14:30" style phrasing.
from_now / to_now            "in 3 days" / "3 days ago" phrasing.
Duration, to_duration        Lengths of time and their conversions.
to_timezone / to_utc / to_local
                             Re-display an instant in another timezone.
"""

from __future__ import annotations

from voltdate.plugins.calendar import DEFAULT_FORMATS, calendar
from voltdate.plugins.duration import Duration, to_duration
from voltdate.plugins.localedata import LocaleData, locale_data
from voltdate.plugins.minmax import max_instant, min_instant
from voltdate.plugins.relative import from_now, to_now
from voltdate.plugins.timezone import to_local, to_timezone, to_utc

__all__ = [
    "DEFAULT_FORMATS",
    "Duration",
    "LocaleData",
    "calendar",
    "from_now",
    "locale_data",
    "max_instant",
    "min_instant",
    "to_duration",
    "to_local",
    "to_now",
    "to_timezone",
    "to_utc",
]
