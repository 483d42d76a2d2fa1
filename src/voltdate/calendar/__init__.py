# src/voltdate/calendar/__init__.py
"""
voltdate.calendar
~~~~~~~~~~~~~~~~~

Proleptic Gregorian calendar arithmetic on plain integers.  Month lengths and
cumulative day counts are kept as NumPy prefix tables; field composition
carries out-of-range fields into the next larger one.

Basic usage::

    from voltdate.calendar import days_in_month, utc_millis

    days_in_month(2024, 2)              # → 29
    utc_millis(2024, 1, 32)             # → 2024-02-01T00:00:00Z in ms

Leap-year tests accept NumPy arrays::

    import numpy as np
    is_leap_year(np.array([1900, 2000, 2024]))   # → [False, True, True]

Public API
----------
is_leap_year       Leap-year test (scalar or array).
days_in_month      Length of a month, leap-year aware.
days_from_civil    Days since 1970-01-01 with field carry.
utc_millis         Epoch milliseconds for UTC fields with field carry.
"""

from __future__ import annotations

from voltdate.calendar.gregorian import (
    days_before_month,
    days_from_civil,
    days_in_month,
    is_leap_year,
    normalize_month,
    utc_millis,
)

__all__ = [
    "days_before_month",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "normalize_month",
    "utc_millis",
]
