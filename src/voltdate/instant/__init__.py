# src/voltdate/instant/__init__.py
"""
voltdate.instant
~~~~~~~~~~~~~~~~

The immutable ``Instant`` value type: field access in a display timezone,
calendar arithmetic (add/subtract, start/end of a unit, differences) and
comparisons.

Basic usage::

    from voltdate.instant import Instant

    i = Instant("2024-01-31T12:00:00Z", tz="UTC")
    i.add(1, "month").date                      # → 29  (2024 is a leap year)
    i.start_of("month").format("YYYY-MM-DD")    # → '2024-01-01'
    i.diff("2023-01-31T12:00:00Z", "year")      # → 1

Public API
----------
Instant    The value type.
Fields     Calendar fields of an Instant in its display timezone.
"""

from __future__ import annotations

from voltdate.instant.fields import Fields
from voltdate.instant.instant import Instant

__all__ = [
    "Fields",
    "Instant",
]
