# src/voltdate/__init__.py
"""
voltdate
~~~~~~~~

Immutable date-time values with calendar arithmetic, locale-aware formatting
and pattern parsing.  An Instant is one absolute point in time plus the
timezone and locale it is displayed in; every operation returns a new value.

Basic usage::

    from voltdate import volt

    i = volt("2024-01-31T12:00:00Z", tz="UTC", locale="en-US")
    i.add(1, "month").format("YYYY-MM-DD")         # → '2024-02-29'
    i.end_of("month").format("HH:mm:ss.SSS")       # → '23:59:59.999'
    i.diff("2023-11-30T12:00:00Z", "month")        # → 2
    i.format("dddd, MMMM D, YYYY")                 # → 'Wednesday, January 31, 2024'

Parsing::

    from voltdate import parse

    parse("15/01/2024 14:30", "DD/MM/YYYY HH:mm", tz="UTC").to_iso_string()
    # → '2024-01-15T14:30:00.000Z'

Public API
----------
Instant, volt         The value type and its factory.
parse                 Build an Instant from text and a pattern.
InstantConfig         Display timezone and locale options.
Fields, Unit          Calendar fields and the closed unit set.
VoltDateError         Base of all errors (a ValueError); see the subclasses.
"""

from __future__ import annotations

from voltdate._exceptions import (
    EmptySelection,
    InvalidInstant,
    ParseMismatch,
    UnknownTimezone,
    UnknownUnit,
    VoltDateError,
)
from voltdate.units import Unit
from voltdate.config import InstantConfig
from voltdate.instant import Fields, Instant
from voltdate.instant.instant import InstantInput

__version__ = "0.1.0"


def volt(
    value: InstantInput = None,
    config: InstantConfig | None = None,
    *,
    tz: str | None = None,
    locale: str | None = None,
) -> Instant:
    """Build an Instant; with no arguments, the current moment."""
    return Instant(value, config, tz=tz, locale=locale)


parse = Instant.parse

__all__ = [
    "EmptySelection",
    "Fields",
    "Instant",
    "InstantConfig",
    "InvalidInstant",
    "ParseMismatch",
    "Unit",
    "UnknownTimezone",
    "UnknownUnit",
    "VoltDateError",
    "parse",
    "volt",
]
