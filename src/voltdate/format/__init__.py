# src/voltdate/format/__init__.py
"""
voltdate.format
~~~~~~~~~~~~~~~

Pattern-based rendering and parsing of Instants.  Both directions share one
token vocabulary and the same longest-first, left-to-right scan; text in
square brackets is literal.

Basic usage::

    from voltdate import Instant

    i = Instant("2024-06-15T14:30:45.500Z", tz="UTC", locale="en-US")
    i.format("dddd, MMMM D, YYYY")        # → 'Saturday, June 15, 2024'
    i.format("[Today at] HH:mm")          # → 'Today at 14:30'
    i.format("LL")                        # → 'June 15, 2024'

    Instant.parse("01/15/2024", "MM/DD/YYYY", tz="UTC").format("YYYY-MM-DD")
    # → '2024-01-15'

Public API
----------
format_instant        Render an Instant through a pattern.
parse_epoch_millis    Extract UTC epoch milliseconds from text and a pattern.
compile_pattern       The compiled expression and tokens for a parse pattern.
"""

from __future__ import annotations

from voltdate.format.formatter import format_instant
from voltdate.format.parser import compile_pattern, parse_epoch_millis

__all__ = [
    "compile_pattern",
    "format_instant",
    "parse_epoch_millis",
]
