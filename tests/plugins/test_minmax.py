"""
tests/plugins/test_minmax.py

Covers:
  - Varargs and single-iterable call forms
  - Tie-breaking (first wins)
  - Raw inputs coerced to Instants
  - Empty selections
"""

import pytest

from voltdate import EmptySelection, Instant
from voltdate.plugins import max_instant, min_instant


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def three():
    return [
        Instant("2024-06-15T00:00:00Z", tz="UTC", locale="en-US"),
        Instant("2024-01-01T00:00:00Z", tz="UTC", locale="en-US"),
        Instant("2024-12-31T00:00:00Z", tz="UTC", locale="en-US"),
    ]


# ── Selection ─────────────────────────────────────────────────────────────────

class TestSelection:

    def test_varargs(self, three):
        assert max_instant(*three) is three[2]
        assert min_instant(*three) is three[1]

    def test_single_iterable(self, three):
        assert max_instant(three) is three[2]
        assert min_instant(iter(three)) is three[1]

    def test_single_instant(self, three):
        assert max_instant(three[0]) is three[0]

    def test_first_wins_ties(self):
        a = Instant(0, tz="UTC", locale="en-US")
        b = Instant(0, tz="Asia/Tokyo", locale="en-US")
        assert max_instant(a, b) is a
        assert min_instant(b, a) is b

    def test_raw_inputs(self):
        latest = max_instant("2024-01-01T00:00:00Z", 0, [2030])
        assert latest.to_iso_string() == "2030-01-01T00:00:00.000Z"

    def test_string_is_not_treated_as_iterable(self):
        only = min_instant("2024-01-01T00:00:00Z")
        assert only.to_iso_string() == "2024-01-01T00:00:00.000Z"


# ── Empty ─────────────────────────────────────────────────────────────────────

class TestEmpty:

    def test_no_arguments(self):
        with pytest.raises(EmptySelection):
            max_instant()

    def test_empty_iterable(self):
        with pytest.raises(EmptySelection):
            min_instant([])
