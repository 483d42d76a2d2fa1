"""
tests/plugins/test_localedata.py

Covers:
  - English month, weekday and day-period names
  - Sunday-first weekday ordering
  - Another locale
"""

import pytest

from voltdate import Instant
from voltdate.plugins import LocaleData, locale_data


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def english():
    return locale_data(Instant(0, tz="UTC", locale="en-US"))


# ── English ───────────────────────────────────────────────────────────────────

class TestEnglish:

    def test_type(self, english):
        assert isinstance(english, LocaleData)

    def test_months(self, english):
        assert len(english.months) == 12
        assert english.months[0] == "January"
        assert english.months[11] == "December"
        assert english.months_short[8] == "Sep"

    def test_weekdays_start_on_sunday(self, english):
        assert english.weekdays[0] == "Sunday"
        assert english.weekdays[6] == "Saturday"
        assert english.weekdays_short[1] == "Mon"
        assert english.weekdays_min[0] == "S"

    def test_meridiem(self, english):
        assert (english.meridiem_am, english.meridiem_pm) == ("AM", "PM")

    def test_agrees_with_format(self):
        i = Instant("2024-06-15T14:00:00Z", tz="UTC", locale="en-US")
        data = locale_data(i)
        assert i.format("dddd") == data.weekdays[i.day]
        assert i.format("MMMM") == data.months[i.month - 1]


# ── Other locales ─────────────────────────────────────────────────────────────

class TestOtherLocales:

    def test_german(self):
        data = locale_data(Instant(0, tz="UTC", locale="de-DE"))
        assert data.months[2] == "März"
        assert data.weekdays[0] == "Sonntag"
