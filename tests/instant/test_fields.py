"""
tests/instant/test_fields.py

Covers:
  - Field getters in UTC and in a non-UTC display timezone
  - Named setters, including day-of-month clamping and carry
  - get()/set() with canonical names and short aliases
  - Derived fields: quarter, day of year, ISO week, leap year, month length
  - to_dict() / to_list()
"""

import pytest

from voltdate import Fields, Instant, UnknownUnit


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def mid_june():
    """Saturday 2024-06-15 14:30:45.500 UTC."""
    return Instant("2024-06-15T14:30:45.500Z", tz="UTC", locale="en-US")


@pytest.fixture
def jan_31_leap():
    return Instant("2024-01-31T10:00:00Z", tz="UTC", locale="en-US")


@pytest.fixture
def jan_31_common():
    return Instant("2023-01-31T10:00:00Z", tz="UTC", locale="en-US")


# ── Helpers ───────────────────────────────────────────────────────────────────

def ymd(instant):
    return instant.format("YYYY-MM-DD")


# ── Getters ───────────────────────────────────────────────────────────────────

class TestGetters:

    def test_fields(self, mid_june):
        assert mid_june.fields() == Fields(
            year=2024, month=6, date=15, day=6, hour=14, minute=30, second=45, millisecond=500
        )

    def test_properties(self, mid_june):
        assert (mid_june.year, mid_june.month, mid_june.date) == (2024, 6, 15)
        assert (mid_june.hour, mid_june.minute, mid_june.second, mid_june.millisecond) == (14, 30, 45, 500)

    def test_weekday_zero_is_sunday(self):
        assert Instant("2024-06-16T00:00:00Z", tz="UTC", locale="en-US").day == 0

    def test_fields_follow_display_timezone(self, mid_june):
        tokyo = Instant(mid_june, tz="Asia/Tokyo")
        assert (tokyo.date, tokyo.hour, tokyo.day) == (15, 23, 6)
        ny = Instant(mid_june, tz="America/New_York")
        assert (ny.date, ny.hour) == (15, 10)

    def test_fields_cross_midnight_in_display_timezone(self):
        i = Instant("2024-06-15T20:00:00Z", tz="Asia/Tokyo", locale="en-US")
        assert (i.date, i.hour, i.day) == (16, 5, 0)


# ── Setters ───────────────────────────────────────────────────────────────────

class TestSetters:

    def test_set_year(self, mid_june):
        assert ymd(mid_june.set_year(2020)) == "2020-06-15"

    def test_set_year_from_leap_day_rolls_over(self):
        leap_day = Instant("2024-02-29T00:00:00Z", tz="UTC", locale="en-US")
        assert ymd(leap_day.set_year(2023)) == "2023-03-01"

    def test_set_month_clamps_to_leap_february(self, jan_31_leap):
        assert ymd(jan_31_leap.set_month(2)) == "2024-02-29"

    def test_set_month_clamps_to_common_february(self, jan_31_common):
        assert ymd(jan_31_common.set_month(2)) == "2023-02-28"

    def test_set_month_carries_into_next_year(self, mid_june):
        assert ymd(mid_june.set_month(14)) == "2025-02-15"

    def test_set_month_keeps_time(self, jan_31_leap):
        assert jan_31_leap.set_month(3).format("HH:mm") == "10:00"

    def test_set_date_clamps(self, mid_june):
        assert ymd(mid_june.set_date(31)) == "2024-06-30"
        assert ymd(mid_june.set_date(0)) == "2024-06-01"

    def test_set_day_moves_within_week(self, mid_june):
        # Saturday -> Monday of the same Sunday-started week.
        assert ymd(mid_june.set_day(1)) == "2024-06-10"
        assert ymd(mid_june.set_day(0)) == "2024-06-09"

    def test_set_day_past_saturday_moves_forward(self, mid_june):
        assert ymd(mid_june.set_day(7)) == "2024-06-16"

    def test_clock_setters(self, mid_june):
        changed = mid_june.set_hour(1).set_minute(2).set_second(3).set_millisecond(4)
        assert changed.format("YYYY-MM-DD HH:mm:ss.SSS") == "2024-06-15 01:02:03.004"

    def test_clock_setter_carries(self, mid_june):
        assert mid_june.set_hour(25).format("YYYY-MM-DD HH") == "2024-06-16 01"
        assert mid_june.set_minute(-1).format("HH:mm") == "13:59"

    def test_setters_work_on_display_wall_clock(self):
        i = Instant("2024-06-15T20:00:00Z", tz="Asia/Tokyo", locale="en-US")
        assert i.set_hour(9).to_iso_string() == "2024-06-16T00:00:00.000Z"

    def test_setter_preserves_timezone_and_locale(self):
        i = Instant(0, tz="Asia/Tokyo", locale="de-DE").set_year(2000)
        assert (i.timezone, i.locale) == ("Asia/Tokyo", "de-DE")


# ── Generic get / set ─────────────────────────────────────────────────────────

class TestGenericAccess:

    @pytest.mark.parametrize("unit, expected", [
        ("year", 2024),
        ("month", 6),
        ("date", 15),
        ("D", 15),
        ("day", 6),
        ("d", 6),
        ("hour", 14),
        ("H", 14),
        ("m", 30),
        ("s", 45),
        ("ms", 500),
    ])
    def test_get(self, mid_june, unit, expected):
        assert mid_june.get(unit) == expected

    def test_set_matches_named_setter(self, jan_31_leap):
        assert jan_31_leap.set("month", 2) == jan_31_leap.set_month(2)
        assert jan_31_leap.set("H", 3) == jan_31_leap.set_hour(3)

    def test_week_is_not_a_field(self, mid_june):
        with pytest.raises(UnknownUnit):
            mid_june.get("week")
        with pytest.raises(UnknownUnit):
            mid_june.set("week", 2)

    def test_unknown_name(self, mid_june):
        with pytest.raises(UnknownUnit):
            mid_june.get("fortnight")


# ── Derived fields ────────────────────────────────────────────────────────────

class TestDerived:

    @pytest.mark.parametrize("month, quarter", [(1, 1), (3, 1), (4, 2), (6, 2), (7, 3), (10, 4), (12, 4)])
    def test_quarter(self, month, quarter):
        assert Instant([2024, month - 1, 1], tz="UTC", locale="en-US").quarter == quarter

    def test_day_of_year(self, mid_june):
        assert mid_june.day_of_year() == 167
        assert Instant([2023, 11, 31], tz="UTC", locale="en-US").day_of_year() == 365
        assert Instant([2024, 11, 31], tz="UTC", locale="en-US").day_of_year() == 366

    def test_iso_week(self, mid_june):
        assert mid_june.week_of_year() == 24

    def test_iso_week_at_year_boundary(self):
        # 2021-01-03 is a Sunday that still belongs to ISO week 53 of 2020.
        assert Instant([2021, 0, 3], tz="UTC", locale="en-US").week_of_year() == 53
        assert Instant([2021, 0, 4], tz="UTC", locale="en-US").week_of_year() == 1

    def test_leap_year(self, jan_31_leap, jan_31_common):
        assert jan_31_leap.is_leap_year() is True
        assert jan_31_common.is_leap_year() is False

    def test_days_in_month(self, jan_31_leap):
        assert jan_31_leap.set_month(2).days_in_month() == 29
        assert jan_31_leap.days_in_month() == 31


# ── Serialisation ─────────────────────────────────────────────────────────────

class TestSerialisation:

    def test_to_dict(self, mid_june):
        assert mid_june.to_dict() == {
            "years": 2024,
            "months": 6,
            "date": 15,
            "hours": 14,
            "minutes": 30,
            "seconds": 45,
            "milliseconds": 500,
        }

    def test_to_list_month_is_zero_based(self, mid_june):
        assert mid_june.to_list() == [2024, 5, 15, 14, 30, 45, 500]

    def test_to_list_round_trips_through_positional_form(self, mid_june):
        assert Instant(mid_june.to_list(), tz="UTC", locale="en-US") == mid_june
