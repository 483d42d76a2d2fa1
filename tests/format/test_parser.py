"""
tests/format/test_parser.py

Covers:
  - Numeric patterns in several orders
  - Month names (full and abbreviated, case-insensitive)
  - Two-digit years, fractional-second widths
  - 12-hour clocks with a day period
  - Bracketed literals and regex metacharacters in literal text
  - Defaults for missing fields
  - Mismatches and unknown month names
  - Compiled-pattern caching
"""

from datetime import datetime, timezone

import pytest

from voltdate import Instant, ParseMismatch, parse
from voltdate.format import compile_pattern, parse_epoch_millis


# ── Helpers ───────────────────────────────────────────────────────────────────

def iso(text, pattern):
    return Instant.parse(text, pattern, tz="UTC", locale="en-US").to_iso_string()


# ── Numeric patterns ──────────────────────────────────────────────────────────

class TestNumeric:

    def test_us_date(self):
        assert iso("01/15/2024", "MM/DD/YYYY") == "2024-01-15T00:00:00.000Z"

    def test_day_first_with_time(self):
        assert iso("15/01/2024 14:30", "DD/MM/YYYY HH:mm") == "2024-01-15T14:30:00.000Z"

    def test_full_timestamp(self):
        assert iso("2024-06-15 14:30:45.123", "YYYY-MM-DD HH:mm:ss.SSS") == "2024-06-15T14:30:45.123Z"

    def test_unpadded_fields(self):
        assert iso("2024-6-5 7:8:9", "YYYY-M-D H:m:s") == "2024-06-05T07:08:09.000Z"

    def test_two_digit_year_is_2000s(self):
        assert iso("15.06.99", "DD.MM.YY") == "2099-06-15T00:00:00.000Z"

    @pytest.mark.parametrize("text, pattern, ms", [
        ("45.1", "ss.S", 100),
        ("45.12", "ss.SS", 120),
        ("45.123", "ss.SSS", 123),
    ])
    def test_fraction_widths(self, text, pattern, ms):
        epoch = parse_epoch_millis("2024 " + text, "YYYY " + pattern)
        assert epoch % 1000 == ms

    def test_iso_t_separator_in_brackets(self):
        assert iso("2024-06-15T14:30", "YYYY-MM-DD[T]HH:mm") == "2024-06-15T14:30:00.000Z"

    def test_out_of_range_fields_carry(self):
        assert iso("2024-02-30", "YYYY-MM-DD") == "2024-03-01T00:00:00.000Z"


# ── Month names ───────────────────────────────────────────────────────────────

class TestMonthNames:

    def test_full_name(self):
        assert iso("March 5, 2024", "MMMM D, YYYY") == "2024-03-05T00:00:00.000Z"

    def test_abbreviation(self):
        assert iso("05 Sep 2024", "DD MMM YYYY") == "2024-09-05T00:00:00.000Z"

    def test_case_insensitive(self):
        assert iso("05 SEP 2024", "DD MMM YYYY") == "2024-09-05T00:00:00.000Z"
        assert iso("december 1 2024", "MMMM D YYYY") == "2024-12-01T00:00:00.000Z"

    def test_may_as_abbreviation(self):
        assert iso("01 May 2024", "DD MMM YYYY") == "2024-05-01T00:00:00.000Z"

    def test_unknown_month_name(self):
        with pytest.raises(ParseMismatch) as info:
            iso("Smarch 5, 2024", "MMMM D, YYYY")
        assert "Smarch" in str(info.value)


# ── Day periods ───────────────────────────────────────────────────────────────

class TestDayPeriods:

    @pytest.mark.parametrize("text, hour", [
        ("12:15 AM", 0),
        ("01:15 AM", 1),
        ("11:15 AM", 11),
        ("12:15 PM", 12),
        ("01:15 PM", 13),
        ("11:15 pm", 23),
    ])
    def test_twelve_hour_clock(self, text, hour):
        i = Instant.parse("2024-06-15 " + text, "YYYY-MM-DD hh:mm A", tz="UTC", locale="en-US")
        assert (i.hour, i.minute) == (hour, 15)

    def test_lowercase_token(self):
        assert iso("2024-06-15 3pm", "YYYY-MM-DD ha") == "2024-06-15T15:00:00.000Z"

    def test_twelve_hour_without_period_is_morning(self):
        assert iso("2024-06-15 12:00", "YYYY-MM-DD hh:mm") == "2024-06-15T00:00:00.000Z"


# ── Literals ──────────────────────────────────────────────────────────────────

class TestLiterals:

    def test_bracketed_words(self):
        assert iso("Due on 2024-06-15", "[Due on] YYYY-MM-DD") == "2024-06-15T00:00:00.000Z"

    def test_bracketed_token_letters_are_literal(self):
        assert iso("MM 06 2024", "[MM] MM YYYY") == "2024-06-01T00:00:00.000Z"

    def test_regex_metacharacters_are_escaped(self):
        assert iso("(2024).06+15", "(YYYY).MM+DD") == "2024-06-15T00:00:00.000Z"
        with pytest.raises(ParseMismatch):
            iso("(2024)x06+15", "(YYYY).MM+DD")


# ── Defaults ──────────────────────────────────────────────────────────────────

class TestDefaults:

    def test_missing_year_is_current_utc_year(self):
        i = Instant.parse("06-15", "MM-DD", tz="UTC", locale="en-US")
        assert i.year == datetime.now(timezone.utc).year

    def test_missing_date_fields_default_to_first_of_january(self):
        assert iso("2024", "YYYY") == "2024-01-01T00:00:00.000Z"

    def test_fields_are_utc_whatever_the_display_timezone(self):
        i = Instant.parse("2024-06-15 09:00", "YYYY-MM-DD HH:mm", tz="Asia/Tokyo", locale="en-US")
        assert i.to_iso_string() == "2024-06-15T09:00:00.000Z"
        assert i.timezone == "Asia/Tokyo"

    def test_module_level_parse(self):
        assert parse("2024-06-15", "YYYY-MM-DD", tz="UTC") == Instant.parse("2024-06-15", "YYYY-MM-DD", tz="UTC")


# ── Mismatches ────────────────────────────────────────────────────────────────

class TestMismatch:

    @pytest.mark.parametrize("text, pattern", [
        ("2024/06/15", "YYYY-MM-DD"),
        ("24-06-15", "YYYY-MM-DD"),
        ("2024-06-15 extra", "YYYY-MM-DD"),
        ("", "YYYY"),
        ("1/15/2024", "MM/DD/YYYY"),
    ])
    def test_mismatch(self, text, pattern):
        with pytest.raises(ParseMismatch) as info:
            iso(text, pattern)
        assert info.value.text == text
        assert info.value.pattern == pattern

    def test_mismatch_is_a_value_error(self):
        with pytest.raises(ValueError):
            iso("nope", "YYYY")


# ── Compilation ───────────────────────────────────────────────────────────────

class TestCompile:

    def test_one_group_per_token(self):
        expr, tokens = compile_pattern("YYYY-MM-DD [at] HH:mm")
        assert [t.text for t in tokens] == ["YYYY", "MM", "DD", "HH", "mm"]
        assert expr.groups == 5

    def test_compiled_pattern_is_cached(self):
        assert compile_pattern("DD/MM/YYYY") is compile_pattern("DD/MM/YYYY")

    def test_round_trip_through_format(self):
        pattern = "YYYY-MM-DD HH:mm:ss.SSS"
        original = Instant("2024-06-15T14:30:45.123Z", tz="UTC", locale="en-US")
        assert Instant.parse(original.format(pattern), pattern, tz="UTC") == original
