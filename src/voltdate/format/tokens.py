"""
Static pattern token tables.

Order matters: at any position the first entry whose text matches wins, so
within each letter family longer tokens are declared first (``YYYY`` before
``YY``, ``MMMM`` before ``MMM`` before ``MM`` before ``M``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from voltdate import intl

if TYPE_CHECKING:
    from voltdate.instant.fields import Fields
    from voltdate.instant.instant import Instant

Renderer = Callable[["Instant", "Fields"], str]

# Literal text inside square brackets is never tokenised.
ESCAPE = r"\[[^\]]*\]"

COMPOSITE_TOKENS: tuple[str, ...] = ("LLLL", "LLL", "LL", "L")


@dataclass(frozen=True, slots=True)
class FormatToken:
    text: str
    render: Renderer


def _twelve_hour(hour: int) -> int:
    return hour % 12 or 12


def _clock_hour(hour: int) -> int:
    return hour or 24


FORMAT_TOKENS: tuple[FormatToken, ...] = (
    FormatToken("YYYY", lambda i, f: str(f.year)),
    FormatToken("YY", lambda i, f: str(f.year)[-2:]),
    FormatToken("Q", lambda i, f: str(f.quarter)),
    FormatToken("MMMM", lambda i, f: intl.month_name(f.month, i.locale, "wide")),
    FormatToken("MMM", lambda i, f: intl.month_name(f.month, i.locale, "abbreviated")),
    FormatToken("MM", lambda i, f: f"{f.month:02d}"),
    FormatToken("M", lambda i, f: str(f.month)),
    FormatToken("dddd", lambda i, f: intl.weekday_name(f.day, i.locale, "wide")),
    FormatToken("ddd", lambda i, f: intl.weekday_name(f.day, i.locale, "abbreviated")),
    FormatToken("dd", lambda i, f: f"{f.day:02d}"),
    FormatToken("d", lambda i, f: str(f.day)),
    FormatToken("DD", lambda i, f: f"{f.date:02d}"),
    FormatToken("D", lambda i, f: str(f.date)),
    FormatToken("HH", lambda i, f: f"{f.hour:02d}"),
    FormatToken("H", lambda i, f: str(f.hour)),
    FormatToken("hh", lambda i, f: f"{_twelve_hour(f.hour):02d}"),
    FormatToken("h", lambda i, f: str(_twelve_hour(f.hour))),
    FormatToken("kk", lambda i, f: f"{_clock_hour(f.hour):02d}"),
    FormatToken("k", lambda i, f: str(_clock_hour(f.hour))),
    FormatToken("mm", lambda i, f: f"{f.minute:02d}"),
    FormatToken("m", lambda i, f: str(f.minute)),
    FormatToken("ss", lambda i, f: f"{f.second:02d}"),
    FormatToken("s", lambda i, f: str(f.second)),
    FormatToken("SSS", lambda i, f: f"{f.millisecond:03d}"),
    FormatToken("SS", lambda i, f: f"{f.millisecond // 10:02d}"),
    FormatToken("S", lambda i, f: str(f.millisecond // 100)),
    FormatToken("X", lambda i, f: str(i.epoch_millis // 1000)),
    FormatToken("x", lambda i, f: str(i.epoch_millis)),
    FormatToken("A", lambda i, f: intl.meridiem(f.hour, i.locale)),
    FormatToken("a", lambda i, f: intl.meridiem(f.hour, i.locale).lower()),
    FormatToken("Z", lambda i, f: intl.short_gmt_offset(i.epoch_millis, i.timezone)),
    FormatToken("z", lambda i, f: i.timezone),
    FormatToken("T", lambda i, f: "T"),
)

FORMAT_TOKENS_BY_TEXT: dict[str, FormatToken] = {t.text: t for t in FORMAT_TOKENS}

FORMAT_RE: re.Pattern[str] = re.compile(
    "|".join(
        [ESCAPE]
        + [re.escape(text) for text in COMPOSITE_TOKENS]
        + [re.escape(t.text) for t in FORMAT_TOKENS]
    )
)


# ── parsing ──────────────────────────────────────────────────────────────

MONTH_NAMES: dict[str, int] = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


@dataclass(frozen=True, slots=True)
class ParseToken:
    text: str
    regex: str
    field: str
    extract: Callable[[str], int | str]


def _month_from_name(value: str) -> int:
    return MONTH_NAMES[value.lower()]


def _twelve_hour_value(value: str) -> int:
    hour = int(value)
    return 0 if hour == 12 else hour


PARSE_TOKENS: tuple[ParseToken, ...] = (
    ParseToken("YYYY", r"\d{4}", "year", int),
    ParseToken("YY", r"\d{2}", "year", lambda v: 2000 + int(v)),
    ParseToken("MMMM", r"[a-z]+", "month", _month_from_name),
    ParseToken("MMM", r"[a-z]{3}", "month", _month_from_name),
    ParseToken("MM", r"\d{2}", "month", int),
    ParseToken("M", r"\d{1,2}", "month", int),
    ParseToken("DD", r"\d{2}", "date", int),
    ParseToken("D", r"\d{1,2}", "date", int),
    ParseToken("HH", r"\d{2}", "hour", int),
    ParseToken("H", r"\d{1,2}", "hour", int),
    ParseToken("hh", r"\d{2}", "hour", _twelve_hour_value),
    ParseToken("h", r"\d{1,2}", "hour", _twelve_hour_value),
    ParseToken("mm", r"\d{2}", "minute", int),
    ParseToken("m", r"\d{1,2}", "minute", int),
    ParseToken("ss", r"\d{2}", "second", int),
    ParseToken("s", r"\d{1,2}", "second", int),
    ParseToken("SSS", r"\d{3}", "millisecond", int),
    ParseToken("SS", r"\d{2}", "millisecond", lambda v: int(v) * 10),
    ParseToken("S", r"\d", "millisecond", lambda v: int(v) * 100),
    ParseToken("A", r"[ap]m", "meridiem", str.lower),
    ParseToken("a", r"[ap]m", "meridiem", str.lower),
)

PARSE_TOKENS_BY_TEXT: dict[str, ParseToken] = {t.text: t for t in PARSE_TOKENS}

PARSE_RE: re.Pattern[str] = re.compile(
    "|".join([ESCAPE] + [re.escape(t.text) for t in PARSE_TOKENS])
)
