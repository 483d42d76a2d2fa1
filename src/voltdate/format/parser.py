from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from functools import lru_cache

from voltdate._exceptions import ParseMismatch
from voltdate.calendar import utc_millis
from voltdate.format.tokens import PARSE_RE, PARSE_TOKENS_BY_TEXT, ParseToken

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> tuple[re.Pattern[str], tuple[ParseToken, ...]]:
    """
    Compile ``pattern`` into a case-insensitive expression with one capturing
    group per token.  Literal runs, including bracketed text, are escaped.
    """
    parts: list[str] = []
    tokens: list[ParseToken] = []
    pos = 0
    for match in PARSE_RE.finditer(pattern):
        parts.append(re.escape(pattern[pos:match.start()]))
        text = match.group(0)
        if text.startswith("["):
            parts.append(re.escape(text[1:-1]))
        else:
            token = PARSE_TOKENS_BY_TEXT[text]
            parts.append(f"({token.regex})")
            tokens.append(token)
        pos = match.end()
    parts.append(re.escape(pattern[pos:]))

    source = "".join(parts)
    logger.debug("Compiled parse pattern %r -> %r", pattern, source)
    return re.compile(source, re.IGNORECASE), tuple(tokens)


def parse_epoch_millis(text: str, pattern: str) -> int:
    """
    Extract fields from ``text`` according to ``pattern`` and compose them as
    UTC.  Missing fields default to the current year, January, day 1 and
    midnight.
    """
    expr, tokens = compile_pattern(pattern)
    match = expr.fullmatch(text)
    if match is None:
        raise ParseMismatch(text, pattern)

    values: dict[str, int] = {
        "year": datetime.now(timezone.utc).year,
        "month": 1,
        "day": 1,
        "hour": 0,
        "minute": 0,
        "second": 0,
        "millisecond": 0,
    }
    meridiem: str | None = None
    for token, raw in zip(tokens, match.groups()):
        try:
            value = token.extract(raw)
        except KeyError:
            raise ParseMismatch(text, pattern, f"unknown month name {raw!r}") from None
        if token.field == "meridiem":
            meridiem = str(value)
        elif token.field == "date":
            values["day"] = int(value)
        else:
            values[token.field] = int(value)

    if meridiem == "pm" and values["hour"] < 12:
        values["hour"] += 12
    return utc_millis(**values)
