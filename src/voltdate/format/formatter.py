from __future__ import annotations

import re
from typing import TYPE_CHECKING

from voltdate.format import localized
from voltdate.format.tokens import COMPOSITE_TOKENS, FORMAT_RE, FORMAT_TOKENS_BY_TEXT
from voltdate.instant.fields import decompose

if TYPE_CHECKING:
    from voltdate.instant.instant import Instant


def format_instant(instant: Instant, pattern: str) -> str:
    """
    Render ``instant`` through ``pattern``.

    The pattern is scanned once, left to right; every token is replaced by
    its rendered value and the output is never scanned again, so a month
    name such as "March" cannot be mistaken for ``M`` + ``a`` + ...
    Bracketed runs (``[Today at]``) are emitted without the brackets.
    """
    fields = decompose(instant)

    def substitute(match: re.Match[str]) -> str:
        text = match.group(0)
        if text.startswith("["):
            return text[1:-1]
        if text in COMPOSITE_TOKENS:
            return FORMAT_RE.sub(substitute, localized.expand(text, instant.locale))
        return FORMAT_TOKENS_BY_TEXT[text].render(instant, fields)

    return FORMAT_RE.sub(substitute, pattern)
