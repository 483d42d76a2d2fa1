from __future__ import annotations

_LONG_PATTERNS: dict[str, str] = {
    "LLLL": "dddd, MMMM D, YYYY",
    "LLL": "MMMM D, YYYY HH:mm",
    "LL": "MMMM D, YYYY",
}

# The field order of CLDR's numeric short date for en-US (month first) and
# for en-GB, fr and de (day first), always with "/" separators.  Other
# locales get the ISO order rather than their CLDR pattern.
_DAY_FIRST_LANGUAGES = frozenset({"fr", "de"})


def short_date_pattern(locale: str) -> str:
    """Region-specific numeric date order for the ``L`` token."""
    language, _, region = locale.replace("_", "-").partition("-")
    region = region.split("-")[0].upper()
    language = language.lower()
    if language == "en" and region == "US":
        return "MM/DD/YYYY"
    if (language == "en" and region == "GB") or language in _DAY_FIRST_LANGUAGES:
        return "DD/MM/YYYY"
    return "YYYY-MM-DD"


def expand(token: str, locale: str) -> str:
    """Sub-pattern for one of ``L``, ``LL``, ``LLL``, ``LLLL``."""
    if token == "L":
        return short_date_pattern(locale)
    try:
        return _LONG_PATTERNS[token]
    except KeyError:
        raise ValueError(f"Not a localized format token: {token!r}") from None
