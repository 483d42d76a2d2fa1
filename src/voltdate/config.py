from __future__ import annotations

import logging
from dataclasses import dataclass

from babel import Locale, UnknownLocaleError, default_locale
from tzlocal import get_localzone_name

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"
DEFAULT_LOCALE = "en-US"


def host_timezone() -> str:
    """The host's local IANA zone name, or ``"UTC"`` when it cannot be resolved."""
    try:
        name = get_localzone_name()
    except (LookupError, OSError, ValueError) as exc:
        logger.warning("Could not resolve the local timezone (%s); using %s", exc, DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE
    if not name:
        logger.warning("Local timezone has no IANA name; using %s", DEFAULT_TIMEZONE)
        return DEFAULT_TIMEZONE
    return name


def host_locale() -> str:
    """The host's active language tag (``en-US`` style), or ``"en-US"``."""
    name = default_locale()
    if not name:
        return DEFAULT_LOCALE
    try:
        parsed = Locale.parse(name)
    except (UnknownLocaleError, ValueError):
        logger.debug("Host locale %r is not known to Babel; using %s", name, DEFAULT_LOCALE)
        return DEFAULT_LOCALE
    return to_language_tag(parsed)


def to_language_tag(locale: Locale) -> str:
    if locale.territory:
        return f"{locale.language}-{locale.territory}"
    return locale.language


@dataclass(frozen=True, slots=True)
class InstantConfig:
    """Display options of an Instant; ``None`` means "ask the host"."""

    tz: str | None = None
    locale: str | None = None

    def resolve(self) -> InstantConfig:
        return InstantConfig(
            tz=self.tz or host_timezone(),
            locale=self.locale or host_locale(),
        )
