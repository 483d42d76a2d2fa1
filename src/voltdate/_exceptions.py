from __future__ import annotations


class VoltDateError(ValueError):
    """Base exception for all voltdate errors."""


class InvalidInstant(VoltDateError):
    """The construction input does not resolve to a representable timestamp."""


class UnknownUnit(VoltDateError):

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit: {unit!r}")


class UnknownTimezone(VoltDateError):

    def __init__(self, tz: object) -> None:
        self.tz = tz
        super().__init__(f"Unknown timezone: {tz!r}")


class ParseMismatch(VoltDateError):

    def __init__(self, text: str, pattern: str, reason: str | None = None) -> None:
        self.text = text
        self.pattern = pattern
        message = f"Unable to parse {text!r} with format {pattern!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptySelection(VoltDateError):
    """min/max selection over zero instants."""
