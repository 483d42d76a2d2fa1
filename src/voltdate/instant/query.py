from __future__ import annotations

from typing import TYPE_CHECKING

from voltdate.instant.arithmetic import start_of
from voltdate.units import Unit

if TYPE_CHECKING:
    from voltdate.instant.instant import Instant

INCLUSIVITIES = ("[)", "[]", "(]", "()")


def _reduced(instant: Instant, other: Instant, unit: Unit | str | None) -> tuple[int, int]:
    if unit is None:
        return instant.epoch_millis, other.epoch_millis
    # Both sides are truncated on the receiver's wall clock.
    other = instant._derive(other.epoch_millis)
    return start_of(instant, unit).epoch_millis, start_of(other, unit).epoch_millis


def is_before(instant: Instant, other: Instant, unit: Unit | str | None = None) -> bool:
    a, b = _reduced(instant, other, unit)
    return a < b


def is_after(instant: Instant, other: Instant, unit: Unit | str | None = None) -> bool:
    a, b = _reduced(instant, other, unit)
    return a > b


def is_same(instant: Instant, other: Instant, unit: Unit | str | None = None) -> bool:
    a, b = _reduced(instant, other, unit)
    return a == b


def is_same_or_before(instant: Instant, other: Instant, unit: Unit | str | None = None) -> bool:
    a, b = _reduced(instant, other, unit)
    return a <= b


def is_same_or_after(instant: Instant, other: Instant, unit: Unit | str | None = None) -> bool:
    a, b = _reduced(instant, other, unit)
    return a >= b


def is_between(
    instant: Instant,
    start: Instant,
    end: Instant,
    unit: Unit | str | None = None,
    inclusivity: str = "[)",
) -> bool:
    """
    Range membership.  ``inclusivity`` is two characters: ``[`` or ``(`` for
    the lower bound, ``]`` or ``)`` for the upper bound.
    """
    if inclusivity not in INCLUSIVITIES:
        raise ValueError(
            f"inclusivity must be one of {', '.join(INCLUSIVITIES)}; got {inclusivity!r}."
        )
    if inclusivity[0] == "[":
        after_start = is_same_or_after(instant, start, unit)
    else:
        after_start = is_after(instant, start, unit)
    if inclusivity[1] == "]":
        before_end = is_same_or_before(instant, end, unit)
    else:
        before_end = is_before(instant, end, unit)
    return after_start and before_end
