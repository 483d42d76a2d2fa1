from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np

from voltdate._exceptions import EmptySelection
from voltdate.instant import Instant


def _collect(instants: tuple[object, ...]) -> list[Instant]:
    # max_instant([a, b]) and max_instant(a, b) are equivalent.
    if len(instants) == 1 and isinstance(instants[0], Iterable) and not isinstance(instants[0], (str, bytes, Mapping)):
        items = list(instants[0])
    else:
        items = list(instants)
    return [item if isinstance(item, Instant) else Instant(item) for item in items]


def _epochs(items: list[Instant]) -> np.ndarray:
    return np.fromiter((i.epoch_millis for i in items), dtype=np.int64, count=len(items))


def max_instant(*instants: object) -> Instant:
    """The latest of the given instants; the first one wins ties."""
    items = _collect(instants)
    if not items:
        raise EmptySelection("At least one instant is required for max_instant().")
    return items[int(np.argmax(_epochs(items)))]


def min_instant(*instants: object) -> Instant:
    """The earliest of the given instants; the first one wins ties."""
    items = _collect(instants)
    if not items:
        raise EmptySelection("At least one instant is required for min_instant().")
    return items[int(np.argmin(_epochs(items)))]
