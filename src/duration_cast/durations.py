from __future__ import annotations

import logging

from duration_cast.errors import DecodeError
from duration_cast.scanner import UnitMagnitudes, scan
from duration_cast.units import NOMINAL_NANOS, Unit


logger = logging.getLogger(__name__)


class Duration(int):
    """
    Elapsed time as a signed whole number of nanoseconds.

    A distinct int subclass so encode() can tell a duration from any other integer.
    """

    __slots__ = ()

    # int gets __str__ from object, which would fall through to __repr__.
    __str__ = int.__repr__

    def __repr__(self) -> str:
        return f"Duration({int(self)})"

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other: object) -> "Duration":
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) - int(other))

    def __rsub__(self, other: object) -> "Duration":
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(other) - int(self))

    def __mul__(self, other: object) -> "Duration":
        if not isinstance(other, int):
            return NotImplemented
        return Duration(int(self) * int(other))

    __rmul__ = __mul__

    def __neg__(self) -> "Duration":
        return Duration(-int(self))

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return Duration(abs(int(self)))


def to_duration(magnitudes: UnitMagnitudes) -> Duration:
    """
    Folds per-unit magnitudes into nanoseconds using nominal unit lengths.

    Each unit's product is truncated toward zero before summing, so
    "P1.5Y" loses the sub-nanosecond part of the year product only.
    """
    total = 0
    for unit in Unit:
        total += int(magnitudes[unit] * NOMINAL_NANOS[unit])
    return Duration(total)


def decode(text: str) -> Duration:
    """
    Decodes an ISO-8601 duration string into a Duration.

    Examples:
    - "PT2H"       -> 2 hours
    - "P1M"        -> 1 nominal month (30.4375 days)
    - "PT1M"       -> 1 minute
    - "P1.5W"      -> 10.5 days
    - "P3Y6M4DT12H30M5S"
    """
    try:
        magnitudes = scan(text)
    except DecodeError as e:
        logger.debug("rejected duration %r: %s", text, e)
        raise
    return to_duration(magnitudes)
