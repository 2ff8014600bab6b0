from __future__ import annotations

from enum import IntEnum
from typing import Dict


class Unit(IntEnum):
    """
    Duration units in the order they must appear in an ISO-8601 duration.

    The integer value doubles as the slot index in `UnitMagnitudes`.
    """

    YEARS = 0
    MONTHS = 1
    WEEKS = 2
    DAYS = 3
    HOURS = 4
    MINUTES = 5
    SECONDS = 6

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @property
    def in_time_part(self) -> bool:
        return self >= Unit.HOURS


PREFIX = "P"
TIME_DESIGNATOR = "T"

_LETTERS: Dict[Unit, str] = {
    Unit.YEARS: "Y",
    Unit.MONTHS: "M",
    Unit.WEEKS: "W",
    Unit.DAYS: "D",
    Unit.HOURS: "H",
    Unit.MINUTES: "M",
    Unit.SECONDS: "S",
}

# "M" is months before the T designator and minutes after it.
DATE_UNITS: Dict[str, Unit] = {u.letter: u for u in Unit if not u.in_time_part}
TIME_UNITS: Dict[str, Unit] = {u.letter: u for u in Unit if u.in_time_part}


SECOND_NANOS = 1_000_000_000
MINUTE_NANOS = 60 * SECOND_NANOS
HOUR_NANOS = 60 * MINUTE_NANOS
DAY_NANOS = 24 * HOUR_NANOS

# Average calendar lengths, used when decoding text into nanoseconds.
NOMINAL_NANOS: Dict[Unit, float] = {
    Unit.YEARS: 365.25 * 24 * float(HOUR_NANOS),  # 31557600000000000
    Unit.MONTHS: 30.4375 * 24 * float(HOUR_NANOS),  # 2629800000000000
    Unit.WEEKS: 7 * 24 * float(HOUR_NANOS),  # 604800000000000
    Unit.DAYS: 24 * float(HOUR_NANOS),  # 86400000000000
    Unit.HOURS: float(HOUR_NANOS),
    Unit.MINUTES: float(MINUTE_NANOS),
    Unit.SECONDS: float(SECOND_NANOS),
}

# Fixed calendar lengths, used when encoding nanoseconds into text.
# These differ from NOMINAL_NANOS on purpose: encoded text does not decode
# back to the same value for spans of a month or longer.
CALENDAR_YEAR_NANOS = 365 * DAY_NANOS
CALENDAR_MONTH_NANOS = 30 * DAY_NANOS
CALENDAR_DAY_NANOS = DAY_NANOS
