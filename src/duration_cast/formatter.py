from __future__ import annotations

import logging
from typing import Any, Tuple

from duration_cast.durations import Duration
from duration_cast.errors import WrongTypeError
from duration_cast.units import (
    CALENDAR_DAY_NANOS,
    CALENDAR_MONTH_NANOS,
    CALENDAR_YEAR_NANOS,
    HOUR_NANOS,
    MINUTE_NANOS,
    SECOND_NANOS,
)


logger = logging.getLogger(__name__)


def _divmod_toward_zero(value: int, divisor: int) -> Tuple[int, int]:
    # Quotient truncates toward zero and the remainder keeps the sign of value.
    q, r = divmod(abs(value), divisor)
    if value < 0:
        return -q, -r
    return q, r


def format_clock(nanos: int) -> str:
    """
    Renders a sub-day span like "1h1m0.5s".

    Seconds are always present and carry up to nine fraction digits with
    trailing zeros trimmed; minutes and hours are only added once the span
    reaches them. Zero renders as "0s".
    """
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    u = abs(nanos)

    whole, frac = divmod(u, SECOND_NANOS)
    out = str(whole % 60)
    if frac:
        out += "." + f"{frac:09d}".rstrip("0")
    out += "s"
    if u >= MINUTE_NANOS:
        out = f"{(u // MINUTE_NANOS) % 60}m" + out
        if u >= HOUR_NANOS:
            out = f"{u // HOUR_NANOS}h" + out
    return sign + out


def encode(value: Any) -> str:
    """
    Encodes a Duration as "P{years}Y{months}M{days}DT{clock}".

    Years, months and days use fixed calendar lengths (365, 30 and 1 days),
    not the nominal lengths decode() uses, so the two are not inverses.
    All fields are always emitted, e.g. Duration(0) -> "P0Y0M0DT0S".
    """
    if not isinstance(value, Duration):
        logger.debug("refusing to encode %r of type %s", value, type(value).__name__)
        raise WrongTypeError(value)

    years, rest = _divmod_toward_zero(int(value), CALENDAR_YEAR_NANOS)
    months, rest = _divmod_toward_zero(rest, CALENDAR_MONTH_NANOS)
    days, rest = _divmod_toward_zero(rest, CALENDAR_DAY_NANOS)
    return f"P{years}Y{months}M{days}DT{format_clock(rest)}".upper()
