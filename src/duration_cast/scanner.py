from __future__ import annotations

import math
from enum import Enum
from typing import List, NamedTuple, Optional

from duration_cast.errors import (
    EmptyInputError,
    MagnitudeOverflowError,
    MalformedFractionError,
    MissingMagnitudeError,
    MissingPrefixError,
    TooShortError,
    TrailingGarbageError,
    UnexpectedUnitError,
    UnitlessPayloadError,
)
from duration_cast.units import DATE_UNITS, NOMINAL_NANOS, PREFIX, TIME_DESIGNATOR, TIME_UNITS, Unit


_DIGITS = frozenset("0123456789")
_POINT = "."
_MIN_LENGTH = 3


class UnitMagnitudes(NamedTuple):
    """Per-unit numbers read from a duration string, indexable by `Unit`."""

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0
    hours: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0


class ScanState(Enum):
    EXPECT_DIGIT = "expect-digit"
    EXPECT_FRACTION_DIGIT = "expect-fraction-digit"
    EXPECT_UNIT = "expect-unit"


def resolve_unit(letter: str, *, past_t: bool, last: Optional[Unit]) -> Optional[Unit]:
    """
    Returns the unit `letter` stands for at this point of the string, or None
    when the letter is unknown or not allowed here.

    - Date letters (Y M W D) are only valid before T, time letters (H M S) only after it.
    - Units must come strictly after the last one consumed.
    """
    unit = (TIME_UNITS if past_t else DATE_UNITS).get(letter)
    if unit is None:
        return None
    if last is not None and unit <= last:
        return None
    return unit


def scan(text: str) -> UnitMagnitudes:
    """
    Scans an ISO-8601 duration like "P3Y6M4DT12H30M5S" into per-unit magnitudes.

    Grammar: P [nY] [nM] [nW] [nD] [T [nH] [nM] [nS]], where n is digits with an
    optional ".digits" fraction on any unit. Missing units are zero.
    Raises a `DecodeError` subclass on the first problem found.
    """
    if not text:
        raise EmptyInputError("empty duration", text=text)
    if len(text) < _MIN_LENGTH:
        raise TooShortError("duration is too short to be valid", text=text)
    if text[0] != PREFIX:
        raise MissingPrefixError("missing 'P' prefix", text=text, position=0)

    values: List[float] = [0.0] * len(Unit)
    state = ScanState.EXPECT_DIGIT
    past_t = False
    last: Optional[Unit] = None
    token_start = 0
    has_fraction = False

    for pos in range(1, len(text)):
        ch = text[pos]
        if last is Unit.SECONDS:
            raise TrailingGarbageError(
                f"unexpected {ch!r} after seconds", text=text, position=pos
            )

        if state is ScanState.EXPECT_FRACTION_DIGIT:
            if ch not in _DIGITS:
                raise MalformedFractionError("missing digit after decimal", text=text, position=pos)
            state = ScanState.EXPECT_UNIT
            continue

        if state is ScanState.EXPECT_DIGIT:
            if ch in _DIGITS:
                token_start = pos
                has_fraction = False
                state = ScanState.EXPECT_UNIT
                continue
            if ch == TIME_DESIGNATOR and not past_t:
                past_t = True
                continue
            if ch == _POINT:
                raise MalformedFractionError("decimal point must follow a digit", text=text, position=pos)
            if resolve_unit(ch, past_t=past_t, last=last) is not None:
                raise MissingMagnitudeError(
                    f"missing number before unit {ch!r}", text=text, position=pos
                )
            raise UnexpectedUnitError(
                f"letter {ch!r} not a valid unit here", text=text, position=pos
            )

        # ScanState.EXPECT_UNIT
        if ch in _DIGITS:
            continue
        if ch == _POINT:
            if has_fraction:
                raise MalformedFractionError("number has more than one decimal point", text=text, position=pos)
            has_fraction = True
            state = ScanState.EXPECT_FRACTION_DIGIT
            continue
        unit = resolve_unit(ch, past_t=past_t, last=last)
        if unit is None:
            raise UnexpectedUnitError(
                f"letter {ch!r} not a valid unit here", text=text, position=pos
            )
        value = float(text[token_start:pos])
        if not math.isfinite(value * NOMINAL_NANOS[unit]):
            raise MagnitudeOverflowError(
                f"{unit.name.lower()} value is too large", text=text, position=token_start
            )
        values[unit] = value
        last = unit
        state = ScanState.EXPECT_DIGIT

    if state is ScanState.EXPECT_UNIT:
        raise UnitlessPayloadError(
            "number is missing a unit", text=text, position=token_start
        )
    if state is ScanState.EXPECT_FRACTION_DIGIT:
        raise MalformedFractionError("missing digit after decimal", text=text, position=len(text))
    return UnitMagnitudes(*values)
