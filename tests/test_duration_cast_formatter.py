from __future__ import annotations

from datetime import timedelta
from typing import Any

import pytest

from duration_cast.durations import Duration, decode
from duration_cast.errors import DurationError, WrongTypeError
from duration_cast.formatter import encode, format_clock
from duration_cast.units import (
    CALENDAR_DAY_NANOS,
    CALENDAR_MONTH_NANOS,
    CALENDAR_YEAR_NANOS,
    HOUR_NANOS,
    MINUTE_NANOS,
    NOMINAL_NANOS,
    SECOND_NANOS,
    Unit,
)


def test_encode_all_fields() -> None:
    d = Duration(
        CALENDAR_YEAR_NANOS
        + CALENDAR_MONTH_NANOS
        + CALENDAR_DAY_NANOS
        + HOUR_NANOS
        + MINUTE_NANOS
        + 500_000_000
    )
    assert encode(d) == "P1Y1M1DT1H1M0.5S"


@pytest.mark.parametrize(
    "nanos,expected",
    [
        (0, "P0Y0M0DT0S"),
        (SECOND_NANOS, "P0Y0M0DT1S"),
        (90 * SECOND_NANOS, "P0Y0M0DT1M30S"),
        (HOUR_NANOS, "P0Y0M0DT1H0M0S"),
        (1_500, "P0Y0M0DT0.0000015S"),
        (400 * CALENDAR_DAY_NANOS, "P1Y1M5DT0S"),
        (3 * CALENDAR_YEAR_NANOS + 11 * CALENDAR_MONTH_NANOS + 29 * CALENDAR_DAY_NANOS, "P3Y11M29DT0S"),
        (-(CALENDAR_YEAR_NANOS + HOUR_NANOS), "P-1Y0M0DT-1H0M0S"),
    ],
)
def test_encode(nanos: int, expected: str) -> None:
    assert encode(Duration(nanos)) == expected


@pytest.mark.parametrize(
    "nanos,expected",
    [
        (0, "0s"),
        (1, "0.000000001s"),
        (500_000_000, "0.5s"),
        (61 * SECOND_NANOS, "1m1s"),
        (23 * HOUR_NANOS + 59 * MINUTE_NANOS + 59 * SECOND_NANOS + 999_999_999, "23h59m59.999999999s"),
        (-MINUTE_NANOS, "-1m0s"),
    ],
)
def test_format_clock(nanos: int, expected: str) -> None:
    assert format_clock(nanos) == expected


@pytest.mark.parametrize("value", [10, True, 1.5, "P1D", None, timedelta(days=1)])
def test_encode_wrong_type(value: Any) -> None:
    with pytest.raises(WrongTypeError) as info:
        encode(value)
    assert info.value.value is value
    assert type(value).__name__ in str(info.value)


def test_wrong_type_error_is_type_error() -> None:
    with pytest.raises(TypeError):
        encode(10)
    assert issubclass(WrongTypeError, DurationError)


def test_encode_output_decodes_for_sub_day_spans() -> None:
    d = Duration(HOUR_NANOS + 2 * MINUTE_NANOS + 3_500_000_000)
    assert encode(d) == "P0Y0M0DT1H2M3.5S"
    assert decode(encode(d)) == d


def test_encode_and_decode_disagree_on_calendar_units() -> None:
    # Encoding uses 365-day years, decoding uses 365.25-day years.
    year = Duration(CALENDAR_YEAR_NANOS)
    assert encode(year) == "P1Y0M0DT0S"
    assert decode(encode(year)) == int(NOMINAL_NANOS[Unit.YEARS])
    assert decode(encode(year)) != year

    assert encode(decode("P1M")) == "P0Y1M0DT10H30M0S"


def test_encode_duration_arithmetic() -> None:
    assert encode(decode("PT1H") + decode("PT1M")) == "P0Y0M0DT1H1M0S"
    assert encode(-decode("PT1H")) == "P0Y0M0DT-1H0M0S"
