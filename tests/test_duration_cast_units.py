from __future__ import annotations

from duration_cast.units import (
    CALENDAR_DAY_NANOS,
    CALENDAR_MONTH_NANOS,
    CALENDAR_YEAR_NANOS,
    DATE_UNITS,
    NOMINAL_NANOS,
    TIME_UNITS,
    Unit,
)


def test_unit_order_and_letters() -> None:
    assert [u.letter for u in Unit] == ["Y", "M", "W", "D", "H", "M", "S"]
    assert [u.in_time_part for u in Unit] == [False] * 4 + [True] * 3


def test_m_is_months_in_date_part_and_minutes_in_time_part() -> None:
    assert DATE_UNITS["M"] is Unit.MONTHS
    assert TIME_UNITS["M"] is Unit.MINUTES
    assert set(DATE_UNITS) == {"Y", "M", "W", "D"}
    assert set(TIME_UNITS) == {"H", "M", "S"}


def test_nominal_nanos() -> None:
    assert NOMINAL_NANOS[Unit.YEARS] == 31_557_600_000_000_000
    assert NOMINAL_NANOS[Unit.MONTHS] == 2_629_800_000_000_000
    assert NOMINAL_NANOS[Unit.WEEKS] == 604_800_000_000_000
    assert NOMINAL_NANOS[Unit.DAYS] == 86_400_000_000_000
    assert NOMINAL_NANOS[Unit.HOURS] == 3_600_000_000_000
    assert NOMINAL_NANOS[Unit.MINUTES] == 60_000_000_000
    assert NOMINAL_NANOS[Unit.SECONDS] == 1_000_000_000


def test_calendar_nanos_differ_from_nominal() -> None:
    assert CALENDAR_DAY_NANOS == NOMINAL_NANOS[Unit.DAYS]
    assert CALENDAR_YEAR_NANOS == 365 * CALENDAR_DAY_NANOS
    assert CALENDAR_MONTH_NANOS == 30 * CALENDAR_DAY_NANOS
    assert CALENDAR_YEAR_NANOS < NOMINAL_NANOS[Unit.YEARS]
    assert CALENDAR_MONTH_NANOS < NOMINAL_NANOS[Unit.MONTHS]
