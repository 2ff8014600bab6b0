from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

from duration_cast.units import SECOND_NANOS


ENV_UNIT = "DURATION_CAST_UNIT"
ENV_LOG_LEVEL = "DURATION_CAST_LOG_LEVEL"

DEFAULT_UNIT = "ns"
DEFAULT_LOG_LEVEL = "WARNING"

# Nanoseconds per output unit for `decode`.
OUTPUT_UNITS: Dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "ms": 1_000_000,
    "s": SECOND_NANOS,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ResolvedOutput:
    unit: str
    nanos_per_unit: int


@dataclass(frozen=True)
class ResolvedLogging:
    level: str

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level)


def _env(name: str) -> Optional[str]:
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def parse_unit(value: str, *, name: str) -> str:
    unit = value.strip().lower()
    if unit not in OUTPUT_UNITS:
        raise ValueError(f"{name} must be one of: {', '.join(OUTPUT_UNITS)}")
    return unit


def parse_log_level(value: str, *, name: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of: {', '.join(LOG_LEVELS)}")
    return level


def resolve_output(*, cli_unit: Optional[str]) -> ResolvedOutput:
    if cli_unit is not None:
        unit = parse_unit(cli_unit, name="unit")
    else:
        env_unit = _env(ENV_UNIT)
        unit = parse_unit(env_unit, name=ENV_UNIT) if env_unit is not None else DEFAULT_UNIT
    return ResolvedOutput(unit=unit, nanos_per_unit=OUTPUT_UNITS[unit])


def resolve_logging(*, cli_level: Optional[str]) -> ResolvedLogging:
    if cli_level is not None:
        return ResolvedLogging(level=parse_log_level(cli_level, name="log level"))
    env_level = _env(ENV_LOG_LEVEL)
    if env_level is None:
        return ResolvedLogging(level=DEFAULT_LOG_LEVEL)
    return ResolvedLogging(level=parse_log_level(env_level, name=ENV_LOG_LEVEL))
