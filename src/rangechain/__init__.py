"""Interval remapping through chained piecewise-linear stages."""

from rangechain.almanac import (
    Almanac,
    build_almanac,
    iter_almanac_events,
    load_almanac,
    parse_almanac,
)
from rangechain.chain import StageChain
from rangechain.config import SolverConfig, load_config
from rangechain.errors import (
    AlmanacParseError,
    ConfigError,
    EmptyResultError,
    MalformedRuleError,
    RangeChainError,
    UnknownStageError,
)
from rangechain.solve import SolveReport, lowest_range_start, lowest_value, solve_almanac
from rangechain.stage_map import StageMap
from rangechain.types import Interval, Rule

__all__ = [
    "Almanac",
    "AlmanacParseError",
    "ConfigError",
    "EmptyResultError",
    "Interval",
    "MalformedRuleError",
    "RangeChainError",
    "Rule",
    "SolveReport",
    "SolverConfig",
    "StageChain",
    "StageMap",
    "UnknownStageError",
    "build_almanac",
    "iter_almanac_events",
    "load_almanac",
    "load_config",
    "lowest_range_start",
    "lowest_value",
    "parse_almanac",
    "solve_almanac",
]
