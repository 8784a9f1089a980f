"""Minimum-output helpers over a stage chain.

Two modes are supported:

* ``values``: each number on the seeds line is one value, resolved with
  ``StageChain.resolve``; the list is not expanded into ranges and unmapped
  seeds are skipped.
* ``ranges``: seeds are taken pairwise as ``(start, length)`` intervals and
  threaded with ``StageChain.resolve_ranges``.

Both raise ``EmptyResultError`` when nothing survives the chain.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass

from rangechain.almanac import Almanac
from rangechain.chain import StageChain
from rangechain.config import SolveMode, SolverConfig
from rangechain.errors import EmptyResultError, UnknownStageError
from rangechain.types import Interval

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SolveReport:
    mode: SolveMode
    stop_label: str
    passthrough: bool
    minimum: int
    input_count: int
    output_count: int

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


def _check_label(chain: StageChain, stop_label: str) -> None:
    if not chain.has_label(stop_label):
        raise UnknownStageError(
            f"no stage labelled {stop_label!r}; known stages: {list(chain.labels)}",
        )


def _resolved_values(
    chain: StageChain, values: Iterable[int], stop_label: str, passthrough: bool,
) -> list[int]:
    outputs = [
        out for out in (chain.resolve(v, stop_label, passthrough=passthrough) for v in values)
        if out is not None
    ]
    if not outputs:
        raise EmptyResultError("Could not map any seeds!")
    return outputs


def _resolved_ranges(
    chain: StageChain, ranges: Iterable[tuple[int, int]], stop_label: str, passthrough: bool,
) -> list[Interval]:
    mapped = chain.resolve_ranges(ranges, stop_label, passthrough=passthrough)
    if not mapped:
        raise EmptyResultError("Could not map any seeds!")
    return mapped


def lowest_value(
    chain: StageChain,
    values: Iterable[int],
    stop_label: str,
    *,
    passthrough: bool = False,
) -> int:
    """Minimum of ``resolve`` over individual values."""
    _check_label(chain, stop_label)
    return min(_resolved_values(chain, values, stop_label, passthrough))


def lowest_range_start(
    chain: StageChain,
    ranges: Iterable[tuple[int, int]],
    stop_label: str,
    *,
    passthrough: bool = False,
) -> int:
    """Minimum start over the intervals returned by ``resolve_ranges``."""
    _check_label(chain, stop_label)
    return min(i.start for i in _resolved_ranges(chain, ranges, stop_label, passthrough))


def solve_almanac(almanac: Almanac, config: SolverConfig | None = None) -> SolveReport:
    """Solve an almanac under ``config`` and describe the outcome."""
    config = config or SolverConfig()
    stop_label = config.stop_label or almanac.terminal_label
    if stop_label is None:
        raise EmptyResultError("almanac defines no stages")
    _check_label(almanac.chain, stop_label)

    if config.mode == "values":
        input_count = len(almanac.seeds)
        outputs = _resolved_values(almanac.chain, almanac.seeds, stop_label, config.passthrough)
        minimum = min(outputs)
        output_count = len(outputs)
    else:
        ranges = almanac.seed_ranges()
        input_count = len(ranges)
        mapped = _resolved_ranges(almanac.chain, ranges, stop_label, config.passthrough)
        minimum = min(i.start for i in mapped)
        output_count = len(mapped)

    log.info(
        "mode=%s stop=%s inputs=%d outputs=%d minimum=%d",
        config.mode, stop_label, input_count, output_count, minimum,
    )
    return SolveReport(
        mode=config.mode,
        stop_label=stop_label,
        passthrough=config.passthrough,
        minimum=minimum,
        input_count=input_count,
        output_count=output_count,
    )
