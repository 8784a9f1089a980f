"""Multi-stage composition of stage maps."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from rangechain.stage_map import StageMap
from rangechain.types import Interval

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StageChain:
    """Ordered ``(label, StageMap)`` pipeline, applied front to back.

    Both resolution operations stop right after the stage whose label equals
    ``stop_label``. When no stage carries that label, ``resolve`` returns
    ``None`` while ``resolve_ranges`` returns the set produced by the last
    stage.
    """

    stages: tuple[tuple[str, StageMap], ...] = ()

    def __post_init__(self) -> None:
        for label, stage_map in self.stages:
            if not label:
                raise ValueError("stage label cannot be empty")
            if not isinstance(stage_map, StageMap):
                raise ValueError(f"stage {label!r} must hold a StageMap")

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(label for label, _ in self.stages)

    @property
    def terminal_label(self) -> str | None:
        return self.stages[-1][0] if self.stages else None

    def has_label(self, label: str) -> bool:
        return label in self.labels

    def resolve(
        self,
        value: int,
        stop_label: str,
        *,
        passthrough: bool = False,
    ) -> int | None:
        """Thread one value through the chain.

        Returns ``None`` as soon as a stage has no covering rule (unless
        ``passthrough``), or when ``stop_label`` is never reached.
        """
        mapped = value
        for label, stage_map in self.stages:
            output = stage_map.get(mapped, passthrough=passthrough)
            if output is None:
                return None
            mapped = output
            if label == stop_label:
                return mapped
        return None

    def resolve_ranges(
        self,
        ranges: Iterable[tuple[int, int]],
        stop_label: str,
        *,
        passthrough: bool = False,
    ) -> list[Interval]:
        """Thread a set of ``(start, length)`` intervals through the chain."""
        mapped = [Interval(start, length) for start, length in ranges]
        for label, stage_map in self.stages:
            mapped = [
                out
                for start, length in mapped
                for out in stage_map.get_ranges(start, length, passthrough=passthrough)
            ]
            log.debug("stage %s: %d interval(s)", label, len(mapped))
            if label == stop_label:
                return mapped
        return mapped
