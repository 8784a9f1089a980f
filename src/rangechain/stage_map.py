"""Single-stage rule lookup and range splitting.

A ``StageMap`` holds the rules of one pipeline stage. Two lookups are offered:

* ``get(value)`` translates one value through the first covering rule.
* ``get_ranges(start, length)`` splits an interval against every rule and
  returns the translated intersections in rule order.

By default neither lookup applies an identity fallback: an uncovered value
maps to ``None`` and uncovered sub-ranges are dropped. ``passthrough=True``
treats uncovered values and sub-ranges as mapping onto themselves.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rangechain.types import Interval, Rule


@dataclass(frozen=True, slots=True)
class StageMap:
    """Ordered, immutable rule set for one stage.

    Rules are expected not to overlap; when they do, the first rule in
    stored order wins for ``get``.
    """

    rules: tuple[Rule, ...] = ()

    @classmethod
    def from_triples(cls, triples: Iterable[tuple[int, int, int]]) -> StageMap:
        return cls(tuple(Rule.from_triple(t) for t in triples))

    def __len__(self) -> int:
        return len(self.rules)

    def get(self, value: int, *, passthrough: bool = False) -> int | None:
        for rule in self.rules:
            if rule.covers(value):
                return rule.destination_offset + (value - rule.source_offset)
        return value if passthrough else None

    def get_ranges(
        self,
        start: int,
        length: int,
        *,
        passthrough: bool = False,
    ) -> list[Interval]:
        """Split ``[start, start + length)`` against every rule.

        Emits one translated interval per intersecting rule, in rule order.
        With ``passthrough`` the sub-ranges covered by no rule follow, in
        ascending order and untranslated.
        """
        end = start + length
        mapped: list[Interval] = []
        for rule in self.rules:
            hit = rule.clip(start, end)
            if hit is not None:
                mapped.append(Interval(hit.start + rule.shift, hit.length))
        if passthrough:
            mapped.extend(self.uncovered_ranges(start, length))
        return mapped

    def uncovered_ranges(self, start: int, length: int) -> list[Interval]:
        """Sub-ranges of ``[start, start + length)`` that no rule covers."""
        end = start + length
        hits = sorted(
            hit for hit in (rule.clip(start, end) for rule in self.rules)
            if hit is not None
        )
        gaps: list[Interval] = []
        cursor = start
        for hit in hits:
            if hit.start > cursor:
                gaps.append(Interval(cursor, hit.start - cursor))
            cursor = max(cursor, hit.end)
        if cursor < end:
            gaps.append(Interval(cursor, end - cursor))
        return gaps
