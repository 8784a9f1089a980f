"""Core value types for stage rules and intervals."""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Interval(NamedTuple):
    """Half-open block of values ``[start, start + length)``."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class Rule:
    """One translation inside a stage.

    The source interval ``[source_offset, source_offset + length)`` maps onto
    ``[destination_offset, destination_offset + length)`` by a constant shift.
    """

    destination_offset: int
    source_offset: int
    length: int

    def __post_init__(self) -> None:
        for name in ("destination_offset", "source_offset", "length"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @classmethod
    def from_triple(cls, triple: tuple[int, int, int]) -> Rule:
        destination, source, length = triple
        return cls(destination, source, length)

    @property
    def source_end(self) -> int:
        return self.source_offset + self.length

    @property
    def shift(self) -> int:
        return self.destination_offset - self.source_offset

    def covers(self, value: int) -> bool:
        return self.source_offset <= value < self.source_end

    def clip(self, start: int, end: int) -> Interval | None:
        """Intersect ``[start, end)`` with the source interval, untranslated."""
        lo = max(start, self.source_offset)
        hi = min(end, self.source_end)
        if lo < hi:
            return Interval(lo, hi - lo)
        return None
