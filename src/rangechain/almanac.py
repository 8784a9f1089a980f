"""Almanac text parser: seeds line plus ``X-to-Y map:`` rule blocks.

Layout::

    seeds: 79 14 55 13

    seed-to-soil map:
    50 98 2
    52 50 48

    soil-to-fertilizer map:
    0 15 37

Public API:

* ``iter_almanac_events(lines)`` yields one typed event per meaningful line.
* ``build_almanac(events)`` folds events into an immutable ``Almanac``.
* ``parse_almanac(text)`` / ``load_almanac(path)`` combine both.

Each stage is labelled with its header's destination category, so
``seed-to-soil`` becomes ``soil``.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from rangechain.chain import StageChain
from rangechain.errors import AlmanacParseError, MalformedRuleError
from rangechain.stage_map import StageMap
from rangechain.types import Interval, Rule

_SEEDS_PREFIX = "seeds:"
_HEADER_RE = re.compile(r"^(?P<source>[a-z][a-z0-9_]*)-to-(?P<destination>[a-z][a-z0-9_]*)\s+map:$")


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SeedsEvent:
    values: tuple[int, ...]
    line_no: int


@dataclass(frozen=True, slots=True)
class StageHeaderEvent:
    source: str
    destination: str
    line_no: int


@dataclass(frozen=True, slots=True)
class RuleEvent:
    rule: Rule
    line_no: int


AlmanacEvent: TypeAlias = SeedsEvent | StageHeaderEvent | RuleEvent


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Almanac:
    """Parsed seeds and the stage chain they run through."""

    seeds: tuple[int, ...]
    chain: StageChain

    @property
    def terminal_label(self) -> str | None:
        return self.chain.terminal_label

    def seed_ranges(self) -> list[Interval]:
        """Pair the seed list into ``(start, length)`` intervals."""
        if len(self.seeds) % 2:
            raise AlmanacParseError(
                f"seed ranges need an even number of values, got {len(self.seeds)}",
            )
        return [
            Interval(self.seeds[i], self.seeds[i + 1])
            for i in range(0, len(self.seeds), 2)
        ]


# ---------------------------------------------------------------------------
# Line parsing
# ---------------------------------------------------------------------------

def _parse_ints(text: str, line_no: int) -> list[int]:
    values: list[int] = []
    for token in text.split():
        if not (token.isascii() and token.isdigit()):
            raise MalformedRuleError(
                f"expected a non-negative integer, got {token!r}", line_no=line_no,
            )
        values.append(int(token))
    return values


def _parse_rule(text: str, line_no: int) -> Rule:
    values = _parse_ints(text, line_no)
    if len(values) != 3:
        raise MalformedRuleError(
            f"rule needs 3 values (destination source length), got {len(values)}",
            line_no=line_no,
        )
    return Rule(values[0], values[1], values[2])


def iter_almanac_events(lines: Iterable[str]) -> Iterator[AlmanacEvent]:
    """Yield events for every non-blank line.

    Raises ``AlmanacParseError`` on a rule outside any stage block, a header
    that does not read ``<source>-to-<destination> map:``, or a seeds line
    that is missing, repeated or not first.
    """
    seen_seeds = False
    in_stage = False
    for line_no, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        if text.startswith(_SEEDS_PREFIX):
            if seen_seeds:
                raise AlmanacParseError("duplicate seeds line", line_no=line_no)
            seen_seeds = True
            values = _parse_ints(text[len(_SEEDS_PREFIX):], line_no)
            yield SeedsEvent(tuple(values), line_no)
            continue
        if not seen_seeds:
            raise AlmanacParseError("almanac must start with a seeds line", line_no=line_no)
        if text.endswith(":"):
            match = _HEADER_RE.match(text)
            if match is None:
                raise AlmanacParseError(f"unrecognized map header {text!r}", line_no=line_no)
            in_stage = True
            yield StageHeaderEvent(match["source"], match["destination"], line_no)
            continue
        if not in_stage:
            raise AlmanacParseError("rule line before any map header", line_no=line_no)
        yield RuleEvent(_parse_rule(text, line_no), line_no)
    if not seen_seeds:
        raise AlmanacParseError("almanac has no seeds line")


def build_almanac(events: Iterable[AlmanacEvent]) -> Almanac:
    """Fold parser events into an ``Almanac``; header order is chain order."""
    seeds: tuple[int, ...] = ()
    stages: list[tuple[str, list[Rule]]] = []
    previous_destination: str | None = None
    for event in events:
        if isinstance(event, SeedsEvent):
            seeds = event.values
        elif isinstance(event, StageHeaderEvent):
            if event.destination in (label for label, _ in stages):
                raise AlmanacParseError(
                    f"duplicate stage {event.destination!r}", line_no=event.line_no,
                )
            if previous_destination is not None and event.source != previous_destination:
                raise AlmanacParseError(
                    f"stage {event.source}-to-{event.destination} does not continue "
                    f"from {previous_destination!r}",
                    line_no=event.line_no,
                )
            previous_destination = event.destination
            stages.append((event.destination, []))
        else:
            if not stages:
                raise AlmanacParseError("rule line before any map header", line_no=event.line_no)
            stages[-1][1].append(event.rule)
    chain = StageChain(tuple((label, StageMap(tuple(rules))) for label, rules in stages))
    return Almanac(seeds=seeds, chain=chain)


def parse_almanac(text: str) -> Almanac:
    return build_almanac(iter_almanac_events(text.splitlines()))


def load_almanac(path: Path) -> Almanac:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise AlmanacParseError(f"{path} is not UTF-8 text: {exc}") from exc
    return parse_almanac(text)
