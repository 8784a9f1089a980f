"""Tests for single-stage lookup and range splitting."""
import pytest

from rangechain.stage_map import StageMap
from rangechain.types import Interval, Rule


def _three_block_map() -> StageMap:
    return StageMap.from_triples([(100, 0, 50), (200, 50, 50), (500, 100, 100)])


class TestRule:
    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ValueError, match="source_offset"):
            Rule(0, -1, 5)

    def test_clip_is_half_open(self) -> None:
        rule = Rule(10, 5, 5)
        assert rule.clip(0, 5) is None
        assert rule.clip(0, 6) == Interval(5, 1)
        assert rule.clip(9, 20) == Interval(9, 1)
        assert rule.clip(10, 20) is None

    def test_shift_can_be_negative(self) -> None:
        assert Rule(0, 50, 1).shift == -50


class TestGet:
    def test_covered_value_is_translated(self) -> None:
        stage = _three_block_map()
        assert stage.get(0) == 100
        assert stage.get(49) == 149
        assert stage.get(50) == 200
        assert stage.get(199) == 599

    def test_uncovered_value_has_no_mapping(self) -> None:
        stage = _three_block_map()
        assert stage.get(200) is None
        assert StageMap().get(5) is None

    def test_passthrough_maps_uncovered_value_onto_itself(self) -> None:
        stage = _three_block_map()
        assert stage.get(200, passthrough=True) == 200
        assert stage.get(10, passthrough=True) == 110

    def test_first_matching_rule_wins_on_overlap(self) -> None:
        stage = StageMap.from_triples([(10, 0, 5), (20, 0, 5)])
        assert stage.get(2) == 12

    def test_large_values_are_exact(self) -> None:
        stage = StageMap.from_triples([(2**63, 2**40, 2**35)])
        assert stage.get(2**40 + 7) == 2**63 + 7


class TestGetRanges:
    def test_split_across_two_rules(self) -> None:
        assert _three_block_map().get_ranges(25, 50) == [(125, 25), (200, 25)]

    def test_range_inside_one_rule(self) -> None:
        assert _three_block_map().get_ranges(10, 10) == [(110, 10)]

    def test_zero_length_yields_nothing(self) -> None:
        assert _three_block_map().get_ranges(10, 0) == []

    def test_uncovered_range_is_dropped(self) -> None:
        assert _three_block_map().get_ranges(300, 10) == []
        assert _three_block_map().get_ranges(190, 20) == [(590, 10)]

    def test_output_follows_rule_order(self) -> None:
        stage = StageMap.from_triples([(500, 100, 100), (100, 0, 50)])
        assert stage.get_ranges(40, 70) == [(500, 10), (140, 10)]

    def test_overlapping_rules_each_emit(self) -> None:
        stage = StageMap.from_triples([(10, 0, 5), (20, 0, 5)])
        assert stage.get_ranges(0, 5) == [(10, 5), (20, 5)]

    def test_passthrough_appends_uncovered_sub_ranges(self) -> None:
        assert _three_block_map().get_ranges(190, 20, passthrough=True) == [
            (590, 10),
            (200, 10),
        ]

    def test_passthrough_preserves_total_length(self) -> None:
        stage = StageMap.from_triples([(0, 10, 5), (50, 30, 5)])
        out = stage.get_ranges(0, 40, passthrough=True)
        assert sum(interval.length for interval in out) == 40
        assert out[:2] == [(0, 5), (50, 5)]
        assert out[2:] == [(0, 10), (15, 15), (35, 5)]

    def test_results_are_intervals(self) -> None:
        out = _three_block_map().get_ranges(0, 10)
        assert all(isinstance(interval, Interval) for interval in out)
        assert out[0].end == 110


class TestUncoveredRanges:
    def test_gaps_between_and_around_rules(self) -> None:
        stage = StageMap.from_triples([(0, 10, 5), (0, 20, 5)])
        assert stage.uncovered_ranges(0, 30) == [(0, 10), (15, 5), (25, 5)]

    def test_overlapping_rules_merge(self) -> None:
        stage = StageMap.from_triples([(0, 10, 10), (0, 15, 10)])
        assert stage.uncovered_ranges(5, 30) == [(5, 5), (25, 10)]

    def test_fully_covered_range(self) -> None:
        assert _three_block_map().uncovered_ranges(0, 200) == []

    def test_no_rules(self) -> None:
        assert StageMap().uncovered_ranges(3, 4) == [(3, 4)]
