"""Tests for LaneQuantifier and lane geometry."""

import numpy as np
import pytest

from platequant.measure.lanes import LaneQuantifier, column_darkness, lane_bounds
from platequant.measure.params import LaneParams


class TestLaneBounds:
    def test_even_split(self):
        assert lane_bounds(8, 4) == [(0, 2), (2, 4), (4, 6), (6, 8)]

    def test_remainder_goes_to_last_lane(self):
        assert lane_bounds(10, 3) == [(0, 3), (3, 6), (6, 10)]

    @pytest.mark.parametrize("width", [2, 7, 13, 40])
    def test_lanes_tile_the_image(self, width):
        for lane_count in range(2, width + 1):
            bounds = lane_bounds(width, lane_count)
            assert len(bounds) == lane_count
            assert bounds[0][0] == 0
            assert bounds[-1][1] == width
            for (_, prev_end), (next_start, _) in zip(bounds, bounds[1:]):
                assert prev_end == next_start

    def test_narrow_image(self):
        bounds = lane_bounds(3, 5)
        assert bounds[:4] == [(0, 0)] * 4
        assert bounds[4] == (0, 3)


class TestColumnDarkness:
    def test_inverted_column_sums(self):
        gray = np.array([[255, 0], [205, 100]], dtype=np.uint8)
        np.testing.assert_array_equal(column_darkness(gray), [50, 410])


class TestLaneQuantifier:
    def test_intensities_and_relative_density(self, blot_image):
        result = LaneQuantifier(LaneParams(lane_count=4, control_lane=1)).quantify(blot_image)
        assert [lane.integrated_intensity for lane in result.lanes] == [400.0, 800.0, 0.0, 0.0]
        assert [lane.relative_density for lane in result.lanes] == [1.0, 2.0, 0.0, 0.0]
        assert [lane.lane_index for lane in result.lanes] == [1, 2, 3, 4]
        assert result.control_lane == 1
        assert result.notes == []

    def test_other_control_lane(self, blot_image):
        result = LaneQuantifier(LaneParams(lane_count=4, control_lane=2)).quantify(blot_image)
        assert result.lanes[0].relative_density == pytest.approx(0.5)

    def test_zero_control_guard(self, blot_image):
        result = LaneQuantifier(LaneParams(lane_count=4, control_lane=3)).quantify(blot_image)
        assert all(lane.relative_density is None for lane in result.lanes)
        assert result.lanes[1].integrated_intensity == 800.0
        assert any("Control lane 3" in note for note in result.notes)

    def test_lane_ranges_reported(self, blot_image):
        result = LaneQuantifier(LaneParams(lane_count=3)).quantify(blot_image)
        assert [(lane.x_start, lane.x_end) for lane in result.lanes] == [(0, 2), (2, 4), (4, 8)]

    def test_intensities_sum_to_total(self):
        rng = np.random.default_rng(0)
        gray = rng.integers(0, 256, size=(12, 37), dtype=np.uint8)
        result = LaneQuantifier(LaneParams(lane_count=5)).quantify(gray)
        total = sum(lane.integrated_intensity for lane in result.lanes)
        assert total == float(column_darkness(gray).sum())

    def test_default_params(self):
        gray = np.full((2, 16), 100, dtype=np.uint8)
        result = LaneQuantifier().quantify(gray)
        assert len(result.lanes) == 8
        assert all(lane.relative_density == 1.0 for lane in result.lanes)

    def test_narrow_image_note(self):
        gray = np.zeros((2, 3), dtype=np.uint8)
        result = LaneQuantifier(LaneParams(lane_count=4, control_lane=4)).quantify(gray)
        assert len(result.lanes) == 4
        assert result.lanes[3].integrated_intensity == 3 * 2 * 255
        assert any("px wide" in note for note in result.notes)

    def test_rejects_color_image(self):
        with pytest.raises(ValueError):
            LaneQuantifier().quantify(np.zeros((4, 8, 3), dtype=np.uint8))
