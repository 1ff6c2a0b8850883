"""LaneQuantifier — integrated band darkness per blot lane."""

from __future__ import annotations

import logging
import math

import numpy as np

from platequant.core.models import LaneQuantification, LaneResult
from platequant.measure.params import LaneParams

logger = logging.getLogger(__name__)


def lane_bounds(width: int, lane_count: int) -> list[tuple[int, int]]:
    """Split ``width`` columns into ``lane_count`` contiguous half-open ranges.

    Every lane is ``width // lane_count`` columns wide except the last,
    which also takes the remainder, so the ranges tile ``[0, width)``.
    """
    lane_width = width // lane_count
    bounds: list[tuple[int, int]] = []
    for i in range(lane_count):
        x_start = i * lane_width
        x_end = width if i == lane_count - 1 else (i + 1) * lane_width
        bounds.append((x_start, x_end))
    return bounds


def column_darkness(gray: np.ndarray) -> np.ndarray:
    """Sum ``255 - gray`` down each column (dark bands score high)."""
    inverted = 255 - gray.astype(np.int64)
    return inverted.sum(axis=0)


class LaneQuantifier:
    """Quantify vertical lanes of a dark-on-light blot image.

    Args:
        params: Lane count and control lane. Defaults to 8 lanes, control 1.
    """

    def __init__(self, params: LaneParams | None = None) -> None:
        self._params = params or LaneParams()

    @property
    def params(self) -> LaneParams:
        return self._params

    def quantify(self, gray: np.ndarray) -> LaneQuantification:
        """Integrate darkness over each lane and normalize to the control lane.

        Args:
            gray: 2D grayscale image (H, W) with values in 0-255.

        Returns:
            LaneQuantification with one LaneResult per lane, in lane order.
            ``relative_density`` is None for every lane when the control
            lane's intensity is not a positive finite number.
        """
        gray = np.asarray(gray)
        if gray.ndim != 2:
            raise ValueError(f"Expected a 2D grayscale image, got shape {gray.shape}")

        lane_count = self._params.lane_count
        control_lane = self._params.control_lane
        notes: list[str] = []

        darkness = column_darkness(gray)
        cumulative = np.concatenate(([0], np.cumsum(darkness)))
        width = gray.shape[1]
        if width < lane_count:
            notes.append(
                f"Image is {width} px wide but {lane_count} lanes were requested; "
                "some lanes are empty."
            )

        bounds = lane_bounds(width, lane_count)
        intensities = [float(cumulative[x_end] - cumulative[x_start]) for x_start, x_end in bounds]

        control = intensities[control_lane - 1]
        usable_control = math.isfinite(control) and control > 0
        if not usable_control:
            logger.warning("Control lane %d has no signal; relative densities omitted", control_lane)
            notes.append(
                f"Control lane {control_lane} has no signal; relative density is undefined."
            )

        lanes = [
            LaneResult(
                lane_index=i + 1,
                integrated_intensity=intensity,
                relative_density=intensity / control if usable_control else None,
                x_start=x_start,
                x_end=x_end,
            )
            for i, (intensity, (x_start, x_end)) in enumerate(zip(intensities, bounds))
        ]
        logger.info("Quantified %d lanes over %d columns", lane_count, width)
        return LaneQuantification(lanes=lanes, control_lane=control_lane, notes=notes)
