"""Validated parameter sets for the image analyses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LANE_COUNT = 8
DEFAULT_CONTROL_LANE = 1
DEFAULT_COLONY_THRESHOLD = 140
DEFAULT_MIN_COLONY_AREA = 18

_VALID_MODES = frozenset({"lanes", "colonies"})


@dataclass(frozen=True)
class LaneParams:
    """Parameters for blot lane quantification.

    Attributes:
        lane_count: Number of vertical lanes (>= 2).
        control_lane: 1-based lane used as the density denominator.
    """

    lane_count: int = DEFAULT_LANE_COUNT
    control_lane: int = DEFAULT_CONTROL_LANE

    def __post_init__(self) -> None:
        """Validate lane geometry."""
        if self.lane_count < 2:
            raise ValueError(f"lane_count must be >= 2, got {self.lane_count}")
        if not (1 <= self.control_lane <= self.lane_count):
            raise ValueError(
                f"control_lane must be between 1 and {self.lane_count}, "
                f"got {self.control_lane}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"lane_count": self.lane_count, "control_lane": self.control_lane}


@dataclass(frozen=True)
class ColonyParams:
    """Parameters for colony segmentation.

    Attributes:
        threshold: Pixels brighter than this (0-255) are foreground.
        min_area: Components smaller than this many pixels are noise.
    """

    threshold: int = DEFAULT_COLONY_THRESHOLD
    min_area: int = DEFAULT_MIN_COLONY_AREA

    def __post_init__(self) -> None:
        """Validate threshold range and minimum area."""
        if not (0 <= self.threshold <= 255):
            raise ValueError(f"threshold must be between 0 and 255, got {self.threshold}")
        if self.min_area < 1:
            raise ValueError(f"min_area must be >= 1, got {self.min_area}")

    def to_dict(self) -> dict[str, Any]:
        return {"threshold": self.threshold, "min_area": self.min_area}


@dataclass(frozen=True)
class ImageAnalysisParams:
    """Which image analysis to run and with what settings."""

    mode: str = "lanes"  # "lanes", "colonies"
    lanes: LaneParams = field(default_factory=LaneParams)
    colonies: ColonyParams = field(default_factory=ColonyParams)

    def __post_init__(self) -> None:
        """Validate mode at construction time."""
        if self.mode not in _VALID_MODES:
            raise ValueError(
                f"Invalid analysis mode: {self.mode!r}. "
                f"Must be one of {sorted(_VALID_MODES)}"
            )
