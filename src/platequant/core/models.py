"""Data models for the PlateQuant core module."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TidyRecord:
    """One (well, time, value) observation from a plate-reader export."""

    well: str
    time: float
    value: float
    group: str | None = None


@dataclass(frozen=True)
class GrowthFit:
    """Exponential growth fit for one well.

    Attributes:
        well: Well label the fit belongs to.
        growth_rate: Slope of ln(value) against time.
        r_squared: Coefficient of determination of the log-linear fit.
        intercept: Fitted ln(value) at time zero.
        n_points: Number of positive readings used in the fit.
        doubling_time: ln(2) / growth_rate, or None for non-positive rates.
    """

    well: str
    growth_rate: float
    r_squared: float
    intercept: float = 0.0
    n_points: int = 0
    doubling_time: float | None = None


@dataclass(frozen=True)
class LaneResult:
    """Integrated darkness of one vertical lane of a blot image.

    ``x_start``/``x_end`` give the half-open column range of the lane.
    """

    lane_index: int
    integrated_intensity: float
    relative_density: float | None
    x_start: int = 0
    x_end: int = 0


@dataclass(frozen=True)
class ColonyResult:
    """A connected foreground component kept as a colony."""

    colony_id: int
    area_pixels: int
    centroid_x: int
    centroid_y: int


@dataclass(frozen=True)
class NormalizationResult:
    """Output of grid normalization.

    Attributes:
        records: Tidy records in grid order.
        notes: Human-readable diagnostics.
        layout: Name of the layout strategy that matched, or None.
    """

    records: list[TidyRecord]
    notes: list[str] = field(default_factory=list)
    layout: str | None = None


@dataclass(frozen=True)
class BaselineResult:
    """Output of per-well baseline subtraction."""

    records: list[TidyRecord]
    notes: list[str] = field(default_factory=list)
    applied: bool = False


@dataclass(frozen=True)
class MergeResult:
    """Output of a metadata merge onto tidy records.

    Attributes:
        records: Records with ``group`` filled from the metadata sheet.
        notes: Human-readable diagnostics.
        wells_mapped: Number of distinct wells found in the metadata sheet.
        records_annotated: Number of records whose group was set.
    """

    records: list[TidyRecord]
    notes: list[str] = field(default_factory=list)
    wells_mapped: int = 0
    records_annotated: int = 0


@dataclass(frozen=True)
class LaneQuantification:
    """Per-lane results for one blot image."""

    lanes: list[LaneResult]
    control_lane: int
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ColonyCount:
    """Colonies found on one plate image.

    Attributes:
        colonies: Kept components, in discovery order.
        components_found: All connected components before the area filter.
        components_discarded: Components dropped by the area filter.
        foreground_pixels: Pixels above the threshold.
        notes: Human-readable diagnostics.
    """

    colonies: list[ColonyResult]
    components_found: int = 0
    components_discarded: int = 0
    foreground_pixels: int = 0
    notes: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PlateAnalysis:
    """Result of the full tabular pipeline for one upload."""

    records: list[TidyRecord]
    fits: list[GrowthFit]
    notes: list[str] = field(default_factory=list)
    layout: str | None = None
