"""Tabular export of analysis results via pandas."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from platequant.core.models import ColonyResult, GrowthFit, LaneResult, TidyRecord

TIDY_COLUMNS = ["Well", "Time", "Value", "Group"]
FIT_COLUMNS = ["Well", "growthRate", "r2", "intercept", "nPoints", "doublingTime"]
LANE_COLUMNS = ["Lane", "IntegratedIntensity", "RelativeDensity", "XStart", "XEnd"]
COLONY_COLUMNS = ["ColonyID", "AreaPx", "CentroidX", "CentroidY"]


def records_to_frame(records: Sequence[TidyRecord]) -> pd.DataFrame:
    """Tidy records as a Well/Time/Value/Group DataFrame."""
    rows = [
        {"Well": r.well, "Time": r.time, "Value": r.value, "Group": r.group}
        for r in records
    ]
    return pd.DataFrame(rows, columns=TIDY_COLUMNS)


def fits_to_frame(fits: Sequence[GrowthFit]) -> pd.DataFrame:
    """Growth fits in ranked order."""
    rows = [
        {
            "Well": f.well,
            "growthRate": f.growth_rate,
            "r2": f.r_squared,
            "intercept": f.intercept,
            "nPoints": f.n_points,
            "doublingTime": f.doubling_time,
        }
        for f in fits
    ]
    return pd.DataFrame(rows, columns=FIT_COLUMNS)


def lanes_to_frame(lanes: Sequence[LaneResult]) -> pd.DataFrame:
    """Lane results; undefined relative densities become NaN."""
    rows = [
        {
            "Lane": lane.lane_index,
            "IntegratedIntensity": lane.integrated_intensity,
            "RelativeDensity": lane.relative_density,
            "XStart": lane.x_start,
            "XEnd": lane.x_end,
        }
        for lane in lanes
    ]
    return pd.DataFrame(rows, columns=LANE_COLUMNS)


def colonies_to_frame(colonies: Sequence[ColonyResult]) -> pd.DataFrame:
    """Colony results in discovery order."""
    rows = [
        {
            "ColonyID": c.colony_id,
            "AreaPx": c.area_pixels,
            "CentroidX": c.centroid_x,
            "CentroidY": c.centroid_y,
        }
        for c in colonies
    ]
    return pd.DataFrame(rows, columns=COLONY_COLUMNS)


def export_csv(frame: pd.DataFrame, path: Path) -> None:
    """Write a result frame to CSV without the index column."""
    frame.to_csv(Path(path), index=False)
