"""PlateQuant Measure — baseline, growth fitting, lane and colony analysis."""

from platequant.measure.baseline import subtract_baseline
from platequant.measure.colonies import ColonySegmenter
from platequant.measure.growth import fit_growth_rates, fit_log_growth
from platequant.measure.lanes import LaneQuantifier, lane_bounds
from platequant.measure.params import ColonyParams, ImageAnalysisParams, LaneParams

__all__ = [
    "ColonyParams",
    "ColonySegmenter",
    "ImageAnalysisParams",
    "LaneParams",
    "LaneQuantifier",
    "fit_growth_rates",
    "fit_log_growth",
    "lane_bounds",
    "subtract_baseline",
]
