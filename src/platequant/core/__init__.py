"""PlateQuant Core — result models and exceptions."""

from platequant.core.exceptions import (
    GridReadError,
    ImageReadError,
    PlateQuantError,
    UnsupportedFormatError,
)
from platequant.core.models import (
    BaselineResult,
    ColonyCount,
    ColonyResult,
    GrowthFit,
    LaneQuantification,
    LaneResult,
    MergeResult,
    NormalizationResult,
    PlateAnalysis,
    TidyRecord,
)

__all__ = [
    "BaselineResult",
    "ColonyCount",
    "ColonyResult",
    "GrowthFit",
    "LaneQuantification",
    "LaneResult",
    "MergeResult",
    "NormalizationResult",
    "PlateAnalysis",
    "TidyRecord",
    "PlateQuantError",
    "GridReadError",
    "ImageReadError",
    "UnsupportedFormatError",
]
