"""Composition of the tabular and image analysis stages."""

from __future__ import annotations

import logging

import numpy as np

from platequant.core.models import ColonyCount, LaneQuantification, PlateAnalysis
from platequant.io.cells import Grid
from platequant.io.image import to_grayscale
from platequant.io.metadata import merge_metadata
from platequant.io.normalizer import normalize_grid
from platequant.measure.baseline import subtract_baseline
from platequant.measure.colonies import ColonySegmenter
from platequant.measure.growth import fit_growth_rates
from platequant.measure.lanes import LaneQuantifier
from platequant.measure.params import ImageAnalysisParams

logger = logging.getLogger(__name__)


def analyze_plate_grid(
    grid: Grid,
    metadata_grid: Grid | None = None,
) -> PlateAnalysis:
    """Run normalize -> merge -> baseline -> fit on one plate-reader grid.

    Each stage returns a fresh record list; notes from every stage are
    collected in order.

    Args:
        grid: Plate-reader export as a grid of text cells.
        metadata_grid: Optional well -> group sheet.

    Returns:
        PlateAnalysis with baseline-corrected records and ranked fits.
    """
    normalized = normalize_grid(grid)
    notes = list(normalized.notes)
    records = normalized.records
    if not records:
        return PlateAnalysis(records=[], fits=[], notes=notes, layout=None)

    if metadata_grid is not None:
        merged = merge_metadata(records, metadata_grid)
        records = merged.records
        notes.extend(merged.notes)

    baseline = subtract_baseline(records)
    records = baseline.records
    notes.extend(baseline.notes)
    notes.append(f"Parsed {len(records)} rows.")

    fits = fit_growth_rates(records)
    if not fits:
        notes.append("No well has 4 or more positive time points; growth rates not fitted.")

    return PlateAnalysis(
        records=records,
        fits=fits,
        notes=notes,
        layout=normalized.layout,
    )


def analyze_image(
    pixels: np.ndarray,
    params: ImageAnalysisParams | None = None,
) -> LaneQuantification | ColonyCount:
    """Convert an image to grayscale and run the selected analysis.

    Args:
        pixels: Decoded image, (H, W), (H, W, 3) or (H, W, 4).
        params: Mode and settings; defaults to 8-lane quantification.

    Returns:
        LaneQuantification in "lanes" mode, ColonyCount in "colonies" mode.
    """
    params = params or ImageAnalysisParams()
    gray = to_grayscale(pixels)
    logger.debug("Running %s analysis on %dx%d image", params.mode, gray.shape[1], gray.shape[0])
    if params.mode == "colonies":
        return ColonySegmenter(params.colonies).segment(gray)
    return LaneQuantifier(params.lanes).quantify(gray)
