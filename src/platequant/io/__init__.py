"""PlateQuant IO — table and image readers, normalization, export."""

from __future__ import annotations

from platequant.io.export import (
    colonies_to_frame,
    export_csv,
    fits_to_frame,
    lanes_to_frame,
    records_to_frame,
)
from platequant.io.grid import parse_delimited_text, read_grid
from platequant.io.image import read_image, to_grayscale
from platequant.io.metadata import merge_metadata
from platequant.io.normalizer import LAYOUT_STRATEGIES, normalize_grid
from platequant.io.overlay import draw_colony_overlay, draw_lane_overlay, save_overlay
from platequant.io.serialization import params_from_yaml, params_to_yaml

__all__ = [
    "LAYOUT_STRATEGIES",
    "colonies_to_frame",
    "draw_colony_overlay",
    "draw_lane_overlay",
    "export_csv",
    "fits_to_frame",
    "lanes_to_frame",
    "merge_metadata",
    "normalize_grid",
    "params_from_yaml",
    "params_to_yaml",
    "parse_delimited_text",
    "read_grid",
    "read_image",
    "records_to_frame",
    "save_overlay",
    "to_grayscale",
]
