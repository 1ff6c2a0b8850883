"""Annotated overlay images for lane and colony results."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import cv2
import numpy as np

from platequant.core.models import ColonyResult, LaneResult
from platequant.io.image import to_uint8

CONTROL_COLOR = (0x22, 0xC5, 0x5E)  # green
LANE_COLOR = (0xF5, 0x9E, 0x0B)  # amber
COLONY_COLOR = (0x22, 0xC5, 0x5E)

LABEL_FONT = cv2.FONT_HERSHEY_SIMPLEX
LABEL_SCALE = 0.35


def to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Return an 8-bit RGB copy of a grayscale or RGB(A) image."""
    pixels = to_uint8(np.asarray(pixels))
    if pixels.ndim == 2:
        return np.stack([pixels] * 3, axis=-1)
    return pixels[..., :3].copy()


def draw_lane_overlay(
    pixels: np.ndarray,
    lanes: Sequence[LaneResult],
    control_lane: int,
) -> np.ndarray:
    """Outline and label ("L1", "L2", ...) each lane; the control lane is green.

    Args:
        pixels: Source image (grayscale or RGB(A)).
        lanes: Lane results carrying ``x_start``/``x_end``.
        control_lane: 1-based index of the control lane.

    Returns:
        RGB uint8 copy of the image with lane rectangles and labels.
    """
    rgb = to_rgb(pixels)
    height = rgb.shape[0]
    for lane in lanes:
        if lane.x_end <= lane.x_start:
            continue
        color = CONTROL_COLOR if lane.lane_index == control_lane else LANE_COLOR
        x0, x1 = lane.x_start, lane.x_end - 1
        rgb[:, x0] = color
        rgb[:, x1] = color
        rgb[0, x0:x1 + 1] = color
        rgb[height - 1, x0:x1 + 1] = color
        cv2.putText(
            rgb, f"L{lane.lane_index}", (x0 + 4, 16), LABEL_FONT, LABEL_SCALE, color, 1,
        )
    return rgb


def draw_colony_overlay(
    pixels: np.ndarray,
    colonies: Sequence[ColonyResult],
) -> np.ndarray:
    """Mark each colony centroid with a 3x3 green square and its id.

    Args:
        pixels: Source image (grayscale or RGB(A)).
        colonies: Colony results carrying centroids.

    Returns:
        RGB uint8 copy of the image with centroid markers and ids.
    """
    rgb = to_rgb(pixels)
    height, width = rgb.shape[:2]
    for colony in colonies:
        y0 = max(colony.centroid_y - 1, 0)
        y1 = min(colony.centroid_y + 2, height)
        x0 = max(colony.centroid_x - 1, 0)
        x1 = min(colony.centroid_x + 2, width)
        rgb[y0:y1, x0:x1] = COLONY_COLOR
        cv2.putText(
            rgb, str(colony.colony_id), (colony.centroid_x + 2, colony.centroid_y + 2),
            LABEL_FONT, LABEL_SCALE, COLONY_COLOR, 1,
        )
    return rgb


def save_overlay(rgb: np.ndarray, path: Path) -> None:
    """Write an overlay image; TIFF via tifffile, other formats via scikit-image."""
    path = Path(path)
    if path.suffix.lower() in {".tif", ".tiff"}:
        import tifffile

        tifffile.imwrite(str(path), rgb)
        return

    from skimage import io as skio

    skio.imsave(str(path), rgb, check_contrast=False)
