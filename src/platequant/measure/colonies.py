"""ColonySegmenter — threshold and 4-connected component counting."""

from __future__ import annotations

import logging

import numpy as np
from scipy import ndimage

from platequant.core.models import ColonyCount, ColonyResult
from platequant.measure.params import ColonyParams

logger = logging.getLogger(__name__)

# Up/down/left/right only: colonies touching at a corner stay separate.
FOUR_CONNECTIVITY = ndimage.generate_binary_structure(2, 1)


def _round_half_up(value: float) -> int:
    return int(np.floor(value + 0.5))


class ColonySegmenter:
    """Count bright colonies on a plate image.

    Pixels brighter than the threshold are foreground. Each 4-connected
    foreground component with at least ``min_area`` pixels becomes a
    colony; ids are assigned from 1 in row-major order of each component's
    first pixel.

    Args:
        params: Threshold and minimum area. Defaults to 140 and 18 px.
    """

    def __init__(self, params: ColonyParams | None = None) -> None:
        self._params = params or ColonyParams()

    @property
    def params(self) -> ColonyParams:
        return self._params

    def segment(self, gray: np.ndarray) -> ColonyCount:
        """Find colonies in a grayscale image.

        Args:
            gray: 2D grayscale image (H, W) with values in 0-255.

        Returns:
            ColonyCount with kept colonies (discovery order) and statistics.
        """
        gray = np.asarray(gray)
        if gray.ndim != 2:
            raise ValueError(f"Expected a 2D grayscale image, got shape {gray.shape}")

        threshold = self._params.threshold
        min_area = self._params.min_area

        foreground = gray > threshold
        foreground_pixels = int(np.count_nonzero(foreground))
        if foreground_pixels == 0:
            logger.warning("No pixels above threshold %d", threshold)
            return ColonyCount(
                colonies=[],
                notes=[f"No pixels above threshold {threshold}; try a lower threshold."],
            )

        labels, n_components = ndimage.label(foreground, structure=FOUR_CONNECTIVITY)
        flat = labels.ravel()
        fg_index = np.flatnonzero(flat)
        fg_labels = flat[fg_index]
        ys, xs = np.divmod(fg_index, gray.shape[1])

        counts = np.bincount(fg_labels, minlength=n_components + 1)
        sum_x = np.bincount(fg_labels, weights=xs, minlength=n_components + 1)
        sum_y = np.bincount(fg_labels, weights=ys, minlength=n_components + 1)

        # First foreground pixel (row-major) of every component fixes discovery order.
        first_pixel = np.full(n_components + 1, flat.size, dtype=np.int64)
        np.minimum.at(first_pixel, fg_labels, fg_index)
        discovery_order = np.argsort(first_pixel[1:], kind="stable") + 1

        colonies: list[ColonyResult] = []
        discarded = 0
        for label in discovery_order:
            area = int(counts[label])
            if area < min_area:
                discarded += 1
                continue
            colonies.append(
                ColonyResult(
                    colony_id=len(colonies) + 1,
                    area_pixels=area,
                    centroid_x=_round_half_up(sum_x[label] / area),
                    centroid_y=_round_half_up(sum_y[label] / area),
                )
            )

        notes: list[str] = []
        if not colonies:
            notes.append(
                f"All {n_components} components were smaller than {min_area} px; "
                "try a lower threshold."
            )
        elif discarded:
            notes.append(f"Discarded {discarded} components smaller than {min_area} px.")

        logger.info(
            "Found %d colonies (%d components, %d discarded) at threshold %d",
            len(colonies), n_components, discarded, threshold,
        )
        return ColonyCount(
            colonies=colonies,
            components_found=int(n_components),
            components_discarded=discarded,
            foreground_pixels=foreground_pixels,
            notes=notes,
        )
