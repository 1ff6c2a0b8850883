"""Exponential growth-rate fitting on tidy records."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from platequant.core.models import GrowthFit, TidyRecord

logger = logging.getLogger(__name__)

MIN_FIT_POINTS = 4


def fit_log_growth(
    times: Sequence[float],
    values: Sequence[float],
    well: str = "",
) -> GrowthFit | None:
    """Fit ``ln(value) = a + b * time`` by ordinary least squares.

    Only strictly positive values are used. Uses the closed-form normal
    equations over Σx, Σy, Σx², Σxy.

    Args:
        times: Time points.
        values: Readings aligned with ``times``.
        well: Well label recorded on the result.

    Returns:
        GrowthFit, or None when fewer than 4 positive points remain or all
        their times are identical.
    """
    t = np.asarray(times, dtype=float)
    v = np.asarray(values, dtype=float)
    positive = np.isfinite(t) & np.isfinite(v) & (v > 0)
    if np.count_nonzero(positive) < MIN_FIT_POINTS:
        return None

    order = np.argsort(t[positive], kind="stable")
    x = t[positive][order]
    y = np.log(v[positive][order])
    n = x.size

    sx = float(np.sum(x))
    sy = float(np.sum(y))
    sxx = float(np.sum(x * x))
    sxy = float(np.sum(x * y))
    den = n * sxx - sx * sx
    if den == 0:
        return None

    slope = (n * sxy - sx * sy) / den
    intercept = (sy - slope * sx) / n

    y_hat = intercept + slope * x
    ss_res = float(np.sum((y - y_hat) ** 2))
    ss_tot = float(np.sum((y - sy / n) ** 2))
    r_squared = 0.0 if ss_tot == 0 else 1.0 - ss_res / ss_tot

    doubling_time = math.log(2) / slope if slope > 0 else None
    return GrowthFit(
        well=well,
        growth_rate=float(slope),
        r_squared=float(r_squared),
        intercept=float(intercept),
        n_points=int(n),
        doubling_time=doubling_time,
    )


def fit_growth_rates(records: Sequence[TidyRecord]) -> list[GrowthFit]:
    """Fit every well with at least 4 positive readings.

    Wells without enough data are left out of the result rather than
    reported as errors.

    Args:
        records: Baseline-corrected tidy records.

    Returns:
        One GrowthFit per qualifying well, highest R² first.
    """
    by_well: dict[str, tuple[list[float], list[float]]] = {}
    for record in records:
        times, values = by_well.setdefault(record.well, ([], []))
        times.append(record.time)
        values.append(record.value)

    fits: list[GrowthFit] = []
    for well, (times, values) in by_well.items():
        fit = fit_log_growth(times, values, well=well)
        if fit is None:
            logger.debug("No growth fit for %s (%d readings)", well, len(values))
            continue
        fits.append(fit)

    fits.sort(key=lambda f: f.r_squared, reverse=True)
    logger.info("Fitted growth rates for %d of %d wells", len(fits), len(by_well))
    return fits
