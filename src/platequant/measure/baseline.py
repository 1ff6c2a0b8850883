"""Per-well baseline subtraction."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Sequence

from platequant.core.models import BaselineResult, TidyRecord

logger = logging.getLogger(__name__)


def well_minimums(records: Sequence[TidyRecord]) -> dict[str, float]:
    """Return the minimum value observed for each well."""
    minimums: dict[str, float] = {}
    for record in records:
        current = minimums.get(record.well)
        if current is None or record.value < current:
            minimums[record.well] = record.value
    return minimums


def subtract_baseline(records: Sequence[TidyRecord]) -> BaselineResult:
    """Subtract each well's minimum value from all of its readings.

    Skipped, with a note, when no well has more than one time point
    (a single-read plate map). Applying it twice gives the same records
    as applying it once.

    Args:
        records: Tidy records, in any order.

    Returns:
        BaselineResult with new records in the input order.
    """
    records = list(records)
    if not records:
        return BaselineResult(records=[], notes=[], applied=False)

    points_per_well = Counter(record.well for record in records)
    if max(points_per_well.values()) < 2:
        logger.info("Baseline subtraction skipped: single time point per well")
        return BaselineResult(
            records=records,
            notes=["Baseline subtraction skipped: each well has a single time point."],
            applied=False,
        )

    minimums = well_minimums(records)
    corrected = [
        replace(record, value=record.value - minimums[record.well])
        for record in records
    ]
    logger.info("Baseline-subtracted %d wells", len(minimums))
    return BaselineResult(
        records=corrected,
        notes=[f"Baseline subtracted per well ({len(minimums)} wells)."],
        applied=True,
    )
