"""Metadata merge — annotate tidy records with group labels from a sample sheet."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from platequant.core.models import MergeResult, TidyRecord
from platequant.io.cells import (
    Grid,
    canonical_well,
    cell_text,
    detect_header_index,
    find_column,
    is_well_label,
)

logger = logging.getLogger(__name__)

GROUP_KEYWORDS = ("group", "condition", "sample")


def read_group_map(grid: Grid) -> dict[str, str] | None:
    """Build a canonical-well -> group mapping from a metadata grid.

    Rows with an invalid well label are ignored. Later rows overwrite
    earlier ones for the same well, including rows with an empty group,
    which map the well to "" so its records keep their own group.

    Returns:
        The mapping, or None if the Well or Group column cannot be found.
    """
    if not grid:
        return None
    header_idx = detect_header_index(grid)
    header = grid[header_idx]
    well_col = find_column(header, ("well",))
    group_col = find_column(header, GROUP_KEYWORDS)
    if well_col < 0 or group_col < 0:
        return None

    mapping: dict[str, str] = {}
    for row in grid[header_idx + 1:]:
        well = cell_text(row, well_col)
        group = cell_text(row, group_col)
        if is_well_label(well):
            mapping[canonical_well(well)] = group
    return mapping


def _join_key(well: str) -> str:
    if is_well_label(well):
        return canonical_well(well)
    return str(well).strip().upper()


def merge_metadata(
    records: Sequence[TidyRecord],
    grid: Grid,
) -> MergeResult:
    """Join group labels from ``grid`` onto ``records`` by well.

    Records whose well is absent from the sheet, or whose last sheet row
    has an empty group, keep their existing group.
    When the sheet lacks a Well or Group/Condition/Sample column the records
    are returned unchanged with an explanatory note.

    Args:
        records: Tidy records produced by the grid normalizer.
        grid: Metadata sheet as a grid of text cells.

    Returns:
        MergeResult with the annotated records.
    """
    records = list(records)
    rows = [list(row) if row is not None else [] for row in grid or []]
    mapping = read_group_map(rows)
    if mapping is None:
        logger.warning("Metadata merge skipped: no Well + Group columns found")
        return MergeResult(
            records=records,
            notes=["Metadata requires Well + Group columns."],
        )

    wells_mapped = sum(1 for group in mapping.values() if group)
    merged: list[TidyRecord] = []
    annotated = 0
    for record in records:
        group = mapping.get(_join_key(record.well))
        if not group:
            merged.append(record)
            continue
        merged.append(replace(record, group=group))
        annotated += 1

    logger.info(
        "Merged %d metadata wells onto %d of %d records",
        wells_mapped, annotated, len(records),
    )
    notes = ["Metadata merged by Well."]
    if not annotated:
        notes.append("No tidy rows matched a well in the metadata sheet.")
    return MergeResult(
        records=merged,
        notes=notes,
        wells_mapped=wells_mapped,
        records_annotated=annotated,
    )
