"""Grid normalization — plate-reader exports to tidy records.

Three layout heuristics are tried in order and the first one that yields
any record wins:

1. ``row_letter_matrix`` — an 8 x 12 plate map with row letters in column 0.
2. ``long_format`` — one observation per row with Well / Time / Value columns.
3. ``time_first_wide`` — time in column 0 and one column per well.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from platequant.core.models import NormalizationResult, TidyRecord
from platequant.io.cells import (
    MAX_HEADER_SCAN_ROWS,
    ROW_LETTER_RE,
    Grid,
    cell_text,
    detect_header_index,
    find_column,
    is_well_label,
    parse_number,
)

logger = logging.getLogger(__name__)

PLATE_COLUMNS = 12
TIME_SAMPLE_ROWS = 12

WELL_KEYWORDS = ("well",)
TIME_KEYWORDS = ("time", "minute", "hour")
VALUE_KEYWORDS = ("value", "od", "rfu", "signal", "abs")

LayoutStrategy = Callable[[Grid], Optional[list[TidyRecord]]]


def parse_row_letter_matrix(grid: Grid) -> list[TidyRecord] | None:
    """Read a plate map whose rows start with a bare row letter A-H.

    Every finite cell in columns 1-12 becomes a record with ``time = 0``.
    Only the first 120 rows are scanned.
    """
    rows = grid[:MAX_HEADER_SCAN_ROWS]
    start = next(
        (i for i, row in enumerate(rows) if ROW_LETTER_RE.match(cell_text(row, 0))),
        None,
    )
    if start is None:
        return None

    records: list[TidyRecord] = []
    for row in rows[start:]:
        letter = cell_text(row, 0).upper()
        if not ROW_LETTER_RE.match(letter):
            continue
        for col in range(1, min(PLATE_COLUMNS, len(row) - 1) + 1):
            value = parse_number(row[col])
            if value is not None:
                records.append(TidyRecord(well=f"{letter}{col}", time=0.0, value=value))
    return records or None


def parse_long_format(grid: Grid) -> list[TidyRecord] | None:
    """Read one observation per row from Well, Time and Value columns."""
    if not grid:
        return None
    header_idx = detect_header_index(grid)
    header = grid[header_idx]
    well_col = find_column(header, WELL_KEYWORDS)
    time_col = find_column(header, TIME_KEYWORDS)
    value_col = find_column(header, VALUE_KEYWORDS)
    if well_col < 0 or time_col < 0 or value_col < 0:
        logger.debug(
            "Long format rejected: well=%d time=%d value=%d in header row %d",
            well_col, time_col, value_col, header_idx,
        )
        return None

    records: list[TidyRecord] = []
    for row in grid[header_idx + 1:]:
        well = cell_text(row, well_col).upper()
        time = parse_number(cell_text(row, time_col))
        value = parse_number(cell_text(row, value_col))
        if is_well_label(well) and time is not None and value is not None:
            records.append(TidyRecord(well=well, time=time, value=value))
    return records or None


def parse_time_first_wide(grid: Grid) -> list[TidyRecord] | None:
    """Read a table with time in column 0 and one well per remaining column.

    The layout is accepted when at least ``max(3, ceil(0.6 * n))`` of the
    first ``n <= 12`` data rows carry a number in column 0.
    """
    if not grid:
        return None
    header_idx = detect_header_index(grid)
    header = grid[header_idx]
    data = grid[header_idx + 1:]

    sample = data[:TIME_SAMPLE_ROWS]
    numeric_rows = sum(1 for row in sample if parse_number(cell_text(row, 0)) is not None)
    required = max(3, math.ceil(0.6 * len(sample)))
    if numeric_rows < required:
        logger.debug(
            "Time-first layout rejected: %d of %d sampled rows numeric (need %d)",
            numeric_rows, len(sample), required,
        )
        return None

    wells = [cell_text(header, col).upper() for col in range(1, len(header))]
    records: list[TidyRecord] = []
    for row in data:
        time = parse_number(cell_text(row, 0))
        if time is None:
            continue
        for offset, well in enumerate(wells, start=1):
            if not is_well_label(well):
                continue
            value = parse_number(cell_text(row, offset))
            if value is not None:
                records.append(TidyRecord(well=well, time=time, value=value))
    return records or None


LAYOUT_STRATEGIES: list[tuple[str, LayoutStrategy]] = [
    ("row_letter_matrix", parse_row_letter_matrix),
    ("long_format", parse_long_format),
    ("time_first_wide", parse_time_first_wide),
]


def normalize_grid(grid: Grid) -> NormalizationResult:
    """Convert a raw grid of text cells into tidy records.

    Never raises on malformed input: when no layout matches, the result
    has no records and a note explaining why.

    Args:
        grid: Rows of cells as decoded from a CSV/TSV file or a worksheet.

    Returns:
        NormalizationResult with records, notes, and the matched layout name.
    """
    rows = [list(row) if row is not None else [] for row in grid or []]
    if not any(cell_text(row, i) for row in rows for i in range(len(row))):
        logger.warning("Grid normalization skipped: grid is empty")
        return NormalizationResult(
            records=[],
            notes=["No tidy rows found: the uploaded table is empty."],
        )

    for name, strategy in LAYOUT_STRATEGIES:
        records = strategy(rows)
        if records:
            logger.info("Parsed %d tidy rows using %s layout", len(records), name)
            return NormalizationResult(
                records=records,
                notes=[f"Detected {name.replace('_', ' ')} layout."],
                layout=name,
            )
        logger.debug("Layout %s produced no rows", name)

    logger.warning("Grid normalization found no tidy rows in %d rows", len(rows))
    return NormalizationResult(
        records=[],
        notes=[
            "No tidy rows found: expected a plate map with row letters A-H, "
            "a Well/Time/Value table, or a time column followed by well columns."
        ],
    )
