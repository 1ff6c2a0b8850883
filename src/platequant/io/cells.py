"""Cell-level parsing helpers shared by the grid readers and normalizers."""

from __future__ import annotations

import math
import re
from typing import Sequence

# One row letter A-H followed by column 1-12, optionally zero-padded.
WELL_RE = re.compile(r"^[A-H](?:0?[1-9]|1[0-2])$", re.IGNORECASE)
ROW_LETTER_RE = re.compile(r"^[A-H]$", re.IGNORECASE)

# Keywords that mark a plate-reader header row.
HEADER_KEYWORDS_RE = re.compile(r"well|time|od|rfu|abs|signal|value", re.IGNORECASE)

# Plain ASCII decimal with optional exponent; no underscores, hex or words.
NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")

MAX_HEADER_SCAN_ROWS = 120

Grid = Sequence[Sequence[object]]


def cell_text(row: Sequence[object], index: int) -> str:
    """Return the stripped text of ``row[index]``, or "" when absent."""
    if index < 0 or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()


def parse_number(text: object) -> float | None:
    """Parse a cell as a finite float.

    Only plain decimal or exponent notation is accepted. Empty cells,
    non-numeric text, digit separators, NaN and infinities all return None.
    """
    if text is None:
        return None
    text = str(text).strip()
    if not NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def is_well_label(value: object) -> bool:
    """Return True if ``value`` is a 96-well label such as "A1" or "h12"."""
    if value is None:
        return False
    return WELL_RE.match(str(value).strip()) is not None


def canonical_well(well: str) -> str:
    """Upper-case a well label and drop column zero-padding ("a01" -> "A1")."""
    well = str(well).strip().upper()
    if not well:
        raise ValueError("Empty well label")
    row = well[0]
    col_part = well[1:]
    if not col_part.isdigit():
        raise ValueError(f"Invalid well label: {well}")
    return f"{row}{int(col_part)}"


def header_score(row: Sequence[object]) -> int:
    """Count plate-reader keyword hits in a row (case-insensitive substrings)."""
    joined = " ".join("" if cell is None else str(cell) for cell in row)
    return len(HEADER_KEYWORDS_RE.findall(joined))


def detect_header_index(grid: Grid) -> int:
    """Return the index of the most header-like row among the first 120.

    Ties go to the earliest row; an empty grid yields 0.
    """
    best = 0
    best_score = -1
    for idx, row in enumerate(grid[:MAX_HEADER_SCAN_ROWS]):
        score = header_score(row)
        if score > best_score:
            best = idx
            best_score = score
    return best


def find_column(header: Sequence[object], keywords: Sequence[str]) -> int:
    """Return the first header column whose lower-cased text contains a keyword.

    Returns -1 when no column matches.
    """
    for idx, cell in enumerate(header):
        text = "" if cell is None else str(cell).lower()
        if any(keyword in text for keyword in keywords):
            return idx
    return -1
