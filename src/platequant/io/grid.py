"""Tabular file reading — CSV/TSV text and Excel workbooks to text grids."""

from __future__ import annotations

import csv
from pathlib import Path

from platequant.core.exceptions import GridReadError, UnsupportedFormatError

TEXT_EXTENSIONS = {".csv", ".tsv", ".txt"}
EXCEL_EXTENSIONS = {".xlsx", ".xls"}


def parse_delimited_text(text: str) -> list[list[str]]:
    """Split delimited text into a grid of stripped cells.

    Each line is split on tabs when it contains one, otherwise on commas.
    Double-quoted fields may contain the delimiter. Blank lines are dropped.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    grid: list[list[str]] = []
    for line in lines:
        if not line.strip():
            continue
        delimiter = "\t" if "\t" in line else ","
        cells = next(csv.reader([line], delimiter=delimiter, skipinitialspace=True))
        grid.append([cell.strip() for cell in cells])
    return grid


def read_excel_grid(path: Path, all_sheets: bool = True) -> list[list[str]]:
    """Read an Excel workbook into a grid of text cells.

    Args:
        path: Workbook path.
        all_sheets: Concatenate every sheet top to bottom when True,
            otherwise read only the first sheet.

    Returns:
        Grid with empty strings for blank cells.
    """
    import pandas as pd

    sheet_name = None if all_sheets else 0
    frames = pd.read_excel(path, sheet_name=sheet_name, header=None, dtype=str)
    if not isinstance(frames, dict):
        frames = {0: frames}

    grid: list[list[str]] = []
    for frame in frames.values():
        frame = frame.fillna("")
        for row in frame.itertuples(index=False):
            grid.append([str(cell).strip() for cell in row])
    return grid


def read_grid(path: Path, all_sheets: bool = True) -> list[list[str]]:
    """Read a CSV, TSV or Excel file into a grid of text cells.

    Args:
        path: File to read.
        all_sheets: For workbooks, concatenate all sheets (data uploads)
            or read only the first (metadata uploads).

    Returns:
        List of rows, each a list of stripped cell strings.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not a known table format.
        GridReadError: If the file cannot be decoded.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No such file: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_EXTENSIONS:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise GridReadError(str(path), "not UTF-8 text") from exc
        return parse_delimited_text(text)

    if suffix in EXCEL_EXTENSIONS:
        try:
            return read_excel_grid(path, all_sheets=all_sheets)
        except (ValueError, OSError, ImportError) as exc:
            raise GridReadError(str(path), str(exc)) from exc

    raise UnsupportedFormatError(str(path))
