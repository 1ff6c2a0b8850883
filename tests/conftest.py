"""Shared test fixtures for PlateQuant."""

import numpy as np
import pytest


@pytest.fixture
def plate_map_grid() -> list[list[str]]:
    """Plate map with a column-number header and rows A and B filled."""
    header = [""] + [str(c) for c in range(1, 13)]
    row_a = ["A"] + [f"{0.1 * c:.2f}" for c in range(1, 13)]
    row_b = ["B"] + [f"{0.2 * c:.2f}" for c in range(1, 13)]
    return [header, row_a, row_b]


@pytest.fixture
def long_format_grid() -> list[list[str]]:
    """Well/Time/OD table: A1 doubles every hour, B1 is noisy."""
    rows = [["Well", "Time", "OD600"]]
    for t, (a, b) in enumerate(zip(["1", "2", "4", "8", "16"], ["3", "5", "4", "9", "6"])):
        rows.append(["A1", str(t), a])
        rows.append(["B1", str(t), b])
    return rows


@pytest.fixture
def time_first_grid() -> list[list[str]]:
    """Kinetic export: time in column 0, one column per well."""
    return [
        ["Plate 1", "", ""],
        ["Time", "A1", "A2"],
        ["0", "1", "0.5"],
        ["1", "2", "0.5"],
        ["2", "4", "0.6"],
        ["3", "8", "0.5"],
        ["4", "16", "0.7"],
    ]


@pytest.fixture
def blot_image() -> np.ndarray:
    """White 4x8 image with a grey lane 1 and a darker lane 2 (4 lanes of 2 px)."""
    gray = np.full((4, 8), 255, dtype=np.uint8)
    gray[:, 0:2] = 205  # darkness 50 per pixel
    gray[:, 2:4] = 155  # darkness 100 per pixel
    return gray


@pytest.fixture
def colony_image() -> np.ndarray:
    """Black 30x30 plate with a 5x5 colony and a 3x3 speck."""
    gray = np.zeros((30, 30), dtype=np.uint8)
    gray[2:7, 2:7] = 255
    gray[20:23, 20:23] = 255
    return gray
