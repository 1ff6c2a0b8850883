"""Shared fixtures for CLI module tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import tifffile
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def growth_csv(tmp_path: Path, long_format_grid: list[list[str]]) -> Path:
    """Long-format plate-reader export written as CSV."""
    path = tmp_path / "growth.csv"
    path.write_text("\n".join(",".join(row) for row in long_format_grid) + "\n")
    return path


@pytest.fixture
def metadata_csv(tmp_path: Path) -> Path:
    """Sample sheet mapping wells to conditions."""
    path = tmp_path / "samples.csv"
    path.write_text("Well,Condition\nA1,wt\nB1,mutant\n")
    return path


@pytest.fixture
def blot_tiff(tmp_path: Path, blot_image: np.ndarray) -> Path:
    """Four-lane blot image saved as TIFF."""
    path = tmp_path / "blot.tif"
    tifffile.imwrite(str(path), blot_image)
    return path


@pytest.fixture
def colony_tiff(tmp_path: Path, colony_image: np.ndarray) -> Path:
    """Plate image with one colony and one speck saved as TIFF."""
    path = tmp_path / "plate.tif"
    tifffile.imwrite(str(path), colony_image)
    return path
