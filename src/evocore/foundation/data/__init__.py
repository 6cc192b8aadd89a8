"""
Packaged data assets for evocore (benchmark shift vectors and rotation matrices).
"""

from __future__ import annotations

import logging
from importlib import resources
from os import PathLike
from pathlib import Path

import numpy as np

from evocore.foundation.exceptions import ResourceLoadError, ResourceNotFoundError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def benchmark_data_path(filename: str) -> Path:
    """
    Return a filesystem path to a packaged benchmark data file (e.g., "ackley_M_D10.txt").
    """
    path = resources.files(__name__) / "benchmarks" / filename
    if not path.is_file():
        raise ResourceNotFoundError(f"{__name__}/benchmarks/{filename}")
    return Path(path)


def _read_values(path: str | PathLike[str], expected: int) -> np.ndarray:
    path = Path(path)
    if not path.is_file():
        raise ResourceNotFoundError(str(path))
    try:
        tokens = path.read_text(encoding="utf-8").split()
    except OSError as exc:
        raise ResourceLoadError(f"Could not read benchmark data '{path}': {exc}", str(path)) from exc
    if len(tokens) < expected:
        raise ResourceLoadError(
            f"Benchmark data '{path}' holds {len(tokens)} values, expected at least {expected}.",
            str(path),
        )
    try:
        values = np.array([float(tok) for tok in tokens[:expected]], dtype=float)
    except ValueError as exc:
        raise ResourceLoadError(f"Benchmark data '{path}' contains a non-numeric value: {exc}", str(path)) from exc
    _logger().debug("Loaded %d values from %s", expected, path)
    return values


def load_row_vector(path: str | PathLike[str], length: int) -> np.ndarray:
    """Read the first ``length`` reals of a whitespace-delimited file."""
    return _read_values(path, length)


def load_matrix(path: str | PathLike[str], rows: int, cols: int) -> np.ndarray:
    """Read a ``rows x cols`` matrix stored row-major as whitespace-delimited reals."""
    return _read_values(path, rows * cols).reshape(rows, cols)


__all__ = ["benchmark_data_path", "load_matrix", "load_row_vector"]
