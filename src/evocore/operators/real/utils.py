"""Shared utilities for real-valued evolutionary operators."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from evocore.foundation.exceptions import BoundsError

ArrayLike = np.ndarray


def _ensure_bounds(lower: ArrayLike, upper: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Validate bounds and return float arrays of identical shape."""
    lower_arr = np.asarray(lower, dtype=float)
    upper_arr = np.asarray(upper, dtype=float)
    if lower_arr.shape != upper_arr.shape:
        raise BoundsError("lower and upper bounds must have the same shape.")
    if lower_arr.ndim != 1:
        raise BoundsError("Bounds must be one-dimensional arrays.")
    if np.any(lower_arr > upper_arr):
        raise BoundsError("Each lower bound must be <= corresponding upper bound.")
    return lower_arr, upper_arr


def _check_nvars(n_vars: int, bounds: np.ndarray) -> None:
    """Ensure that a bounds array matches the provided dimensionality."""
    if bounds.shape[0] != n_vars:
        raise BoundsError("Bounds dimensionality does not match the individual size.")


class RealOperator:
    """Common validation utilities shared by real-coded operators."""

    @staticmethod
    def _as_population(
        values: ArrayLike,
        *,
        name: str,
        copy: bool = True,
    ) -> np.ndarray:
        arr = np.asarray(values, dtype=float)
        if arr.ndim != 2:
            raise ValueError(f"{name} must have shape (n_individuals, n_vars).")
        return arr.copy() if copy else arr

    @staticmethod
    def _check_bounds_match(matrix: np.ndarray, bounds: np.ndarray) -> None:
        _check_nvars(matrix.shape[-1], bounds)


__all__ = [
    "ArrayLike",
    "RealOperator",
    "_check_nvars",
    "_ensure_bounds",
]
