"""
Array-backed solution container used by the real-coded operators.
"""

from __future__ import annotations

import numpy as np

from evocore.foundation.exceptions import BoundsError


class ArraySolution:
    """
    A real-valued candidate backed by NumPy arrays.

    ``values`` is used in place (no copy) when it is already a float array, so an
    ``ArraySolution`` can wrap one row of a population matrix and write through it.
    """

    def __init__(self, values: np.ndarray, lower: np.ndarray | float, upper: np.ndarray | float) -> None:
        self.values = np.asarray(values, dtype=float)
        if self.values.ndim != 1:
            raise BoundsError("Solution values must be a one-dimensional array.")
        n_var = self.values.shape[0]
        self.lower = np.broadcast_to(np.asarray(lower, dtype=float), (n_var,))
        self.upper = np.broadcast_to(np.asarray(upper, dtype=float), (n_var,))
        if np.any(self.lower > self.upper):
            raise BoundsError("Each lower bound must be <= corresponding upper bound.")

    def number_of_variables(self) -> int:
        return int(self.values.shape[0])

    def get_value(self, index: int) -> float:
        return float(self.values[index])

    def set_value(self, index: int, value: float) -> None:
        self.values[index] = value

    def get_lower_bound(self, index: int) -> float:
        return float(self.lower[index])

    def get_upper_bound(self, index: int) -> float:
        return float(self.upper[index])

    def __repr__(self) -> str:
        return f"ArraySolution(values={self.values!r})"


__all__ = ["ArraySolution"]
