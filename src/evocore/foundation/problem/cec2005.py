"""
Shifted rotated Ackley's function with the global optimum on the bounds, in
the form of CEC 2005 benchmark F08.

The landscape is defined by a shift vector ``o`` and a rotation matrix ``M``
read from data files::

    z  = x - o
    zM = M @ z
    f  = ackley(zM) + bias

The data packaged in ``evocore.foundation.data`` (D = 2, 10, 30 and 50) are
stand-ins: a random shift vector and random orthogonal matrices laid out like
the CEC 2005 files, not the published CEC 2005 numbers. Results obtained with
them are not comparable to published F08 results. For the published landscape
pass the CEC 2005 files in explicit-data mode; the CEC files are meant for a
row-vector product ``z @ M``, so give the transposed matrix ``M.T`` here.
"""

from __future__ import annotations

import copy
import logging
import math
from os import PathLike

import numpy as np

from evocore.foundation.data import benchmark_data_path, load_matrix, load_row_vector
from evocore.foundation.exceptions import ConfigurationError, DimensionMismatchError, MissingConfigError

from .base import Problem


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def shift(out: np.ndarray, x: np.ndarray, o: np.ndarray) -> np.ndarray:
    """Write ``x - o`` into ``out``."""
    return np.subtract(x, o, out=out)


def rotate(out: np.ndarray, z: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Write the matrix-vector product ``matrix @ z`` into ``out``."""
    return np.matmul(matrix, z, out=out)


def ackley(z: np.ndarray) -> float:
    n = z.shape[0]
    sum1 = float(np.dot(z, z))
    sum2 = float(np.sum(np.cos(2.0 * math.pi * z)))
    return -20.0 * math.exp(-0.2 * math.sqrt(sum1 / n)) - math.exp(sum2 / n) + 20.0 + math.e


class ShiftedRotatedAckley:
    """
    Shifted rotated Ackley's function with the global optimum on the bounds.

    Two construction modes:

    - ``ShiftedRotatedAckley(dimension, bias)`` reads the packaged stand-in
      data (not the published CEC 2005 files, see the module docstring).
    - ``ShiftedRotatedAckley(dimension, bias, shift_file, rotation_file_prefix)``
      reads ``shift_file`` and ``f"{rotation_file_prefix}{dimension}.txt"``.

    With ``optimum_on_bounds`` every even-indexed component of the shift vector
    is pinned to ``LOWER_BOUND`` after loading, which places the optimum on the
    boundary of the search space. It defaults to on for the packaged data and to
    off for explicit files, whose shift vector is used exactly as given.

    Instances own two scratch buffers that every :meth:`evaluate` call
    overwrites, so one instance must not be evaluated from several threads at
    once. Use :meth:`spawn` to get an independent evaluator per worker.
    """

    FUNCTION_NAME = "Shifted Rotated Ackley's Function with Global Optimum on Bounds"
    DEFAULT_FILE_DATA = "ackley_func_data.txt"
    DEFAULT_FILE_MX_PREFIX = "ackley_M_D"
    DEFAULT_FILE_MX_SUFFIX = ".txt"
    LOWER_BOUND = -32.0
    UPPER_BOUND = 32.0

    def __init__(
        self,
        dimension: int,
        bias: float,
        shift_file: str | PathLike[str] | None = None,
        rotation_file_prefix: str | PathLike[str] | None = None,
        *,
        optimum_on_bounds: bool | None = None,
    ) -> None:
        dimension = int(dimension)
        if dimension < 1:
            raise ConfigurationError(f"Benchmark dimension must be positive, got {dimension}.")
        if (shift_file is None) != (rotation_file_prefix is None):
            missing = "rotation_file_prefix" if rotation_file_prefix is None else "shift_file"
            raise MissingConfigError(missing, type(self).__name__)

        if shift_file is None:
            shift_path = benchmark_data_path(self.DEFAULT_FILE_DATA)
            matrix_path = benchmark_data_path(self.matrix_file_name(self.DEFAULT_FILE_MX_PREFIX, dimension))
        else:
            shift_path = shift_file
            matrix_path = self.matrix_file_name(rotation_file_prefix, dimension)
        if optimum_on_bounds is None:
            optimum_on_bounds = shift_file is None

        self.dimension = dimension
        self.bias = float(bias)
        self._o = load_row_vector(shift_path, dimension)
        self._matrix = load_matrix(matrix_path, dimension, dimension)
        if optimum_on_bounds:
            self._o[::2] = self.LOWER_BOUND
        self._o.setflags(write=False)
        self._matrix.setflags(write=False)

        self._shifted = np.empty(dimension, dtype=float)
        self._rotated = np.empty(dimension, dtype=float)
        _logger().debug("Built %s (D=%d, bias=%g) from %s and %s", self.FUNCTION_NAME, dimension, self.bias, shift_path, matrix_path)

    @classmethod
    def matrix_file_name(cls, prefix: str | PathLike[str], dimension: int) -> str:
        return f"{prefix}{dimension}{cls.DEFAULT_FILE_MX_SUFFIX}"

    @property
    def shift_vector(self) -> np.ndarray:
        return self._o

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._matrix

    def evaluate(self, x: np.ndarray) -> float:
        """Return the biased Ackley value of one decision vector of length ``dimension``."""
        x = np.asarray(x, dtype=float)
        if x.shape != (self.dimension,):
            received = x.shape[0] if x.ndim == 1 else int(x.size)
            raise DimensionMismatchError(self.dimension, received)
        shift(self._shifted, x, self._o)
        rotate(self._rotated, self._shifted, self._matrix)
        return ackley(self._rotated) + self.bias

    def spawn(self) -> "ShiftedRotatedAckley":
        """Return an evaluator sharing the read-only data with fresh scratch buffers."""
        clone = copy.copy(self)
        clone._shifted = np.empty_like(self._shifted)
        clone._rotated = np.empty_like(self._rotated)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dimension={self.dimension}, bias={self.bias})"


class CEC2005F08Problem(Problem):
    """Single-objective problem wrapper around :class:`ShiftedRotatedAckley`."""

    def __init__(self, n_var: int = 10, bias: float = -140.0, function: ShiftedRotatedAckley | None = None) -> None:
        self.function = function if function is not None else ShiftedRotatedAckley(n_var, bias)
        self.n_var = self.function.dimension
        self.n_obj = 1
        self.xl = ShiftedRotatedAckley.LOWER_BOUND
        self.xu = ShiftedRotatedAckley.UPPER_BOUND

    def objectives(self, X: np.ndarray) -> np.ndarray:
        X = np.atleast_2d(X)
        return np.array([self.function.evaluate(row) for row in X], dtype=float)


__all__ = [
    "CEC2005F08Problem",
    "ShiftedRotatedAckley",
    "ackley",
    "rotate",
    "shift",
]
