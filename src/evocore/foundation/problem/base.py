"""
Base class for class-based optimization problems.
"""

from __future__ import annotations

import numpy as np


class Problem:
    """Base class for class-based optimization problems.

    Subclass this when your problem needs state set up in ``__init__``, such as
    a benchmark's shift vector and rotation matrix.

    **Required:** set ``n_var``, ``n_obj``, ``xl``, ``xu`` in ``__init__``.
    **Optional:** override ``encoding`` as a class-level attribute.

    Example::

        import numpy as np
        from evocore.foundation.problem.base import Problem

        class Sphere(Problem):
            def __init__(self):
                self.n_var = 3
                self.n_obj = 1
                self.xl = -5.0
                self.xu = 5.0

            def objectives(self, X: np.ndarray) -> np.ndarray:
                # X: (N, n_var) batch of candidate solutions
                return np.sum(X ** 2, axis=1)
    """

    encoding: str = "real"
    """Variable encoding.  Only ``"real"`` is used in evocore."""

    n_constraints: int = 0
    """Number of inequality constraints.  evocore benchmarks are unconstrained."""

    def objectives(self, X: np.ndarray) -> np.ndarray:
        """Compute objective values for a batch of solutions.

        Args:
            X: Decision matrix of shape ``(N, n_var)``.

        Returns:
            Array of shape ``(N, n_obj)`` with objective values to
            **minimize**.  A single-objective problem may return a 1-D array
            of length ``N``.
        """
        raise NotImplementedError(
            f"{type(self).__name__} must implement objectives(self, X)."
        )

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None:
        """Framework evaluation entry point.  Override :meth:`objectives`
        instead of this method."""
        X = np.asarray(X, dtype=float)

        F_computed = np.asarray(self.objectives(X), dtype=float)
        if F_computed.ndim == 1:
            F_computed = F_computed.reshape(-1, self.n_obj)
        F_buf = out.get("F")
        if F_buf is not None and F_buf.shape == F_computed.shape:
            F_buf[:] = F_computed
        else:
            out["F"] = F_computed


__all__ = ["Problem"]
