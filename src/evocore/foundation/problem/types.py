from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class ProblemProtocol(Protocol):
    n_var: int
    n_obj: int
    n_constraints: int
    xl: float | int | np.ndarray
    xu: float | int | np.ndarray
    encoding: str

    def evaluate(self, X: np.ndarray, out: dict[str, np.ndarray]) -> None: ...


@runtime_checkable
class SolutionProtocol(Protocol):
    """Read/write access to a candidate's real-valued variables and their bounds."""

    def number_of_variables(self) -> int: ...

    def get_value(self, index: int) -> float: ...

    def set_value(self, index: int, value: float) -> None: ...

    def get_lower_bound(self, index: int) -> float: ...

    def get_upper_bound(self, index: int) -> float: ...


class RandomSource(Protocol):
    """Uniform draws in [0, 1); ``numpy.random.Generator`` satisfies it."""

    def random(self) -> float: ...


__all__ = ["ProblemProtocol", "RandomSource", "SolutionProtocol"]
