"""Real-valued mutation operators."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import numpy as np

from evocore.foundation.exceptions import ConfigurationError, DecayUndefinedError
from evocore.foundation.problem.solution import ArraySolution
from evocore.foundation.problem.types import RandomSource, SolutionProtocol
from evocore.operators.config import NonUniformMutationConfig

from .utils import ArrayLike, RealOperator, _ensure_bounds


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class Mutation(RealOperator, ABC):
    """Base class for real-coded mutation operators."""

    @abstractmethod
    def __call__(self, offspring: ArrayLike, rng: np.random.Generator) -> ArrayLike:
        raise NotImplementedError


class NonUniformMutation(Mutation):
    """
    Non-uniform mutation (Michalewicz) with randomised boundary repair.

    Each variable is mutated with probability ``probability``. The step moves
    the value toward its upper or lower bound (chosen by a fair draw) by a
    random fraction of the distance to that bound; the fraction shrinks as
    ``current_iteration`` approaches ``max_iterations``::

        delta(y) = y * (1 - r ** ((1 - t / T) ** perturbation))

    A candidate below the lower bound is reset to the middle of the range, or
    to ``lower + half_range * r * perturbation`` when ``0 < perturbation < 1``.
    A candidate above the upper bound is reset to
    ``upper - half_range * r * perturbation`` when ``0 < perturbation < 1`` and
    otherwise left untouched, unless the config enables ``symmetric_repair``.

    Random draws per variable happen in a fixed order: activation, direction,
    decay, then the optional repair draw.
    """

    def __init__(
        self,
        config: NonUniformMutationConfig | Mapping[str, Any] | None = None,
        *,
        lower: ArrayLike | None = None,
        upper: ArrayLike | None = None,
    ) -> None:
        if config is None:
            config = NonUniformMutationConfig()
        elif not isinstance(config, NonUniformMutationConfig):
            config = NonUniformMutationConfig.from_dict(config)
        self.config = config
        self.prob = config.probability
        self.perturbation = config.perturbation
        self.max_iterations = config.max_iterations
        # Only used by execute(); apply() takes the iteration as an argument.
        self.current_iteration = 0
        if lower is None or upper is None:
            self.lower = self.upper = None
        else:
            self.lower, self.upper = _ensure_bounds(lower, upper)
        _logger().debug("Non-uniform mutation configured: %s", config)

    def delta(self, distance: float, current_iteration: int, rng: RandomSource) -> float:
        """Return a random step of at most ``distance`` that decays with the iteration."""
        if self.max_iterations == 0:
            raise DecayUndefinedError(current_iteration, self.max_iterations, "max_iterations is zero")
        rand = rng.random()
        with np.errstate(all="ignore"):
            exponent = np.power(1.0 - current_iteration / self.max_iterations, self.perturbation)
            step = distance * (1.0 - np.power(rand, exponent))
        if not np.isfinite(exponent):
            raise DecayUndefinedError(current_iteration, self.max_iterations, "the decay exponent is not finite")
        if not np.isfinite(step):
            raise DecayUndefinedError(current_iteration, self.max_iterations, "the perturbation is not finite")
        return float(step)

    def _repair(self, candidate: float, lower: float, upper: float, rng: RandomSource) -> float:
        half_range = (upper - lower) / 2.0
        randomized = 0.0 < self.perturbation < 1.0
        if candidate < lower:
            candidate = lower + half_range
            if randomized:
                candidate = lower + half_range * (rng.random() * self.perturbation)
        elif candidate > upper:
            if self.config.symmetric_repair:
                candidate = upper - half_range
            if randomized:
                candidate = upper - half_range * (rng.random() * self.perturbation)
        return candidate

    def apply(self, solution: SolutionProtocol, current_iteration: int, rng: RandomSource) -> SolutionProtocol:
        """Mutate ``solution`` in place and return it."""
        for var in range(solution.number_of_variables()):
            if rng.random() >= self.prob:
                continue
            value = solution.get_value(var)
            lower = solution.get_lower_bound(var)
            upper = solution.get_upper_bound(var)
            if rng.random() <= 0.5:
                candidate = value + self.delta(upper - value, current_iteration, rng)
            else:
                candidate = value + self.delta(lower - value, current_iteration, rng)
            solution.set_value(var, self._repair(candidate, lower, upper, rng))
        return solution

    def execute(self, solution: SolutionProtocol, parameters: Mapping[str, Any], rng: RandomSource) -> SolutionProtocol:
        """
        Parameter-bag entry point: refresh ``current_iteration`` from
        ``parameters`` (``currentIteration`` or ``current_iteration``) and mutate.

        A bag without the key keeps the previously stored iteration.
        """
        for key in ("currentIteration", "current_iteration"):
            if parameters.get(key) is not None:
                self.current_iteration = int(parameters[key])
                break
        return self.apply(solution, self.current_iteration, rng)

    def __call__(
        self,
        offspring: ArrayLike,
        rng: np.random.Generator,
        *,
        current_iteration: int = 0,
    ) -> ArrayLike:
        if self.lower is None or self.upper is None:
            raise ConfigurationError(
                "NonUniformMutation needs lower and upper bounds to mutate a population.",
                suggestion="Pass lower= and upper= when building the operator, or call apply() on solutions",
            )
        X = self._as_population(offspring, name="offspring")
        self._check_bounds_match(X, self.lower)
        for row in X:
            self.apply(ArraySolution(row, self.lower, self.upper), current_iteration, rng)
        return X


__all__ = ["Mutation", "NonUniformMutation"]
