"""
Anneal a single candidate on the shifted rotated Ackley function with
non-uniform mutation. The loop below stands in for an algorithm driver.
"""

from __future__ import annotations

import logging

import numpy as np

from evocore import ArraySolution, NonUniformMutation, NonUniformMutationConfig, ShiftedRotatedAckley
from evocore.foundation.logging import configure_evocore_logging


def main(max_iterations: int = 2000, seed: int = 1) -> None:
    configure_evocore_logging(level=logging.INFO)
    logger = logging.getLogger("evocore.examples")

    fn = ShiftedRotatedAckley(dimension=10, bias=-140.0)
    mutation = NonUniformMutation(
        NonUniformMutationConfig(probability=1.0 / fn.dimension, perturbation=0.5, max_iterations=max_iterations)
    )
    rng = np.random.default_rng(seed)

    best = ArraySolution(rng.uniform(fn.LOWER_BOUND, fn.UPPER_BOUND, fn.dimension), fn.LOWER_BOUND, fn.UPPER_BOUND)
    best_f = fn.evaluate(best.values)
    for iteration in range(max_iterations):
        child = ArraySolution(best.values.copy(), best.lower, best.upper)
        mutation.apply(child, iteration, rng)
        child_f = fn.evaluate(child.values)
        if child_f <= best_f:
            best, best_f = child, child_f
        if iteration % 500 == 0:
            logger.info("iteration %d best=%.6f", iteration, best_f)
    logger.info("final best=%.6f (optimum %.1f)", best_f, fn.bias)


if __name__ == "__main__":
    main()
