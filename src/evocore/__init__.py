"""evocore: benchmark evaluation and variation operators for evolutionary optimisation."""

from .foundation.exceptions import (
    DecayUndefinedError,
    DimensionMismatchError,
    EvoCoreError,
    ResourceLoadError,
    ResourceNotFoundError,
)
from .foundation.problem.cec2005 import CEC2005F08Problem, ShiftedRotatedAckley
from .foundation.problem.solution import ArraySolution
from .operators.config import NonUniformMutationConfig
from .operators.real.mutation import NonUniformMutation

__all__ = [
    "ArraySolution",
    "CEC2005F08Problem",
    "DecayUndefinedError",
    "DimensionMismatchError",
    "EvoCoreError",
    "NonUniformMutation",
    "NonUniformMutationConfig",
    "ResourceLoadError",
    "ResourceNotFoundError",
    "ShiftedRotatedAckley",
]
