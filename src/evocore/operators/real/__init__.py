"""Real-valued evolutionary operators."""

from .mutation import Mutation, NonUniformMutation
from .utils import ArrayLike, RealOperator, _check_nvars, _ensure_bounds

__all__ = [
    "ArrayLike",
    "Mutation",
    "NonUniformMutation",
    "RealOperator",
    "_check_nvars",
    "_ensure_bounds",
]
