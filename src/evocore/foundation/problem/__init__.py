"""Benchmark problems and the solution container protocol."""

from .base import Problem
from .cec2005 import CEC2005F08Problem, ShiftedRotatedAckley, ackley
from .solution import ArraySolution
from .types import ProblemProtocol, RandomSource, SolutionProtocol

__all__ = [
    "ArraySolution",
    "CEC2005F08Problem",
    "Problem",
    "ProblemProtocol",
    "RandomSource",
    "ShiftedRotatedAckley",
    "SolutionProtocol",
    "ackley",
]
