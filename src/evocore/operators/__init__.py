"""Variation operators."""

from .config import NonUniformMutationConfig
from .real import Mutation, NonUniformMutation

__all__ = ["Mutation", "NonUniformMutation", "NonUniformMutationConfig"]
