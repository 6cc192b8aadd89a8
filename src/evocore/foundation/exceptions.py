"""
evocore exception hierarchy.

Provides exceptions with helpful error messages and suggestions.
All evocore-specific exceptions inherit from EvoCoreError for easy catching.

Example:
    try:
        fn = ShiftedRotatedAckley(dimension=7, bias=-140.0)
    except EvoCoreError as e:
        print(f"Benchmark setup failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class EvoCoreError(Exception):
    """
    Base exception for all evocore errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EvoCoreError):
    """Raised when configuration is invalid or incomplete."""

    pass


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" when building {config_class}"
        super().__init__(message, suggestion, {"field": field})


class BoundsError(ConfigurationError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure lower <= upper for all variables and bounds have correct shape"
        super().__init__(message, suggestion)


# =============================================================================
# Problem Errors
# =============================================================================


class ProblemError(EvoCoreError):
    """Base class for problem-related errors."""

    pass


class DimensionMismatchError(ProblemError, ValueError):
    """Raised when a decision vector does not match the benchmark dimension."""

    def __init__(self, expected: int, received: int) -> None:
        message = f"Decision vector has {received} variables but the function was built for {expected}."
        suggestion = "Build the benchmark with the dimension used by your solutions"
        super().__init__(message, suggestion, {"expected": expected, "received": received})


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(EvoCoreError):
    """Raised when a variation or evaluation step fails during execution."""

    pass


class DecayUndefinedError(OptimizationError):
    """Raised when the non-uniform decay factor cannot be computed."""

    def __init__(self, current_iteration: int, max_iterations: int, reason: str) -> None:
        message = f"Non-uniform decay undefined at iteration {current_iteration} of {max_iterations}: {reason}."
        suggestion = "Set max_iterations > 0 and keep 0 <= current_iteration <= max_iterations"
        super().__init__(
            message,
            suggestion,
            {"current_iteration": current_iteration, "max_iterations": max_iterations},
        )


# =============================================================================
# Data/IO Errors
# =============================================================================


class DataError(EvoCoreError):
    """Base class for data-related errors."""

    pass


class ResourceLoadError(DataError):
    """Raised when a benchmark data file is malformed or too short."""

    def __init__(self, message: str, path: str | None = None, suggestion: str | None = None) -> None:
        suggestion = suggestion or "Check that the file holds whitespace-separated real numbers in the expected amount"
        super().__init__(message, suggestion, {"path": path})


class ResourceNotFoundError(ResourceLoadError):
    """Raised when a benchmark data file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Benchmark data not found at '{path}'.",
            path,
            "Packaged rotation matrices exist for dimensions 2, 10, 30 and 50; pass explicit files otherwise",
        )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "EvoCoreError",
    # Configuration
    "ConfigurationError",
    "MissingConfigError",
    "BoundsError",
    # Problem
    "ProblemError",
    "DimensionMismatchError",
    # Runtime
    "OptimizationError",
    "DecayUndefinedError",
    # Data/IO
    "DataError",
    "ResourceLoadError",
    "ResourceNotFoundError",
]
