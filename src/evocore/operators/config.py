"""Operator configuration."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Dict

from evocore.foundation.exceptions import ConfigurationError


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


# Parameter-bag keys accepted for each field, in lookup order.
_NON_UNIFORM_KEYS: Dict[str, tuple[str, ...]] = {
    "probability": ("probability",),
    "perturbation": ("perturbation",),
    "max_iterations": ("maxIterations", "max_iterations"),
}
_NON_UNIFORM_TYPES: Dict[str, type] = {"probability": float, "perturbation": float, "max_iterations": int}


@dataclass(frozen=True)
class NonUniformMutationConfig(_SerializableConfig):
    """
    Settings of the non-uniform mutation.

    ``symmetric_repair`` is off by default: a candidate that overshoots the upper
    bound is only pulled back when ``0 < perturbation < 1``. Turning it on makes
    the upper branch mirror the lower-bound repair.
    """

    probability: float = 0.0
    perturbation: float = 0.0
    max_iterations: int = 0
    symmetric_repair: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.probability <= 1.0:
            raise ConfigurationError(
                f"Mutation probability must lie in [0, 1], got {self.probability}.",
                suggestion="A common choice is 1 / n_var",
            )

    @classmethod
    def from_dict(cls, parameters: Mapping[str, Any]) -> "NonUniformMutationConfig":
        """
        Build a config from a parameter bag.

        Missing keys keep their defaults and unrecognised keys are ignored.
        """
        values: Dict[str, Any] = {}
        for field_name, keys in _NON_UNIFORM_KEYS.items():
            for key in keys:
                if parameters.get(key) is not None:
                    values[field_name] = parameters[key]
                    break
        for field_name, cast in _NON_UNIFORM_TYPES.items():
            if field_name not in values:
                continue
            try:
                values[field_name] = cast(values[field_name])
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"Parameter '{field_name}' must be {cast.__name__}, got {values[field_name]!r}.",
                    details={"field": field_name},
                ) from exc
        if parameters.get("symmetric_repair") is not None:
            values["symmetric_repair"] = bool(parameters["symmetric_repair"])
        return cls(**values)


__all__ = ["NonUniformMutationConfig"]
