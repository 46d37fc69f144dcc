"""Typed settings for the ``[generator]`` and ``[fold]`` config sections.

Pydantic models validate the raw dictionaries produced by
lib_layered_config once, at the boundary, and hand domain objects
(:class:`ValueRange`, :class:`Combiner`) to the rest of the application.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from closurekit.domain.enums import Combiner
from closurekit.domain.errors import ConfigurationError
from closurekit.domain.generators import ValueRange


class GeneratorSettings(BaseModel):
    """Validated, immutable ``[generator]`` settings.

    Example:
        >>> settings = GeneratorSettings(low=2, high=9)
        >>> settings.value_range
        ValueRange(low=2, high=9)
        >>> GeneratorSettings().seed is None
        True
    """

    model_config = ConfigDict(frozen=True)

    low: int = 1
    high: int = 3
    seed: int | None = None

    @field_validator("seed", mode="before")
    @classmethod
    def _coerce_empty_seed_to_none(cls, v: Any) -> Any:
        """Treat an empty string from env/.env files as "no seed".

        Examples:
            >>> GeneratorSettings._coerce_empty_seed_to_none("")
            >>> GeneratorSettings._coerce_empty_seed_to_none(7)
            7
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _validate_bounds(self) -> GeneratorSettings:
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self

    @property
    def value_range(self) -> ValueRange:
        return ValueRange(self.low, self.high)


class FoldSettings(BaseModel):
    """Validated, immutable ``[fold]`` settings.

    Example:
        >>> FoldSettings(combiner="multiply").combiner
        <Combiner.MULTIPLY: 'multiply'>
    """

    model_config = ConfigDict(frozen=True)

    combiner: Combiner = Combiner.ADD

    @field_validator("combiner", mode="before")
    @classmethod
    def _normalise_case(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


def _section(config_dict: Mapping[str, Any], name: str) -> dict[str, Any]:
    raw: object = config_dict.get(name, {})
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return dict(cast("Mapping[str, Any]", raw))


def load_generator_settings(config_dict: Mapping[str, Any]) -> GeneratorSettings:
    """Build :class:`GeneratorSettings` from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
            Missing ``[generator]`` keys fall back to the model defaults.

    Raises:
        ConfigurationError: If the section holds invalid values.

    Example:
        >>> load_generator_settings({"generator": {"low": 4, "high": 6}}).value_range
        ValueRange(low=4, high=6)
        >>> load_generator_settings({}).value_range
        ValueRange(low=1, high=3)
    """
    try:
        return GeneratorSettings.model_validate(_section(config_dict, "generator"))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [generator] configuration: {exc}") from exc


def load_fold_settings(config_dict: Mapping[str, Any]) -> FoldSettings:
    """Build :class:`FoldSettings` from a configuration dictionary.

    Raises:
        ConfigurationError: If ``fold.combiner`` names an unknown combiner.
    """
    try:
        return FoldSettings.model_validate(_section(config_dict, "fold"))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [fold] configuration: {exc}") from exc


__all__ = [
    "FoldSettings",
    "GeneratorSettings",
    "load_fold_settings",
    "load_generator_settings",
]
