"""Configuration adapter - loading, typed settings, display, and overrides.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - Pydantic models for ``[generator]`` and ``[fold]``
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import FoldSettings, GeneratorSettings, load_fold_settings, load_generator_settings

__all__ = [
    "get_config",
    "get_default_config_path",
    "display_config",
    "apply_overrides",
    "FoldSettings",
    "GeneratorSettings",
    "load_fold_settings",
    "load_generator_settings",
]
