"""Public package surface: folds, stateful generators, config, and metadata.

Routes imports through the architectural layers:
- Domain exports: fold helpers, generator factories, error types
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.enums import Combiner
from .domain.errors import ConfigurationError, EmptySequenceError, UnsatisfiableConstraintError
from .domain.generators import (
    CallCounter,
    DistinctRandomGenerator,
    RandomGenerator,
    ValueRange,
    make_counter,
    make_generator,
    make_random_generator,
)
from .domain.reducers import fold, fold_from

__all__ = [
    "CallCounter",
    "Combiner",
    "ConfigurationError",
    "DistinctRandomGenerator",
    "EmptySequenceError",
    "RandomGenerator",
    "UnsatisfiableConstraintError",
    "ValueRange",
    "fold",
    "fold_from",
    "get_config",
    "make_counter",
    "make_generator",
    "make_random_generator",
    "print_info",
]
