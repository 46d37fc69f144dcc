"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains the fold helpers and the stateful generator callables that form
the core of the library.

Contents:
    * :mod:`.reducers` - Left folds (seeded and unseeded)
    * :mod:`.generators` - Generators and counters owning private state
    * :mod:`.enums` - Domain enumerations (OutputFormat, Combiner)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Combiner, OutputFormat
from .errors import ConfigurationError, EmptySequenceError, UnsatisfiableConstraintError
from .generators import (
    DEFAULT_RANDOM_RANGE,
    DEFAULT_RANGE,
    CallCounter,
    DistinctRandomGenerator,
    GeneratorState,
    RandomGenerator,
    RandomSource,
    ValueRange,
    make_counter,
    make_generator,
    make_random_generator,
)
from .reducers import BinaryCombine, fold, fold_from

__all__ = [
    # Reducers
    "BinaryCombine",
    "fold",
    "fold_from",
    # Generators
    "DEFAULT_RANDOM_RANGE",
    "DEFAULT_RANGE",
    "CallCounter",
    "DistinctRandomGenerator",
    "GeneratorState",
    "RandomGenerator",
    "RandomSource",
    "ValueRange",
    "make_counter",
    "make_generator",
    "make_random_generator",
    # Enums
    "Combiner",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "EmptySequenceError",
    "UnsatisfiableConstraintError",
]
