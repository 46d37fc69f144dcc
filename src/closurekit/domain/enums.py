"""Type-safe domain enums for output formats and named fold combiners."""

from __future__ import annotations

import operator
from collections.abc import Callable
from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


_COMBINER_FUNCTIONS: dict[str, Callable[[int, int], int]] = {
    "add": operator.add,
    "multiply": operator.mul,
    "subtract": operator.sub,
    "max": max,
    "min": min,
}


class Combiner(str, Enum):
    """Named binary operations that can drive a fold.

    Operators are plain functions taking two integers and returning one,
    so each member maps directly onto a callable accepted by
    :func:`closurekit.domain.reducers.fold`.

    Attributes:
        ADD: ``a + b``.
        MULTIPLY: ``a * b``.
        SUBTRACT: ``a - b``.
        MAX: larger of the two.
        MIN: smaller of the two.

    Example:
        >>> Combiner.ADD.function(10, 20)
        30
        >>> Combiner("multiply").function(10, 20)
        200
        >>> Combiner.MAX == "max"
        True
    """

    ADD = "add"
    MULTIPLY = "multiply"
    SUBTRACT = "subtract"
    MAX = "max"
    MIN = "min"

    @property
    def function(self) -> Callable[[int, int], int]:
        """Return the binary callable for this combiner."""
        return _COMBINER_FUNCTIONS[self.value]


__all__ = [
    "Combiner",
    "OutputFormat",
]
