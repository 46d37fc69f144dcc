"""Stateful zero-argument callables that remember what they produced.

Each factory call returns a fresh callable owning a small state record.
The state is private to that instance; two factory calls never share it,
and it lives exactly as long as the returned callable is referenced.

Contents:
    * :class:`ValueRange` - inclusive integer range.
    * :class:`GeneratorState` - owned state of one generator.
    * :class:`DistinctRandomGenerator` / :func:`make_generator` - random
      values that never repeat the previous one.
    * :class:`RandomGenerator` / :func:`make_random_generator` - plain
      random values from a range.
    * :class:`CallCounter` / :func:`make_counter` - successive counts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from .errors import UnsatisfiableConstraintError


class RandomSource(Protocol):
    """Anything that can draw an integer from an inclusive range.

    ``random.Random`` satisfies this structurally; tests pass scripted
    sources to make draws deterministic.
    """

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive integer range ``low..high``.

    Example:
        >>> ValueRange(1, 3).size
        3
        >>> ValueRange(5, 5).size
        1
        >>> 4 in ValueRange(1, 3)
        False
        >>> ValueRange(3, 1)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: range low 3 exceeds high 1
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"range low {self.low} exceeds high {self.high}")

    @property
    def size(self) -> int:
        """Number of integers in the range."""
        return self.high - self.low + 1

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high

    def __str__(self) -> str:
        return f"{self.low}..{self.high}"


DEFAULT_RANGE = ValueRange(1, 3)
DEFAULT_RANDOM_RANGE = ValueRange(1, 10)


@dataclass(slots=True)
class GeneratorState:
    """Mutable state owned by exactly one generator instance."""

    previous: int | None = None
    calls: int = 0


class DistinctRandomGenerator:
    """Random integers that never equal the immediately preceding value.

    Every call draws exactly once: after the first value, the draw is made
    over the ``size - 1`` allowed values and shifted past ``previous``, so
    the result is uniform over the range minus the previous value and the
    call never loops.

    Example:
        >>> generator = DistinctRandomGenerator(ValueRange(1, 2), source=random.Random(7))
        >>> first = generator()
        >>> second = generator()
        >>> first != second
        True
    """

    __slots__ = ("_range", "_source", "_state")

    def __init__(self, value_range: ValueRange, *, source: RandomSource | None = None) -> None:
        self._range = value_range
        self._source: RandomSource = source if source is not None else random.Random()
        self._state = GeneratorState()

    @property
    def value_range(self) -> ValueRange:
        return self._range

    @property
    def previous(self) -> int | None:
        """Last value produced, or ``None`` before the first call."""
        return self._state.previous

    @property
    def calls(self) -> int:
        """Number of values produced so far."""
        return self._state.calls

    def __call__(self) -> int:
        """Produce the next value and remember it.

        Raises:
            UnsatisfiableConstraintError: If the range holds a single value.
        """
        low, high = self._range.low, self._range.high
        if self._range.size < 2:
            raise UnsatisfiableConstraintError(
                f"range {self._range} has a single value; cannot differ from the previous one"
            )
        previous = self._state.previous
        if previous is None:
            value = self._source.randint(low, high)
        else:
            value = self._source.randint(low, high - 1)
            if value >= previous:
                value += 1
        self._state.previous = value
        self._state.calls += 1
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(range={self._range}, previous={self._state.previous!r})"


class RandomGenerator:
    """Random integers from a range with no memory constraint.

    Example:
        >>> generator = RandomGenerator(ValueRange(4, 4))
        >>> generator(), generator()
        (4, 4)
    """

    __slots__ = ("_range", "_source", "_state")

    def __init__(self, value_range: ValueRange, *, source: RandomSource | None = None) -> None:
        self._range = value_range
        self._source: RandomSource = source if source is not None else random.Random()
        self._state = GeneratorState()

    @property
    def value_range(self) -> ValueRange:
        return self._range

    @property
    def calls(self) -> int:
        return self._state.calls

    def __call__(self) -> int:
        value = self._source.randint(self._range.low, self._range.high)
        self._state.previous = value
        self._state.calls += 1
        return value


class CallCounter:
    """Callable returning successive counts, starting at ``start``.

    Example:
        >>> counter = CallCounter()
        >>> counter(), counter(), counter()
        (1, 2, 3)
        >>> CallCounter(start=10, step=-5)()
        10
    """

    __slots__ = ("_next", "_step")

    def __init__(self, start: int = 1, step: int = 1) -> None:
        if step == 0:
            raise ValueError("counter step must be non-zero")
        self._next = start
        self._step = step

    @property
    def peek(self) -> int:
        """Value the next call will return."""
        return self._next

    def __call__(self) -> int:
        current = self._next
        self._next += self._step
        return current


def make_generator(
    value_range: ValueRange = DEFAULT_RANGE,
    *,
    source: RandomSource | None = None,
) -> DistinctRandomGenerator:
    """Return a new generator that never repeats its previous value.

    Args:
        value_range: Inclusive range to draw from. Defaults to ``1..3``.
        source: Optional random source. Each generator gets its own
            ``random.Random`` when omitted.

    Returns:
        A fresh :class:`DistinctRandomGenerator`. A single-value range is
        accepted here; the first call raises
        :class:`~closurekit.domain.errors.UnsatisfiableConstraintError`.

    Example:
        >>> generator = make_generator(ValueRange(1, 3), source=random.Random(1))
        >>> values = [generator() for _ in range(10)]
        >>> all(a != b for a, b in zip(values, values[1:]))
        True
    """
    return DistinctRandomGenerator(value_range, source=source)


def make_random_generator(
    value_range: ValueRange = DEFAULT_RANDOM_RANGE,
    *,
    source: RandomSource | None = None,
) -> RandomGenerator:
    """Return a new generator drawing freely from ``value_range`` (default ``1..10``)."""
    return RandomGenerator(value_range, source=source)


def make_counter(start: int = 1, step: int = 1) -> CallCounter:
    """Return a new counter whose first call yields ``start``."""
    return CallCounter(start=start, step=step)


__all__ = [
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
]
