"""Pure left-fold helpers with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .errors import EmptySequenceError

BinaryCombine = Callable[[int, int], int]
"""Signature of a fold step: ``(accumulator, next) -> accumulator``."""

_MISSING = object()


def fold(values: Iterable[int], combine: BinaryCombine) -> int:
    r"""Reduce ``values`` to a single integer with a strict left fold.

    The accumulator starts at the first element and is replaced by
    ``combine(accumulator, item)`` for every remaining element, in order.
    ``values`` is consumed exactly once and never mutated, so generators
    and other one-shot iterables are accepted.

    Args:
        values: Non-empty ordered integers.
        combine: Binary step function. Operators such as ``operator.add``
            satisfy the contract directly.

    Returns:
        The fully reduced value. A single-element input is returned
        unchanged and ``combine`` is never invoked.

    Raises:
        EmptySequenceError: If ``values`` yields no elements.

    Example:
        >>> import operator
        >>> fold([10, 20, 30], operator.add)
        60
        >>> fold([10, 20, 30], lambda running_total, next_value: running_total * next_value)
        6000
        >>> fold([7], operator.sub)
        7
        >>> fold([], operator.add)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        EmptySequenceError: cannot fold an empty sequence
    """
    iterator = iter(values)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        raise EmptySequenceError("cannot fold an empty sequence without an initial value")
    current: int = first  # type: ignore[assignment]
    for value in iterator:
        current = combine(current, value)
    return current


def fold_from(values: Iterable[int], initial: int, combine: BinaryCombine) -> int:
    """Reduce ``values`` starting from an explicit ``initial`` accumulator.

    Unlike :func:`fold`, an empty input is valid and yields ``initial``.

    Example:
        >>> import operator
        >>> fold_from([1, 2, 3], 100, operator.add)
        106
        >>> fold_from([], 42, operator.mul)
        42
    """
    current = initial
    for value in values:
        current = combine(current, value)
    return current


__all__ = [
    "BinaryCombine",
    "fold",
    "fold_from",
]
