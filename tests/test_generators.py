"""Generator stories: owned state, independence, and the no-repeat rule."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from typing import Any

import pytest

from closurekit.domain.errors import UnsatisfiableConstraintError
from closurekit.domain.generators import (
    DEFAULT_RANDOM_RANGE,
    DEFAULT_RANGE,
    CallCounter,
    DistinctRandomGenerator,
    RandomGenerator,
    ValueRange,
    make_counter,
    make_generator,
    make_random_generator,
)

ScriptedFactory = Callable[[Sequence[int]], Any]


# ======================== ValueRange ========================


@pytest.mark.os_agnostic
def test_value_range_reports_its_size() -> None:
    """1..3 holds three integers."""
    assert ValueRange(1, 3).size == 3


@pytest.mark.os_agnostic
def test_value_range_contains_its_bounds() -> None:
    """Both bounds are inclusive."""
    value_range = ValueRange(1, 3)

    assert 1 in value_range
    assert 3 in value_range
    assert 0 not in value_range
    assert 4 not in value_range


@pytest.mark.os_agnostic
def test_value_range_rejects_inverted_bounds() -> None:
    """low > high is refused at construction."""
    with pytest.raises(ValueError, match="exceeds"):
        ValueRange(5, 2)


@pytest.mark.os_agnostic
def test_value_range_renders_as_dotted_pair() -> None:
    """str() gives the compact low..high form used in messages."""
    assert str(ValueRange(-2, 7)) == "-2..7"


@pytest.mark.os_agnostic
def test_default_range_is_one_to_three() -> None:
    """Generators draw from 1..3 unless told otherwise."""
    assert DEFAULT_RANGE == ValueRange(1, 3)


# ======================== distinct generator ========================


@pytest.mark.os_agnostic
def test_make_generator_returns_distinct_generator() -> None:
    """The factory hands back the no-repeat generator type."""
    assert isinstance(make_generator(), DistinctRandomGenerator)


@pytest.mark.os_agnostic
def test_generator_never_repeats_previous_value_over_long_run() -> None:
    """No two consecutive outputs are equal across a thousand calls."""
    generator = make_generator(source=random.Random(2024))

    values = [generator() for _ in range(1000)]

    assert all(earlier != later for earlier, later in zip(values, values[1:], strict=False))


@pytest.mark.os_agnostic
def test_generator_values_stay_within_range() -> None:
    """Every output lies inside the configured range."""
    value_range = ValueRange(10, 14)
    generator = make_generator(value_range, source=random.Random(3))

    assert all(generator() in value_range for _ in range(500))


@pytest.mark.os_agnostic
def test_generator_reaches_every_value_in_range() -> None:
    """Over many calls each allowed value appears."""
    generator = make_generator(ValueRange(1, 3), source=random.Random(11))

    seen = {generator() for _ in range(300)}

    assert seen == {1, 2, 3}


@pytest.mark.os_agnostic
def test_two_element_range_alternates() -> None:
    """With only two values the generator must flip every call."""
    generator = make_generator(ValueRange(0, 1), source=random.Random(5))

    first = generator()
    values = [first] + [generator() for _ in range(9)]

    expected = [first if index % 2 == 0 else 1 - first for index in range(10)]
    assert values == expected


@pytest.mark.os_agnostic
def test_first_call_draws_over_whole_range(scripted_source: ScriptedFactory) -> None:
    """Nothing is excluded before the first value exists."""
    source = scripted_source([3])
    generator = make_generator(ValueRange(1, 3), source=source)

    assert generator() == 3
    assert source.requests == [(1, 3)]


@pytest.mark.os_agnostic
def test_later_calls_draw_once_and_skip_previous(scripted_source: ScriptedFactory) -> None:
    """Each later call makes exactly one draw over size - 1 values, shifted past previous."""
    source = scripted_source([2, 1, 2, 2])
    generator = make_generator(ValueRange(1, 3), source=source)

    values = [generator(), generator(), generator(), generator()]

    # draws: 2 -> 2; 1 (< 2) -> 1; 2 (>= 1) -> 3; 2 (< 3) -> 2
    assert values == [2, 1, 3, 2]
    assert source.requests == [(1, 3), (1, 2), (1, 2), (1, 2)]


@pytest.mark.os_agnostic
def test_generator_remembers_previous_and_call_count() -> None:
    """State is observable through read-only properties."""
    generator = make_generator(source=random.Random(0))
    assert generator.previous is None
    assert generator.calls == 0

    value = generator()

    assert generator.previous == value
    assert generator.calls == 1


@pytest.mark.os_agnostic
def test_separate_generators_do_not_share_state(scripted_source: ScriptedFactory) -> None:
    """Calling one generator never changes what another remembers."""
    first = make_generator(ValueRange(1, 3), source=scripted_source([1, 1, 1]))
    second = make_generator(ValueRange(1, 3), source=scripted_source([1]))

    first()
    first()
    first()

    assert second.previous is None
    assert second.calls == 0
    # second's first call is unconstrained, so 1 is allowed even though first just produced 2 or 3
    assert second() == 1


@pytest.mark.os_agnostic
def test_interleaved_generators_each_keep_their_own_no_repeat_rule() -> None:
    """Interleaving calls does not mix up the previous values."""
    first = make_generator(source=random.Random(1))
    second = make_generator(source=random.Random(2))

    first_values: list[int] = []
    second_values: list[int] = []
    for _ in range(200):
        first_values.append(first())
        second_values.append(second())

    assert all(a != b for a, b in zip(first_values, first_values[1:], strict=False))
    assert all(a != b for a, b in zip(second_values, second_values[1:], strict=False))


@pytest.mark.os_agnostic
def test_single_value_range_is_accepted_at_creation() -> None:
    """Creating the generator succeeds; the constraint is only checked on use."""
    generator = make_generator(ValueRange(5, 5))

    assert generator.calls == 0


@pytest.mark.os_agnostic
def test_single_value_range_raises_on_first_call() -> None:
    """A range that cannot satisfy the rule fails instead of looping."""
    generator = make_generator(ValueRange(5, 5))

    with pytest.raises(UnsatisfiableConstraintError, match="single value"):
        generator()

    assert generator.calls == 0


@pytest.mark.os_agnostic
def test_unsatisfiable_constraint_error_is_a_value_error() -> None:
    """Callers catching ValueError also catch unsatisfiable ranges."""
    with pytest.raises(ValueError):
        make_generator(ValueRange(0, 0))()


@pytest.mark.os_agnostic
def test_seeded_generators_are_reproducible() -> None:
    """Equal seeds give equal sequences."""
    first = make_generator(source=random.Random(99))
    second = make_generator(source=random.Random(99))

    assert [first() for _ in range(20)] == [second() for _ in range(20)]


@pytest.mark.os_agnostic
def test_generator_repr_shows_range_and_previous(scripted_source: ScriptedFactory) -> None:
    """repr exposes the range and the remembered value."""
    generator = make_generator(ValueRange(1, 3), source=scripted_source([2]))
    generator()

    assert repr(generator) == "DistinctRandomGenerator(range=1..3, previous=2)"


# ======================== unconstrained generator ========================


@pytest.mark.os_agnostic
def test_make_random_generator_returns_plain_generator() -> None:
    """The unconstrained factory hands back a RandomGenerator."""
    assert isinstance(make_random_generator(), RandomGenerator)


@pytest.mark.os_agnostic
def test_make_random_generator_defaults_to_one_through_ten() -> None:
    """Without a range, the unconstrained factory draws from 1..10."""
    generator = make_random_generator()

    assert generator.value_range == DEFAULT_RANDOM_RANGE == ValueRange(1, 10)
    assert all(1 <= generator() <= 10 for _ in range(200))


@pytest.mark.os_agnostic
def test_random_generator_may_repeat(scripted_source: ScriptedFactory) -> None:
    """Without the rule, equal consecutive draws pass through unchanged."""
    generator = make_random_generator(ValueRange(1, 3), source=scripted_source([2, 2, 2]))

    assert [generator(), generator(), generator()] == [2, 2, 2]
    assert generator.calls == 3


@pytest.mark.os_agnostic
def test_random_generator_accepts_single_value_range() -> None:
    """A one-value range is fine when repeats are allowed."""
    generator = make_random_generator(ValueRange(7, 7))

    assert [generator() for _ in range(3)] == [7, 7, 7]


# ======================== counter ========================


@pytest.mark.os_agnostic
def test_counter_starts_at_one_and_increments() -> None:
    """The default counter yields 1, 2, 3 on successive calls."""
    counter = make_counter()

    assert [counter(), counter(), counter()] == [1, 2, 3]


@pytest.mark.os_agnostic
def test_counters_are_independent() -> None:
    """Each factory call owns a separate count."""
    first = make_counter()
    second = make_counter()

    first()
    first()

    assert second() == 1
    assert first() == 3


@pytest.mark.os_agnostic
def test_counter_honours_start_and_step() -> None:
    """Custom start and negative step count downwards."""
    counter = make_counter(start=10, step=-3)

    assert [counter(), counter(), counter()] == [10, 7, 4]


@pytest.mark.os_agnostic
def test_counter_peek_does_not_advance() -> None:
    """peek shows the next value without consuming it."""
    counter = CallCounter()

    assert counter.peek == 1
    assert counter.peek == 1
    assert counter() == 1
    assert counter.peek == 2


@pytest.mark.os_agnostic
def test_counter_rejects_zero_step() -> None:
    """A zero step would never count."""
    with pytest.raises(ValueError, match="non-zero"):
        make_counter(step=0)
