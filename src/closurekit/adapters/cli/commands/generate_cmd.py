"""Generator commands: sample stateful generators and counters.

Contents:
    * :func:`cli_generate` - Print values from a (distinct) random generator.
    * :func:`cli_count` - Print successive values from a call counter.
"""

from __future__ import annotations

import logging
import random

import lib_log_rich.runtime
import rich_click as click

from closurekit.domain.errors import UnsatisfiableConstraintError
from closurekit.domain.generators import ValueRange, make_counter, make_generator, make_random_generator

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail_with, require_generator_settings

logger = logging.getLogger(__name__)


@click.command("generate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--count", "-n", type=click.IntRange(min=0), default=5, show_default=True, help="Values to print")
@click.option("--low", type=int, default=None, help="Inclusive lower bound (default: generator.low)")
@click.option("--high", type=int, default=None, help="Inclusive upper bound (default: generator.high)")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output (default: generator.seed)")
@click.option(
    "--allow-repeats",
    is_flag=True,
    default=False,
    help="Drop the rule that a value never equals the one before it",
)
@click.pass_context
def cli_generate(
    ctx: click.Context,
    count: int,
    low: int | None,
    high: int | None,
    seed: int | None,
    allow_repeats: bool,
) -> None:
    """Print COUNT random integers, one per line.

    By default no value equals the one printed right before it; a range
    holding a single value then exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    settings = require_generator_settings(cli_ctx)
    effective_seed = seed if seed is not None else settings.seed

    try:
        value_range = ValueRange(
            low if low is not None else settings.low,
            high if high is not None else settings.high,
        )
    except ValueError as exc:
        fail_with(exc, ExitCode.INVALID_ARGUMENT)

    source = random.Random(effective_seed)
    factory = make_random_generator if allow_repeats else make_generator
    generator = factory(value_range, source=source)

    extra = {"command": "generate", "range": str(value_range), "distinct": not allow_repeats}
    with lib_log_rich.runtime.bind(job_id="cli-generate", extra=extra):
        logger.info("Generating values", extra={"count": count, "seeded": effective_seed is not None})
        try:
            for _ in range(count):
                click.echo(generator())
        except UnsatisfiableConstraintError as exc:
            logger.warning("Distinct generator over a single-value range", extra={"range": str(value_range)})
            fail_with(exc, ExitCode.INVALID_ARGUMENT)


@click.command("count", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--count", "-n", type=click.IntRange(min=0), default=5, show_default=True, help="Values to print")
@click.option("--start", type=int, default=1, show_default=True, help="First value")
@click.option("--step", type=int, default=1, show_default=True, help="Increment per call (non-zero)")
def cli_count(count: int, start: int, step: int) -> None:
    """Print COUNT successive values of a call counter, one per line."""
    try:
        counter = make_counter(start=start, step=step)
    except ValueError as exc:
        fail_with(exc, ExitCode.INVALID_ARGUMENT)

    with lib_log_rich.runtime.bind(job_id="cli-count", extra={"command": "count", "step": step}):
        logger.info("Counting", extra={"count": count, "start": start})
        for _ in range(count):
            click.echo(counter())


__all__ = ["cli_count", "cli_generate"]
