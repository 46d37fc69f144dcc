"""Fold command: reduce integers given on the command line.

Contents:
    * :func:`cli_fold` - Print the left fold of VALUES.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from closurekit.domain.enums import Combiner
from closurekit.domain.errors import EmptySequenceError
from closurekit.domain.reducers import fold, fold_from

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail_with, require_fold_settings

logger = logging.getLogger(__name__)


@click.command("fold", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("values", nargs=-1, type=int)
@click.option(
    "--combiner",
    type=click.Choice([c.value for c in Combiner], case_sensitive=False),
    default=None,
    help="Binary operation applied left to right (default: fold.combiner from config)",
)
@click.option(
    "--initial",
    type=int,
    default=None,
    help="Starting accumulator; makes an empty VALUES list valid",
)
@click.pass_context
def cli_fold(ctx: click.Context, values: tuple[int, ...], combiner: str | None, initial: int | None) -> None:
    r"""Reduce VALUES to a single integer with a left fold.

    \b
    Without --initial the first value seeds the accumulator and an empty
    VALUES list exits with code 22. Put negative numbers after ``--``:
        closurekit fold --combiner multiply -- -2 3 4
    """
    cli_ctx = get_cli_context(ctx)
    chosen = Combiner(combiner.lower()) if combiner else require_fold_settings(cli_ctx).combiner

    extra = {"command": "fold", "combiner": chosen.value, "seeded": initial is not None}
    with lib_log_rich.runtime.bind(job_id="cli-fold", extra=extra):
        logger.info("Folding values", extra={"count": len(values), "combiner": chosen.value})
        try:
            if initial is None:
                result = fold(values, chosen.function)
            else:
                result = fold_from(values, initial, chosen.function)
        except EmptySequenceError as exc:
            logger.warning("Refusing to fold an empty sequence")
            fail_with(exc, ExitCode.INVALID_ARGUMENT)
        click.echo(result)


__all__ = ["cli_fold"]
