"""CLI entry point and execution wrapper.

Runs the root group with the services factory as ``ctx.obj`` and maps every
outcome, Ctrl+C included, to an exit code.

Contents:
    * :func:`main` - Primary entry point for console scripts and ``python -m``.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime

from closurekit import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from closurekit.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and translate every outcome into an exit code.

    Args:
        argv: CLI arguments; ``None`` reads ``sys.argv``.
        services_factory: Returns the :class:`AppServices` for this run.
            Passed to the root group as ``ctx.obj``.

    Returns:
        ``0`` on success, the Click usage code for bad options,
        :attr:`ExitCode.SIGNAL_INT` when interrupted, and whatever
        ``lib_cli_exit_tools`` maps any other failure to.
    """
    import sys

    import click

    from .root import cli

    # lib_cli_exit_tools.run_cli cannot pass ``obj``; replicate it here.
    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.exceptions.Abort:
        # Click converts KeyboardInterrupt into Abort outside standalone mode.
        click.echo("Aborted!", err=True)
        return ExitCode.SIGNAL_INT
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit included: every other failure is formatted and mapped
        # by lib_cli_exit_tools.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Args:
        argv: CLI arguments; ``None`` reads ``sys.argv``.
        restore_traceback: Restore the prior traceback flags afterwards.
        services_factory: Returns the :class:`AppServices` to use. Callers
            outside the adapters layer pass ``build_production``.

    Returns:
        Exit code for the process; see :class:`ExitCode`.

    Raises:
        ValueError: If ``services_factory`` is not provided.

    Example:
        >>> from closurekit.composition import build_production
        >>> main(["fold", "10", "20", "30"], services_factory=build_production)  # doctest: +SKIP
        60
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Only the main thread may shut the logging runtime down.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
