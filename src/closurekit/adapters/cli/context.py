"""Click context helpers for CLI state management.

The root group stores the loaded configuration, with ``--set`` overrides
already merged, in a :class:`CLIContext`. Subcommands such as ``fold`` and
``generate`` read their ``[fold]`` and ``[generator]`` sections from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from closurekit.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Typed state shared by the root group with every subcommand.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Merged configuration with ``--set`` overrides applied.
        services: Port implementations from the composition root.
        profile: Active configuration profile, if any.
        set_overrides: Raw ``--set`` strings, kept for profile reloads.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` with a :class:`CLIContext`.

    Args:
        ctx: Click context of the current invocation.
        traceback: Whether verbose tracebacks were requested.
        config: Configuration holding the ``[generator]``, ``[fold]`` and
            ``[lib_log_rich]`` sections.
        services: Application services from the composition layer.
        profile: Optional configuration profile name.
        set_overrides: Raw ``--set`` strings, reapplied when ``config
            --profile`` reloads configuration for another profile.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from closurekit.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=Config({}, {}), services=build_testing())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Args:
        ctx: Click context of a subcommand.

    Returns:
        The typed CLI state.

    Raises:
        RuntimeError: If the root group has not stored a context.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> config = Config({"fold": {"combiner": "add"}}, {})
        >>> ctx.obj = CLIContext(traceback=False, config=config, services=MagicMock())
        >>> get_cli_context(ctx).config["fold"]["combiner"]
        'add'
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror the ``--traceback`` flag into ``lib_cli_exit_tools.config``.

    Args:
        enabled: ``True`` enables full tracebacks with colour.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for later restoration.

    Returns:
        Tuple of (traceback_enabled, force_color) booleans.

    Example:
        >>> state = snapshot_traceback_state()
        >>> isinstance(state, tuple) and len(state) == 2
        True
    """
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    Args:
        state: Tuple returned by :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(True)
        >>> restore_traceback_state(original)
        >>> lib_cli_exit_tools.config.traceback == original[0]
        True
    """
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
