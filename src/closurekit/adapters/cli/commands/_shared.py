"""Shared helpers for CLI command modules.

Contents:
    * :func:`require_fold_settings` - Parse ``[fold]`` or exit with CONFIG_ERROR.
    * :func:`require_generator_settings` - Parse ``[generator]`` or exit with CONFIG_ERROR.
    * :func:`fail_with` - Report an error on stderr and exit with a code.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import rich_click as click

from closurekit.adapters.config.settings import (
    FoldSettings,
    GeneratorSettings,
    load_fold_settings,
    load_generator_settings,
)
from closurekit.domain.errors import ConfigurationError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def fail_with(exc: Exception, code: ExitCode) -> NoReturn:
    """Echo ``exc`` to stderr and raise ``SystemExit(code)`` chained to it."""
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(code) from exc


def require_fold_settings(cli_ctx: CLIContext) -> FoldSettings:
    """Return the ``[fold]`` settings of the active configuration.

    Raises:
        SystemExit: With :attr:`ExitCode.CONFIG_ERROR` if the section is invalid.
    """
    try:
        return load_fold_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid fold configuration", extra={"error": str(exc)})
        fail_with(exc, ExitCode.CONFIG_ERROR)


def require_generator_settings(cli_ctx: CLIContext) -> GeneratorSettings:
    """Return the ``[generator]`` settings of the active configuration.

    Raises:
        SystemExit: With :attr:`ExitCode.CONFIG_ERROR` if the section is invalid.
    """
    try:
        return load_generator_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        logger.error("Invalid generator configuration", extra={"error": str(exc)})
        fail_with(exc, ExitCode.CONFIG_ERROR)


__all__ = [
    "fail_with",
    "require_fold_settings",
    "require_generator_settings",
]
