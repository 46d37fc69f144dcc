"""CLI command implementations.

Contents:
    * Metadata command from :mod:`.info`
    * Fold command from :mod:`.fold_cmd`
    * Generator and counter commands from :mod:`.generate_cmd`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .fold_cmd import cli_fold
from .generate_cmd import cli_count, cli_generate
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_count",
    "cli_fold",
    "cli_generate",
    "cli_info",
]
