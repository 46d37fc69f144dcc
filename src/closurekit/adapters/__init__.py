"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the library to configuration
files, logging, and the command line.

Contents:
    * :mod:`.config` - Configuration loading, typed settings, and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
