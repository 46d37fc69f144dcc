"""Static package metadata surfaced to CLI commands and documentation.

Values here mirror ``[project]`` in ``pyproject.toml``; keep them in sync
when bumping the version.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used to derive configuration paths.
    * :func:`print_info` - metadata block printed by the ``info`` command.
"""

from __future__ import annotations

name = "closurekit"
title = "Left folds and stateful generator closures"
version = "1.0.0"
homepage = "https://github.com/closurekit/closurekit"
author = "closurekit contributors"
author_email = "maintainers@closurekit.dev"
shell_command = "closurekit"

#: Vendor, application, and slug identifiers for lib_layered_config path discovery.
LAYEREDCONF_VENDOR: str = "closurekit"
LAYEREDCONF_APP: str = "closurekit"
LAYEREDCONF_SLUG: str = "closurekit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for closurekit:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
