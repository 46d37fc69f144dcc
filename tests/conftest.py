"""Shared pytest fixtures for library, CLI, and module-entry tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator, Sequence
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from closurekit.composition import AppServices

_COVERAGE_BASENAME = ".coverage.closurekit"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete SQLite sidecar files left behind by a crashed coverage run."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before pytest-cov creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project ``.env`` when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


class ScriptedSource:
    """Random source replaying a fixed list of draws.

    Records every ``(a, b)`` bounds pair it was asked for so tests can
    assert how many draws a generator made and over which range.
    """

    def __init__(self, draws: Sequence[int]) -> None:
        self._draws = list(draws)
        self.requests: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.requests.append((a, b))
        value = self._draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside {a}..{b}"
        return value


@pytest.fixture
def scripted_source() -> Callable[[Sequence[int]], ScriptedSource]:
    """Return a factory for :class:`ScriptedSource` instances.

    Example:
        def test_first_draw(scripted_source) -> None:
            source = scripted_source([2, 1])
            generator = make_generator(ValueRange(1, 3), source=source)
            assert generator() == 2
    """
    return ScriptedSource


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output; log records go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config and logging)."""
    from closurekit.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test.

    Only clears before, since a test may monkeypatch ``get_config`` and lose
    its ``cache_clear`` attribute.
    """
    from closurekit.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory producing services whose ``get_config`` yields a fixed Config.

    Only the configuration I/O boundary is replaced; display and logging stay
    production adapters.
    """
    from closurekit.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def config_cli_context(
    inject_config: Callable[[Config], Callable[[], AppServices]],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory turning a config dict straight into a services factory.

    Example:
        def test_generate_uses_config(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"generator": {"low": 5, "high": 6}})
            result = cli_runner.invoke(cli, ["generate"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        return inject_config(Config(config_data, {}))

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose ``get_config`` records the profiles it was asked for."""
    from closurekit.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _inject
