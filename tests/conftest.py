"""
Shared test fixtures for shescape tests.
"""

import pytest
import structlog

from shescape.core import config as config_module
from shescape.core.config import Options
from shescape.core.engine import escape_shell_arg, quote_shell_arg
from shescape.core.platforms import UNIX


class FakeResolver:
    """Resolves executables from a dict instead of PATH and the filesystem."""

    def __init__(self, locations: dict[str, str] | None = None):
        self.locations = locations or {}
        self.calls: list[str] = []

    def resolve(self, executable: str) -> str:
        self.calls.append(executable)
        return self.locations.get(executable, executable)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep the user's config and OSTYPE out of tests, reset logging after."""
    monkeypatch.setattr(config_module, "USER_CONFIG", tmp_path / "no-such-config.toml")
    monkeypatch.delenv(config_module.ENV_CONFIG, raising=False)
    monkeypatch.delenv("OSTYPE", raising=False)
    yield
    config_module.configure_logging(None)
    structlog.reset_defaults()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def escape_for():
    """Return an escape_shell_arg wrapper that never touches the filesystem."""

    def _escape(arg, shell=None, interpolation=False, helpers=UNIX, env=None, locations=None):
        return escape_shell_arg(
            arg,
            Options(interpolation=interpolation, shell=shell),
            env or {},
            helpers,
            FakeResolver(locations),
        )

    return _escape


@pytest.fixture
def quote_for():
    """Return a quote_shell_arg wrapper that never touches the filesystem."""

    def _quote(arg, shell=None, helpers=UNIX, env=None, locations=None):
        return quote_shell_arg(
            arg, Options(shell=shell), env or {}, helpers, FakeResolver(locations)
        )

    return _quote
