"""
Tests for the public shescape API.
"""

import sys

import pytest

import shescape
from conftest import FakeResolver
from shescape import InvalidArgumentKind, escape, escape_all, quote, quote_all
from shescape.core import engine


@pytest.fixture
def windows(monkeypatch):
    """Pretend to run on Windows with the default cmd.exe."""
    monkeypatch.setattr(sys, "platform", "win32")
    # PATH lookups behave differently under a faked win32
    monkeypatch.setattr(engine, "_RESOLVER", FakeResolver())
    monkeypatch.setenv("ComSpec", "cmd.exe")


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


class TestScenarios:
    def test_escape_keeps_whitespace(self, linux):
        assert escape("hello world", shell="bash") == "hello world"

    def test_escape_interpolation(self, linux):
        assert escape("hello world", interpolation=True, shell="bash") == "hello\\ world"

    def test_quote_single_quote(self, linux):
        assert quote("it's", shell="bash") == "'it'\\''s'"

    def test_cmd_interpolation(self, windows):
        assert escape("a&b", interpolation=True, shell="cmd.exe") == "a^&b"

    def test_powershell_quote(self, windows):
        assert quote('say "hi"', shell="powershell.exe") == '"say ""hi"""'

    def test_nul_removed(self, linux):
        assert escape("path\0injected", shell="bash") == "pathinjected"


class TestDefaultShell:
    def test_unix_quote(self, linux):
        # Every Unix shell quotes the same way
        assert quote("it's") == "'it'\\''s'"

    @pytest.mark.parametrize("shell", [None, False, True])
    def test_unix_shell_option(self, linux, shell):
        assert escape("a b", shell=shell) == "a b"

    def test_windows_comspec(self, windows):
        assert escape("a&b", interpolation=True) == "a^&b"
        assert quote('"') == '""""'

    def test_msys_counts_as_windows(self, linux, monkeypatch):
        monkeypatch.setenv("OSTYPE", "msys")
        assert escape("a&b", interpolation=True, shell="cmd.exe") == "a^&b"


class TestFallback:
    @pytest.mark.parametrize("shell", ["/no/such/shell", "fish", "", "\\\\?\\garbage"])
    def test_unix(self, linux, shell):
        assert escape("{a}", interpolation=True, shell=shell) == "\\{a}"

    @pytest.mark.parametrize("shell", ["bash", "C:\\no\\such.exe", ""])
    def test_windows(self, windows, shell):
        assert escape("a b&c", interpolation=True, shell=shell) == "a b^&c"


class TestAll:
    ARGS = ["a b", "c;d", "it's", 42]

    @pytest.mark.parametrize("interpolation", [False, True])
    def test_escape_all_maps_escape(self, linux, interpolation):
        expected = [escape(arg, interpolation=interpolation, shell="bash") for arg in self.ARGS]
        assert escape_all(self.ARGS, interpolation=interpolation, shell="bash") == expected

    def test_quote_all_maps_quote(self, linux):
        expected = [quote(arg, shell="zsh") for arg in self.ARGS]
        assert quote_all(self.ARGS, shell="zsh") == expected

    def test_single_value(self, linux):
        assert escape_all("a b", interpolation=True, shell="bash") == ["a\\ b"]
        assert quote_all("a b", shell="bash") == ["'a b'"]

    def test_tuple(self, linux):
        assert quote_all(("a", "b"), shell="bash") == ["'a'", "'b'"]

    def test_empty(self, linux):
        assert escape_all([]) == []
        assert quote_all([]) == []

    def test_invalid_element(self, linux):
        with pytest.raises(InvalidArgumentKind):
            escape_all(["a", None], shell="bash")
        with pytest.raises(InvalidArgumentKind):
            quote_all(["a", b"b"], shell="bash")


@pytest.mark.parametrize("fn", [escape, quote])
def test_invalid_argument(linux, fn):
    with pytest.raises(InvalidArgumentKind):
        fn(None)


def test_exports():
    assert shescape.Shell.BASH.value == "bash"
    assert isinstance(shescape.__version__, str)
    assert issubclass(shescape.ConfigurationError, RuntimeError)
