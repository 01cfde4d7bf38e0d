"""Tests for executable resolution."""

import os
import sys

import pytest

from shescape.core.errors import ConfigurationError
from shescape.core.executables import SystemExecutableResolver, resolve_executable


def not_a_link(path):
    raise OSError(22, "Invalid argument", path)


def resolve(executable, exists=lambda p: True, readlink=not_a_link, which=lambda e: f"/usr/bin/{e}"):
    return resolve_executable(executable, exists=exists, readlink=readlink, which=which)


class TestResolveExecutable:
    def test_found_and_not_a_link(self):
        assert resolve("bash") == "/usr/bin/bash"

    def test_follows_symlink(self):
        assert resolve("sh", readlink=lambda p: "dash") == "dash"

    def test_not_on_path(self):
        assert resolve("fish", which=lambda e: None) == "fish"

    def test_lookup_raises(self):
        def which(executable):
            raise OSError("lookup failed")

        assert resolve("fish", which=which) == "fish"

    def test_location_does_not_exist(self):
        calls = []

        def readlink(path):
            calls.append(path)
            return "never"

        assert resolve("bash", exists=lambda p: False, readlink=readlink) == "/usr/bin/bash"
        assert calls == []

    def test_follows_only_one_link(self):
        links = {"/usr/bin/sh": "/etc/alternatives/sh", "/etc/alternatives/sh": "/usr/bin/dash"}
        assert resolve("sh", readlink=links.__getitem__) == "/etc/alternatives/sh"

    @pytest.mark.parametrize("missing", ["exists", "readlink", "which"])
    def test_missing_dependency(self, missing):
        deps = {"exists": lambda p: True, "readlink": not_a_link, "which": lambda e: e}
        deps[missing] = None
        with pytest.raises(ConfigurationError):
            resolve_executable("bash", **deps)


class TestSystemExecutableResolver:
    def test_unknown_executable(self):
        resolver = SystemExecutableResolver()
        assert resolver.resolve("definitely-not-a-shell-7f3a") == "definitely-not-a-shell-7f3a"

    def test_path_without_file(self, tmp_path):
        missing = str(tmp_path / "missing" / "zsh")
        assert SystemExecutableResolver().resolve(missing) == missing

    @pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX symlinks")
    def test_symlink(self, tmp_path):
        target = tmp_path / "dash"
        target.write_text("#!/bin/sh\n")
        target.chmod(0o755)
        link = tmp_path / "sh"
        link.symlink_to(target)

        assert SystemExecutableResolver().resolve(str(link)) == str(target)

    @pytest.mark.skipif(sys.platform == "win32", reason="needs POSIX permissions")
    def test_regular_file(self, tmp_path):
        executable = tmp_path / "bash"
        executable.write_text("#!/bin/sh\n")
        executable.chmod(0o755)

        assert SystemExecutableResolver().resolve(str(executable)) == str(executable)

    def test_uses_injected_functions(self):
        resolver = SystemExecutableResolver(
            exists=lambda p: True,
            readlink=lambda p: "/bin/zsh",
            which=lambda e: os.path.join("/usr/local/bin", e),
        )
        assert resolver.resolve("sh") == "/bin/zsh"
