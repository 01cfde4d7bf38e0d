"""
Platform specific helpers for shescape.

A platform knows which shells it supports, what its default shell is, and how
to get from a shell specifier (name or path) to a Shell. Windows-like systems
include Cygwin and MSYS, detected through the OSTYPE environment variable.
"""

from __future__ import annotations

import ntpath
import posixpath
from collections.abc import Mapping
from types import ModuleType

from shescape.core.config import log_event
from shescape.core.executables import ExecutableResolver
from shescape.shells import Shell, ShellRules, get_rules

# OSTYPE values of Unix-like environments running on Windows
CYGWIN = "cygwin"
MSYS = "msys"

WIN32 = "win32"


class Platform:
    """Shell related helpers for a family of operating systems."""

    name: str
    shells: tuple[Shell, ...]
    fallback: Shell
    path: ModuleType

    def get_default_shell(self, env: Mapping[str, str]) -> str:
        """Get the shell used when none is specified."""
        raise NotImplementedError

    def get_basename(self, full_path: str) -> str:
        """Get the basename of a path using this platform's path rules."""
        return self.path.basename(full_path)

    def get_rules(self, shell_name: str) -> ShellRules | None:
        """Get the rules for a shell binary name, or None if unsupported."""
        name = shell_name.lower()
        for shell in self.shells:
            if shell.value == name:
                return get_rules(shell)
        return None

    def get_shell_name(self, shell: str, resolver: ExecutableResolver) -> Shell:
        """Determine the Shell identified by a file path or file name.

        Never fails, shells that can't be resolved or aren't supported on
        this platform give the platform's fallback shell.
        """
        location = resolver.resolve(shell)
        rules = self.get_rules(self.get_basename(location))
        if rules is None:
            log_event(
                "debug",
                "shell_fallback",
                platform=self.name,
                shell=shell,
                resolved=location,
                fallback=self.fallback.value,
            )
            return self.fallback

        return rules.shell

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class UnixPlatform(Platform):
    """Helpers for Unix systems."""

    name = "unix"
    shells = (Shell.BASH, Shell.CSH, Shell.DASH, Shell.ZSH)
    fallback = Shell.BASH
    path = posixpath

    def get_default_shell(self, env: Mapping[str, str]) -> str:
        return "/bin/sh"


class WindowsPlatform(Platform):
    """Helpers for Windows systems."""

    name = "win32"
    shells = (Shell.CMD, Shell.POWERSHELL)
    fallback = Shell.CMD
    path = ntpath

    def get_default_shell(self, env: Mapping[str, str]) -> str:
        """Get %COMSPEC%, falling back to cmd.exe.

        Windows environment variable names are case-insensitive.
        """
        if "ComSpec" in env:
            return env["ComSpec"]
        for key, value in env.items():
            if key.upper() == "COMSPEC":
                return value
        return Shell.CMD.value


UNIX = UnixPlatform()
WINDOWS = WindowsPlatform()


def is_windows(env: Mapping[str, str], platform: str) -> bool:
    """Check if the system is (or emulates a Unix system on) Windows."""
    return env.get("OSTYPE") in (CYGWIN, MSYS) or platform == WIN32


def get_helpers_by_platform(env: Mapping[str, str], platform: str) -> Platform:
    """Get the helpers for the system described by env and platform."""
    if is_windows(env, platform):
        return WINDOWS

    return UNIX
