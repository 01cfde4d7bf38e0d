"""
Per-shell escaping rules for shescape.

Each rule module exports:
- SHELL: Shell - the shell this module escapes for
- escape(arg, *, interpolation, quoted) -> str - escape an argument
- quote(arg) -> str - wrap an already escaped argument in the shell's quotes
"""

from __future__ import annotations

import importlib
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from shescape.core.errors import ConfigurationError


class Shell(str, Enum):
    """Shells with a known set of escaping rules, valued by binary name."""

    BASH = "bash"
    CSH = "csh"
    DASH = "dash"
    ZSH = "zsh"
    CMD = "cmd.exe"
    POWERSHELL = "powershell.exe"

    def __str__(self) -> str:
        return self.value


EscapeFunction = Callable[..., str]
QuoteFunction = Callable[[str], str]


class ShellModule(Protocol):
    """Protocol for shell rule modules."""

    SHELL: Shell

    def escape(self, arg: str, *, interpolation: bool, quoted: bool) -> str:
        """Escape arg for this shell.

        Args:
            arg: The argument to escape, already converted to a string.
            interpolation: The result is put on a command line unquoted.
            quoted: The result will be passed to quote().
        """
        ...

    def quote(self, arg: str) -> str:
        """Put the shell's string delimiters around an escaped argument."""
        ...


@dataclass(frozen=True)
class ShellRules:
    """The escape and quote functions for one shell."""

    shell: Shell
    escape: EscapeFunction
    quote: QuoteFunction


# Characters removed from every argument regardless of mode: NUL, backspace,
# ESC and CSI (the 8-bit variant of ESC [).
CONTROL_CHARACTERS = re.compile("[\0\u0008\u001b\u009b]")


def strip_control_characters(arg: str) -> str:
    return CONTROL_CHARACTERS.sub("", arg)


def quote_posix(arg: str) -> str:
    """Quote an argument for a Unix shell."""
    return f"'{arg}'"


def quote_windows(arg: str) -> str:
    """Quote an argument for a Windows shell."""
    return f'"{arg}"'


def _discover_rules() -> dict[Shell, ShellRules]:
    """Import every rule module and map its shell to its functions."""
    rules = {}
    shells_dir = Path(__file__).parent
    for file in sorted(shells_dir.glob("*.py")):
        if file.name.startswith("_"):
            continue
        module: ShellModule = importlib.import_module(
            f".{file.stem}", package="shescape.shells"
        )
        rules[module.SHELL] = ShellRules(module.SHELL, module.escape, module.quote)

    missing = [shell.value for shell in Shell if shell not in rules]
    if missing:
        raise ConfigurationError(f"no escaping rules for: {', '.join(missing)}")
    return rules


# Every Shell member is guaranteed to have an entry
RULES = MappingProxyType(_discover_rules())


def get_rules(shell: Shell) -> ShellRules:
    """Get the escaping rules for a shell."""
    return RULES[shell]
