"""
shescape - Escape shell arguments.

Escapes and quotes user-controlled input for bash, csh, dash, zsh, cmd.exe
and PowerShell so it can't be interpreted as shell syntax.
"""

from __future__ import annotations

__version__ = "0.1.0"

from shescape.core.errors import ConfigurationError, InvalidArgumentKind
from shescape.shells import Shell
from shescape.shescape import escape, escape_all, quote, quote_all

__all__ = [
    "ConfigurationError",
    "InvalidArgumentKind",
    "Shell",
    "escape",
    "escape_all",
    "quote",
    "quote_all",
    "__version__",
]
