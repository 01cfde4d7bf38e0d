"""
Escape and quote shell arguments, consistently across platforms.

Use it to put user-controlled input on a command line without it being
interpreted as shell syntax:

    subprocess.run(f"echo Hello {quote(user_input)}", shell=True)

Shells supported:
┌──────────────┬──────────────────────────────────────────────────────────────┐
│ Platform     │ Shells                                                       │
├──────────────┼──────────────────────────────────────────────────────────────┤
│ Unix         │ bash, csh, dash, zsh (anything else is escaped as bash)      │
│ Windows      │ cmd.exe, powershell.exe (anything else is escaped as cmd.exe)│
└──────────────┴──────────────────────────────────────────────────────────────┘

Cygwin and MSYS (OSTYPE=cygwin or OSTYPE=msys) count as Windows.

The shell is given by name or path through `shell`. Without it, the default
shell of the platform is used: /bin/sh on Unix, %COMSPEC% on Windows. Shells
are resolved through PATH and symbolic links, so /bin/sh linking to dash gets
dash's rules.

An unknown shell is escaped with the platform's fallback rules rather than
raising. Passing an attacker-controlled `shell` can therefore make shescape
escape for a different shell than the one that eventually runs the command.

Command line usage:
    shescape [--quote | --interpolation] [--shell SHELL] [--log PATH] ARG...
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from shescape import __version__
from shescape.core.config import (
    ConfigError,
    Options,
    configure_logging,
    load_config,
    log_event,
)
from shescape.core.engine import escape_shell_arg, quote_shell_arg, to_list_if_necessary
from shescape.core.platforms import Platform, get_helpers_by_platform


def get_platform_helpers() -> Platform:
    """Get the helpers for the platform this process runs on."""
    return get_helpers_by_platform(os.environ, sys.platform)


def escape(arg: Any, *, interpolation: bool = False, shell: bool | str | None = None) -> str:
    """Escape any dangerous characters in a single argument.

    Non-string arguments are converted with str(). With `interpolation`,
    whitespace is escaped too (except for cmd.exe, which can't) so the
    result can go on a command line without surrounding quotes.

    Raises:
        InvalidArgumentKind: The argument can't be converted into a string.
    """
    options = Options(interpolation=interpolation, shell=shell)
    return escape_shell_arg(arg, options, os.environ, get_platform_helpers())


def escape_all(
    args: Any, *, interpolation: bool = False, shell: bool | str | None = None
) -> list[str]:
    """Escape every argument in a list (a single value counts as one argument)."""
    return [
        escape(arg, interpolation=interpolation, shell=shell)
        for arg in to_list_if_necessary(args)
    ]


def quote(arg: Any, *, shell: bool | str | None = None) -> str:
    """Escape a single argument and put the platform's quotes around it.

    Raises:
        InvalidArgumentKind: The argument can't be converted into a string.
    """
    options = Options(shell=shell)
    return quote_shell_arg(arg, options, os.environ, get_platform_helpers())


def quote_all(args: Any, *, shell: bool | str | None = None) -> list[str]:
    """Escape and quote every argument in a list (a single value counts as one)."""
    return [quote(arg, shell=shell) for arg in to_list_if_necessary(args)]


# === Entry point ===


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shescape",
        description="Escape (or quote) arguments for use on a shell command line.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--quote", action="store_true", help="quote the arguments")
    mode.add_argument(
        "--interpolation",
        action="store_true",
        default=None,
        help="escape for use outside of quotes",
    )
    parser.add_argument("--shell", help="name or path of the shell (default: platform default)")
    parser.add_argument("--log", type=Path, help="append JSON logs to this file")
    parser.add_argument("--verbose", action="store_true", default=None, help="log debug events")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("args", nargs="+", metavar="ARG", help="argument to escape")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config = load_config(os.environ)
    except ConfigError as e:
        parser.error(str(e))

    shell = ns.shell if ns.shell is not None else config.shell
    interpolation = ns.interpolation if ns.interpolation is not None else config.interpolation
    verbose = ns.verbose if ns.verbose is not None else config.verbose
    configure_logging(ns.log or config.log, verbose=bool(verbose))

    if ns.quote:
        result = quote_all(ns.args, shell=shell)
        log_event("info", "quoted", shell=shell, count=len(result))
    else:
        result = escape_all(ns.args, interpolation=bool(interpolation), shell=shell)
        log_event(
            "info",
            "escaped",
            shell=shell,
            interpolation=bool(interpolation),
            count=len(result),
        )

    print(" ".join(result))
    return 0
