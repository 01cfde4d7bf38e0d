"""
Escaping engine for shescape.

Combines stringification, shell resolution and rule lookup. Nothing in here
reads the environment itself: env and the platform helpers are passed in.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from shescape.core.config import Options
from shescape.core.errors import InvalidArgumentKind
from shescape.core.executables import ExecutableResolver, SystemExecutableResolver
from shescape.core.platforms import Platform
from shescape.shells import Shell, get_rules

_RESOLVER = SystemExecutableResolver()


@dataclass(frozen=True)
class ParsedOptions:
    interpolation: bool
    shell_name: Shell


def stringify(value: Any) -> str:
    """Convert a value into a string for escaping.

    Raises:
        InvalidArgumentKind: If value is None, bytes-like, or its __str__
            does not return a string.
    """
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidArgumentKind(value)

    try:
        return str(value)
    except TypeError as e:
        raise InvalidArgumentKind(value) from e


def parse_options(
    options: Options,
    env: Mapping[str, str],
    helpers: Platform,
    resolver: ExecutableResolver | None = None,
) -> ParsedOptions:
    """Resolve the shell to escape for and normalize the interpolation flag."""
    shell = options.shell
    if not isinstance(shell, str):
        shell = helpers.get_default_shell(env)

    shell_name = helpers.get_shell_name(shell, resolver or _RESOLVER)
    return ParsedOptions(bool(options.interpolation), shell_name)


def _escape(arg: Any, interpolation: bool, quoted: bool, shell_name: Shell) -> str:
    arg_as_string = stringify(arg)
    escape = get_rules(shell_name).escape
    return escape(arg_as_string, interpolation=interpolation, quoted=quoted)


def _quote(arg: Any, shell_name: Shell) -> str:
    escaped = _escape(arg, interpolation=False, quoted=True, shell_name=shell_name)
    return get_rules(shell_name).quote(escaped)


def escape_shell_arg(
    arg: Any,
    options: Options,
    env: Mapping[str, str],
    helpers: Platform,
    resolver: ExecutableResolver | None = None,
) -> str:
    """Escape an argument for the shell selected by options.

    Raises:
        InvalidArgumentKind: The argument can't be converted into a string.
    """
    parsed = parse_options(options, env, helpers, resolver)
    return _escape(arg, parsed.interpolation, False, parsed.shell_name)


def quote_shell_arg(
    arg: Any,
    options: Options,
    env: Mapping[str, str],
    helpers: Platform,
    resolver: ExecutableResolver | None = None,
) -> str:
    """Escape and quote an argument for the shell selected by options.

    The interpolation option is ignored, quoting needs its own escaping.

    Raises:
        InvalidArgumentKind: The argument can't be converted into a string.
    """
    parsed = parse_options(options, env, helpers, resolver)
    return _quote(arg, parsed.shell_name)


def to_list_if_necessary(value: Any) -> list[Any]:
    """Wrap anything that isn't a list or tuple in a one element list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
