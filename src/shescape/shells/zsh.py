"""
Zsh escaping rules for shescape.

Zsh globs on `[...]` and expands `=cmd` at the start of a word into the path
of cmd, so both are escaped on top of what Bash needs.
"""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_posix, strip_control_characters

SHELL = Shell.ZSH

_LONE_CARRIAGE_RETURN = re.compile(r"\r(?!\n)")
_NEWLINE = re.compile(r"\r?\n")
_WORD_START = re.compile(r"(^|\s)([#=~])")
_SPECIAL = re.compile(r"([\"$&'()*;<>?\[\]`{|}])")
_WHITESPACE = re.compile(r"([\t ])")


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in Zsh."""
    result = strip_control_characters(arg)
    result = _LONE_CARRIAGE_RETURN.sub("", result)

    if interpolation:
        result = result.replace("\\", "\\\\")
        result = _NEWLINE.sub(" ", result)
        result = _WORD_START.sub(r"\1\\\2", result)
        result = _SPECIAL.sub(r"\\\1", result)
        result = _WHITESPACE.sub(r"\\\1", result)
    elif quoted:
        result = result.replace("'", "'\\''")

    return result


quote = quote_posix
