"""Dash escaping rules for shescape."""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_posix, strip_control_characters

SHELL = Shell.DASH

_LONE_CARRIAGE_RETURN = re.compile(r"\r(?!\n)")
_NEWLINE = re.compile(r"\r?\n")
_WORD_START = re.compile(r"(^|\s)([#~])")
# No brace expansion in dash
_SPECIAL = re.compile(r"([\"$&'()*;<>?`|])")
_WHITESPACE = re.compile(r"([\t\n ])")


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in Dash."""
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
