"""
Bash escaping rules for shescape.

Bash performs tilde expansion after `:` and `=` too (e.g. in `PATH=~/bin`),
so those need escaping in addition to a leading `~`.
"""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_posix, strip_control_characters

SHELL = Shell.BASH

_LONE_CARRIAGE_RETURN = re.compile(r"\r(?!\n)")
_NEWLINE = re.compile(r"\r?\n")
_WORD_START = re.compile(r"(^|\s)([#~])")
_SPECIAL = re.compile(r"([\"$&'()*;<>?`{|])")
_ASSIGNMENT_TILDE = re.compile(r"(?<=[:=])(~)(?=[\s+\-/0:=]|$)")
_WHITESPACE = re.compile(r"([\t ])")


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in Bash."""
    result = strip_control_characters(arg)
    result = _LONE_CARRIAGE_RETURN.sub("", result)

    if interpolation:
        result = result.replace("\\", "\\\\")
        result = _NEWLINE.sub(" ", result)
        result = _WORD_START.sub(r"\1\\\2", result)
        result = _SPECIAL.sub(r"\\\1", result)
        result = _ASSIGNMENT_TILDE.sub(r"\\\1", result)
        result = _WHITESPACE.sub(r"\\\1", result)
    elif quoted:
        result = result.replace("'", "'\\''")

    return result


quote = quote_posix
