"""
Windows Command Prompt escaping rules for shescape.

cmd.exe has no way to escape whitespace outside of quotes, so in
interpolation mode whitespace is left untouched and an argument containing
spaces may still be split by the program receiving it.
"""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_windows, strip_control_characters

SHELL = Shell.CMD

_LINE_TERMINATOR = re.compile(r"\r?\n|\r")
_SPECIAL = re.compile(r"([\"&<>|])")


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in Windows Command Prompt."""
    result = strip_control_characters(arg)
    result = _LINE_TERMINATOR.sub(" ", result)

    if interpolation:
        result = result.replace("^", "^^")
        result = _SPECIAL.sub(r"^\1", result)
    elif quoted:
        result = result.replace('"', '""')

    return result


quote = quote_windows
