"""
Windows PowerShell escaping rules for shescape.

PowerShell uses the backtick as its escape character. It also treats the
typographic ("smart") quotes as equivalent to their ASCII counterparts, so
those are escaped the same way.
"""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_windows, strip_control_characters

SHELL = Shell.POWERSHELL

_LONE_CARRIAGE_RETURN = re.compile(r"\r(?!\n)")
_NEWLINE = re.compile(r"\r?\n")
_REDIRECT = re.compile(r"(^|[\s\u0085])([*1-6]?)(>)")
_WORD_START = re.compile(r"(^|[\s\u0085])([#\-:<@\]])")
_SPECIAL = re.compile("([\"&'(),;{|}‘’‚‛“”„])")
_WHITESPACE = re.compile(r"([\s\u0085])")
_DOUBLE_QUOTES = re.compile("([\"“”„])")


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in Windows PowerShell."""
    result = strip_control_characters(arg)
    # Backticks and dollars first, the steps below add backticks of their own
    result = result.replace("`", "``")
    result = result.replace("$", "`$")
    result = _LONE_CARRIAGE_RETURN.sub("", result)

    if interpolation:
        result = _NEWLINE.sub(" ", result)
        result = _REDIRECT.sub(r"\1\2`\3", result)
        result = _WORD_START.sub(r"\1`\2", result)
        result = _SPECIAL.sub(r"`\1", result)
        result = _WHITESPACE.sub(r"`\1", result)
    elif quoted:
        result = _DOUBLE_QUOTES.sub(r"\1\1", result)

    return result


quote = quote_windows
