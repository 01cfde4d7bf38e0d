"""
C shell escaping rules for shescape.

History substitution (`!`) is active even inside single quotes in csh, so it
is escaped in every mode. A `!` at the very end of an argument is left as is,
csh does not expand it there.
"""

from __future__ import annotations

import re

from shescape.shells import Shell, quote_posix, strip_control_characters

SHELL = Shell.CSH

_LINE_TERMINATOR = re.compile(r"\r?\n|\r")
_WORD_START = re.compile(r"(^|\s)(~)")
_SPECIAL = re.compile(r"([\"#$&'()*;<>?\[`{|])")
_WHITESPACE = re.compile(r"([\t ])")
_TRAILING_ESCAPED_BANG = re.compile(r"\\!$")
_BANG = re.compile(r"!(?!$)")

# Byte that makes csh 20110502-7 hang when it follows an escaped character,
# see https://bugs.debian.org/cgi-bin/bugreport.cgi?bug=995013
_HANGING_BYTE = 0xA0


def _quote_hanging_characters(arg: str) -> str:
    return "".join(
        f"'{char}'" if _HANGING_BYTE in char.encode("utf-8", "replace") else char
        for char in arg
    )


def escape(arg: str, *, interpolation: bool, quoted: bool) -> str:
    """Escape an argument for use in csh."""
    result = strip_control_characters(arg)
    result = _LINE_TERMINATOR.sub(" ", result)

    if interpolation:
        result = result.replace("\\", "\\\\")
        result = _WORD_START.sub(r"\1\\\2", result)
        result = _SPECIAL.sub(r"\\\1", result)
        result = _WHITESPACE.sub(r"\\\1", result)
        result = _quote_hanging_characters(result)
    else:
        result = _TRAILING_ESCAPED_BANG.sub(r"\\\\!", result)
        if quoted:
            result = result.replace("'", "'\\''")

    result = _BANG.sub(r"\\!", result)

    return result


quote = quote_posix
