#!/usr/bin/env python3
"""
Debug helper for inspecting how shescape escapes an argument.

Usage:
    python bin/escape-dump.py 'argument to escape'

Prints the escaped and quoted forms for every supported shell, then the
bashlex AST of `printf %s <arg>` with the argument escaped for Bash. The
argument should show up as exactly one word node.
"""

import sys

try:
    import bashlex
except ImportError:
    print("Error: bashlex not installed. Run: pip install bashlex")
    sys.exit(1)

from shescape.shells import RULES, Shell


def dump_node(node, indent=0):
    """Recursively dump a bashlex AST node."""
    prefix = "  " * indent

    if hasattr(node, 'kind'):
        print(f"{prefix}kind: {node.kind}")

    if hasattr(node, 'word'):
        print(f"{prefix}word: {node.word!r}")

    if hasattr(node, 'pos'):
        print(f"{prefix}pos: {node.pos}")

    if hasattr(node, 'parts'):
        print(f"{prefix}parts:")
        for part in node.parts:
            dump_node(part, indent + 1)

    if hasattr(node, 'list'):
        print(f"{prefix}list:")
        for item in node.list:
            dump_node(item, indent + 1)


def dump_escapes(arg):
    for shell in Shell:
        rules = RULES[shell]
        escaped = rules.escape(arg, interpolation=False, quoted=False)
        interpolated = rules.escape(arg, interpolation=True, quoted=False)
        quoted = rules.quote(rules.escape(arg, interpolation=False, quoted=True))
        print(f"{shell.value}:")
        print(f"  escape:        {escaped!r}")
        print(f"  interpolation: {interpolated!r}")
        print(f"  quote:         {quoted!r}")


def main():
    if len(sys.argv) < 2:
        print("Usage: escape-dump.py 'argument'")
        print("Example: escape-dump.py 'hello $(whoami)'")
        sys.exit(1)

    arg = sys.argv[1]
    print(f"Escaping: {arg!r}")
    print("-" * 40)
    dump_escapes(arg)
    print("-" * 40)

    command = "printf %s " + RULES[Shell.BASH].escape(arg, interpolation=True, quoted=False)
    print(f"Parsing: {command!r}")
    try:
        parts = bashlex.parse(command)
        for i, part in enumerate(parts):
            print(f"Part {i}:")
            dump_node(part, 1)
            print()
    except bashlex.errors.ParsingError as e:
        print(f"Parse error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
