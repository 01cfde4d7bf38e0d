"""
Resolving the location of executables.

Resolution never fails for a missing or non-symlink executable: the best
location found so far is returned instead. Shell detection must not block
escaping just because a filesystem probe failed.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from shescape.core.errors import ConfigurationError


class ExecutableResolver(Protocol):
    """Turns a name or path of an executable into the path of its binary."""

    def resolve(self, executable: str) -> str:
        ...


def resolve_executable(
    executable: str,
    *,
    exists: Callable[[str], bool] | None,
    readlink: Callable[[str], str] | None,
    which: Callable[[str], str | None] | None,
) -> str:
    """Resolve the location of an executable.

    Looks the executable up like `which(1)` does and then follows (at most one
    level of) symbolic link.

    Args:
        executable: A name or path of the executable.
        exists: Check if a file exists.
        readlink: Read the target of a symbolic link, raising OSError if the
            path is not a link.
        which: PATH lookup, returning None (or raising OSError) if not found.

    Returns the full path to the binary, or the input if it can't be found.

    Raises:
        ConfigurationError: If `exists`, `readlink` or `which` is missing.
    """
    if readlink is None or which is None or exists is None:
        raise ConfigurationError("resolve_executable requires exists, readlink and which")

    try:
        location = which(executable)
    except (OSError, ValueError):
        location = None
    if location is None:
        return executable

    if not exists(location):
        return location

    try:
        return readlink(location)
    except (OSError, ValueError):
        # Not a symbolic link
        return location


@dataclass(frozen=True)
class SystemExecutableResolver:
    """Resolves executables against the real filesystem and PATH."""

    exists: Callable[[str], bool] = os.path.exists
    readlink: Callable[[str], str] = os.readlink
    which: Callable[[str], str | None] = shutil.which

    def resolve(self, executable: str) -> str:
        return resolve_executable(
            executable, exists=self.exists, readlink=self.readlink, which=self.which
        )
