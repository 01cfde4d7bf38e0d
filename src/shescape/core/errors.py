"""Exceptions raised by shescape."""

from __future__ import annotations

TYPE_ERROR = (
    "shescape requires strings or values that can be converted into a string "
    "using str()"
)


class InvalidArgumentKind(TypeError):
    """An argument could not be converted into a string."""

    def __init__(self, value: object = None, message: str = TYPE_ERROR):
        super().__init__(message)
        self.value = value


class ConfigurationError(RuntimeError):
    """shescape was wired up without a collaborator it requires.

    This is an integration defect, not something to recover from per call.
    """
