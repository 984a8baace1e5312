"""
Error taxonomy for the UA Mixer.

Every failure the core raises on purpose derives from `MixerError`, so the CLI
can report them uniformly. Records rejected by the sanitizer are not errors.
"""
from __future__ import annotations


class MixerError(Exception):
    """Base class for all UA Mixer errors."""


class EmptyPrimaryError(MixerError):
    """The primary pool is missing or holds no valid records."""

    def __init__(self, primary_name: str) -> None:
        self.primary_name = primary_name
        super().__init__(f"At least one '{primary_name}' user agent is required to mix.")


class DuplicateNameError(MixerError):
    """A pool with the same case-insensitive name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Pool name '{name}' already exists.")


class NotFoundError(MixerError, KeyError):
    """No pool is registered under the given id."""

    def __init__(self, pool_id: str) -> None:
        self.pool_id = pool_id
        super().__init__(f"Unknown pool id '{pool_id}'.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidPoolNameError(MixerError, ValueError):
    """The pool name is empty after trimming."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Pool name must not be empty.")


class UnsupportedFileError(MixerError, ValueError):
    """Only plain-text (.txt) files can be imported or exported."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unsupported file type for '{path}'; expected a .txt file.")


__all__ = [
    "DuplicateNameError",
    "EmptyPrimaryError",
    "InvalidPoolNameError",
    "MixerError",
    "NotFoundError",
    "UnsupportedFileError",
]
