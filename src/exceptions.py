"""Custom exceptions for sublang."""

from __future__ import annotations

from pathlib import Path


class SublangError(Exception):
    """Base exception for all sublang errors."""

    pass


class LanguageNotFoundError(SublangError, KeyError):
    """Raised when a language tag is not in the registry.

    Only the strict ``registry[tag]`` access raises this; ``lookup`` returns None.
    """

    def __init__(self, name: str):
        """Initialize error with context.

        Args:
            name: The tag that was looked up
        """
        self.name = name
        super().__init__(f"Unknown language '{name}'")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class DuplicateLanguageError(SublangError):
    """Raised when the language table holds the same name twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Language '{name}' is listed more than once")


class SubtitleReadError(SublangError):
    """Raised when a subtitle text file cannot be read or decoded."""

    def __init__(self, file_path: Path, reason: str):
        """Initialize error with context.

        Args:
            file_path: Path to the file being read
            reason: Specific reason for the failure
        """
        self.file_path = file_path
        self.reason = reason
        message = (
            f"Cannot read subtitle text: {file_path.name}\n"
            f"Reason: {reason}\n"
            f"Try passing the file's encoding with --encoding"
        )
        super().__init__(message)
