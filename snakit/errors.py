"""Errors reported to the user by snakit."""

from pathlib import Path

import click


def display_path(path: Path | str) -> str:
    """Return a printable form of a path.

    Undecodable bytes in a name arrive as lone surrogates, which cannot be
    written to a UTF-8 stream; they are shown as backslash escapes instead.
    """
    return str(path).encode("utf-8", "backslashreplace").decode("utf-8")


class SnakitError(click.ClickException):
    """Base class for failures that end a run with a one-line message."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class InvalidRootError(SnakitError):
    """Exception raised when the root path is missing or not a directory."""

    def __init__(self, path: Path, reason: str):
        self.reason = reason
        super().__init__(path, f"Path '{display_path(path)}' {reason}")


class FileSystemError(SnakitError):
    """Exception raised when reading or renaming an entry fails."""

    def __init__(self, path: Path, cause: OSError):
        self.cause = cause
        detail = cause.strerror or str(cause)
        super().__init__(path, f"I/O error at '{display_path(path)}': {detail}")


class EncodingError(SnakitError):
    """Exception raised when an entry name is not valid UTF-8."""

    def __init__(self, path: Path):
        super().__init__(path, f"Name of '{display_path(path)}' is not valid UTF-8")
