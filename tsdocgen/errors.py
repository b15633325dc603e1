"""Exceptions raised by the documentation pipeline."""

from pathlib import Path


class DocgenError(Exception):
    """Base class for fatal pipeline errors."""


class PatternError(DocgenError):
    """The input file pattern is not a valid glob."""


class ConfigError(DocgenError):
    """The configuration file cannot be read or is malformed."""


class SourceParseError(DocgenError):
    """A source file failed to parse."""

    def __init__(self, path: Path, line: int, column: int, message: str) -> None:
        """Record the failing file and 1-based location."""
        self.path = path
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"{path}:{line}:{column}: {message}")
