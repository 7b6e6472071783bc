"""Exceptions raised while scanning files for typos."""

from typing import Optional


class TypoScanError(Exception):
    """Base class for scanner errors.

    Args:
        message: Human readable description
        path: File the error relates to, if any
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ReadError(TypoScanError):
    """A source file could not be read as text."""


class ParseError(TypoScanError):
    """No syntax tree could be produced for a source file."""


class ExtractError(TypoScanError):
    """A node's byte range did not correspond to valid text."""


class DictionaryLoadError(TypoScanError):
    """The known-words dictionary could not be built. Fatal for a run."""
