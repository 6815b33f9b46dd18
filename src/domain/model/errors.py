"""Domain-level exceptions.

Core stages raise these errors and never terminate the process.
The command-line entry point catches them and maps them to an exit status.
File I/O failures are plain ``OSError`` and propagate unwrapped.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class UsageError(DomainError):
    """Command-line arguments are missing or malformed."""


class FetchError(DomainError):
    """A dictionary page could not be retrieved for a word."""

    def __init__(self, word: str, cause: object):
        self.word = word
        self.cause = cause
        super().__init__(f"Failed to fetch '{word}': {cause}")


class ParseError(DomainError):
    """Raw markup could not be turned into a document tree at all."""
