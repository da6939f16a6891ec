"""
Exception types for the reports importer.

Two classes of failure reach the command line: usage errors, which print
the help text, and everything else, which prints only the message.
"""

from typing import Optional


class ReportsImportError(Exception):
    """Base exception for all importer errors."""
    pass


class UsageError(ReportsImportError):
    """Malformed or incomplete command line.

    Args:
        detail: Optional line printed above the usage text
    """

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(detail or "Invalid command line")


class DuplicateArgumentError(UsageError):
    """The same argument key was given more than once."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f'Argument "{key}" is specified more than once.')


class UnsupportedFormatError(UsageError):
    """No enabled converter handles the input file extension."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__()


class InputFileNotFoundError(ReportsImportError):
    """The /in file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'File "{path}" doesn\'t exist.')


class ConversionError(ReportsImportError):
    """A conversion engine misbehaved."""
    pass
