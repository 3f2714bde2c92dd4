"""Custom exceptions for problem loaders."""

from typing import Optional


class LoaderError(Exception):
    """Raised when a problem cannot be loaded or parsed."""
    pass


class ProblemIOError(LoaderError):
    """Raised when the problem source cannot be read."""
    pass


class InvalidInputDataError(LoaderError):
    """
    Raised when a line of a sparse-labeled-vector file is malformed.
    
    Attributes:
        source: Name of the file or stream being parsed
        line_number: 1-based line number of the offending line
        token: Offending token, if any
    """

    def __init__(
        self,
        message: str,
        source: str,
        line_number: int,
        token: Optional[str] = None,
    ):
        self.reason = message
        self.source = source
        self.line_number = line_number
        self.token = token
        super().__init__(f"{source}:{line_number}: {message}")
