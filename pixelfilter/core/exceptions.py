"""
Custom exceptions for the pixel filter toolkit.

Every error raised on purpose by the toolkit derives from PixelFilterError,
so callers can catch one type at the boundary.
"""

from typing import Iterable, List, Optional


class PixelFilterError(Exception):
    """Base exception for all toolkit errors."""

    pass


class FilterNotFoundError(PixelFilterError, LookupError):
    """Raised when a filter name or filter id is not registered."""

    def __init__(self, name: str, available: Optional[Iterable[str]] = None):
        """
        Initialize FilterNotFoundError.

        Parameters
        ----------
        name : str
            The name that failed to resolve
        available : Iterable[str] | None
            Names that would have resolved
        """
        self.name = name
        self.available = sorted(available) if available is not None else []

        message = f"No filter registered under '{name}'"
        if self.available:
            message = f"{message} (available: {', '.join(self.available)})"

        super().__init__(message)


class MalformedInputError(PixelFilterError, ValueError):
    """Raised when pixel data or image dimensions are invalid."""

    def __init__(self, message: str, issues: Optional[List] = None):
        """
        Initialize MalformedInputError.

        Parameters
        ----------
        message : str
            Error message
        issues : list[ValidationIssue] | None
            Validation issues that caused the failure
        """
        self.issues = list(issues) if issues else []
        super().__init__(message)


class InvalidParameterError(PixelFilterError, ValueError):
    """Raised when a filter is configured outside its parameter schema."""

    def __init__(self, filter_id: str, errors: List[str]):
        self.filter_id = filter_id
        self.errors = list(errors)
        super().__init__(f"Invalid parameters for '{filter_id}': {'; '.join(self.errors)}")


class SerializationError(PixelFilterError, ValueError):
    """Raised when a pipeline or preset file cannot be interpreted."""

    pass


class ImageIOError(PixelFilterError):
    """Raised when an image file cannot be read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path

        full_message = message
        if path:
            full_message = f"{full_message} (path: {path})"

        super().__init__(full_message)
