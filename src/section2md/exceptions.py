#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the section2md library.

This module defines the exception classes raised while reading, parsing and
converting HTML documents. Only ``ParseFailure`` and the input errors escape
from the public conversion API; the range errors are caught by the converter
and reported as warning results.

Exception Hierarchy
-------------------
- Section2MdError (base exception)

  - ValidationError (invalid option values)

  - InputError (unsupported input type)

  - FileError (file access and I/O)

  - ParseFailure (raw HTML could not be parsed into a tree)

  - RangeNotFoundError (start or end marker absent)
    - EmptyRangeError (markers found, nothing between them)

"""

from typing import Any

from section2md.constants import RangeBoundary


class Section2MdError(Exception):
    """Base exception class for all section2md-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Section2MdError):
    """Exception raised for invalid parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InputError(ValidationError):
    """Exception raised when the conversion input has an unsupported type."""

    def __init__(self, message: str, parameter_value: Any = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(
            message, parameter_name="source", parameter_value=parameter_value, original_error=original_error
        )


class FileError(Section2MdError):
    """Exception raised when an input file cannot be read.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParseFailure(Section2MdError):
    """Exception raised when raw HTML cannot be parsed into a document tree.

    Any failure of the underlying HTML parser is reported through this single
    generic error; the original exception is kept in ``original_error``.

    Parameters
    ----------
    message : str, optional
        Custom error message
    parser_name : str, optional
        Name of the parser backend that failed
    original_error : Exception, optional
        The underlying parser exception

    """

    def __init__(
        self,
        message: str | None = None,
        parser_name: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parse failure."""
        if message is None:
            message = "Failed to parse HTML"
            if parser_name:
                message += f" with parser '{parser_name}'"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, original_error=original_error)
        self.parser_name = parser_name


class RangeNotFoundError(Section2MdError):
    """Exception raised when a range marker cannot be located.

    Parameters
    ----------
    boundary : {"start", "end"}
        Which side of the range is missing
    markers : tuple of str
        The marker text(s) searched for on that side
    message : str, optional
        Custom error message

    Attributes
    ----------
    boundary : {"start", "end"}
        The missing side of the range
    markers : tuple of str
        Marker text(s) that were not found

    """

    def __init__(self, boundary: RangeBoundary, markers: tuple[str, ...], message: str | None = None):
        """Initialize the range error."""
        if message is None:
            joined = " / ".join(f'"{marker}"' for marker in markers)
            message = f"{boundary.capitalize()} marker {joined} not found"
        super().__init__(message)
        self.boundary = boundary
        self.markers = markers


class EmptyRangeError(RangeNotFoundError):
    """Exception raised when both markers exist but no content lies between them."""

    def __init__(self, markers: tuple[str, ...], message: str | None = None):
        """Initialize the empty range error."""
        if message is None:
            message = "No content found between the start and end markers"
        super().__init__("end", markers, message=message)


__all__ = [
    "Section2MdError",
    "ValidationError",
    "InputError",
    "FileError",
    "ParseFailure",
    "RangeNotFoundError",
    "EmptyRangeError",
]
