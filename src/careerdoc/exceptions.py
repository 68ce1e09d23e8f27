#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the careerdoc library.

This module defines specialized exception classes for the error conditions
that can occur while exporting documents. These exceptions provide more
specific error information than generic built-ins.

Exception Hierarchy
-------------------
- CareerDocError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for renderer)
    - ConfigError (unreadable or invalid configuration file)

  - RenderingError (output generation failures)
    - ArchiveError (ZIP container invariants)
    - OutputWriteError (file write failures)

Malformed markdown never raises: unterminated markers degrade to literal
text and an empty document renders as a single empty paragraph.

"""

from typing import Any


class CareerDocError(Exception):
    """Base exception class for all careerdoc-specific errors.

    Catching this will catch all library-specific errors.

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


class ValidationError(CareerDocError):
    """Exception raised for invalid input parameters or options.

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


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    converter_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigError(ValidationError):
    """Exception raised when a configuration file cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class RenderingError(CareerDocError):
    """Exception raised when output rendering fails.

    Exports are atomic: when this is raised no partial output has been
    returned to the caller.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class ArchiveError(RenderingError):
    """Exception raised when a ZIP archive invariant is violated.

    Covers programming errors such as duplicate entry paths, calling
    ``generate()`` twice, or values that overflow the fixed-width header
    fields.

    Parameters
    ----------
    message : str
        Description of the violated invariant
    entry_path : str, optional
        The archive entry involved, if any

    """

    def __init__(self, message: str, entry_path: str | None = None, original_error: Exception | None = None):
        """Initialize the archive error."""
        super().__init__(message, rendering_stage="archive", original_error=original_error)
        self.entry_path = entry_path


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
