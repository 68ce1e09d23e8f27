#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/renderers/base.py
"""Base classes for export renderers.

This module defines the abstract base class that all renderers inherit from.
The DOCX renderer consumes the parsed AST ``Document``; the HTML renderer
works directly on the markdown source, so the base class does not fix the
input type.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Any, Union

from careerdoc.exceptions import InvalidOptionsError
from careerdoc.options.base import BaseRendererOptions
from careerdoc.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render(self, doc, output):
        ...         self.write_text_output(doc.plain_text(), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Any, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the input and write it to the output destination.

        Parameters
        ----------
        doc : Any
            Renderer input: an AST ``Document`` or markdown source text
        output : str, Path, or IO[bytes]
            Output destination (file path or binary file-like object)

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_bytes(self, doc: Any) -> bytes:
        """Render the input to bytes.

        The default implementation renders into a BytesIO buffer. Nothing is
        returned when rendering fails, so callers never see partial output.

        Parameters
        ----------
        doc : Any
            Renderer input

        Returns
        -------
        bytes
            Rendered output

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or stream (UTF-8 for binary streams)."""
        write_content(text, output)

    @staticmethod
    def write_binary_output(data: bytes, output: Union[str, Path, IO[bytes]]) -> None:
        """Write binary output to a file path or binary stream."""
        write_content(data, output)
