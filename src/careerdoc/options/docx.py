#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/options/docx.py
"""Configuration options for DOCX rendering."""

from dataclasses import dataclass

from careerdoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class DocxRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to a DOCX package.

    The style and numbering parts of the package are fixed, so the DOCX
    renderer has no format-specific fields beyond the shared renderer
    options. The class exists so renderers can validate the options type
    they receive.

    """
