#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for careerdoc parsing and rendering.

Every options class is a frozen dataclass; use ``create_updated`` to derive a
modified copy.
"""

from careerdoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from careerdoc.options.docx import DocxRendererOptions
from careerdoc.options.html import HtmlRendererOptions
from careerdoc.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DocxRendererOptions",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
