#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/renderers/__init__.py
"""Renderers that turn parsed or raw markdown into exportable bytes.

Available renderers:
- DocxRenderer: AST to a WordprocessingML (.docx) package
- HtmlRenderer: markdown to a self-contained, print-ready HTML page

"""

from __future__ import annotations

from careerdoc.renderers.base import BaseRenderer
from careerdoc.renderers.docx import DocxRenderer, OOXMLPartBuilder
from careerdoc.renderers.html import HTML_PIPELINE, HtmlRenderer, html_data_url, markdown_to_html

__all__ = [
    "BaseRenderer",
    "DocxRenderer",
    "HTML_PIPELINE",
    "HtmlRenderer",
    "OOXMLPartBuilder",
    "html_data_url",
    "markdown_to_html",
]
