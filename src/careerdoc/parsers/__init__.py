#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/parsers/__init__.py
"""Parsers that build the export document model from source text."""

from careerdoc.parsers.markdown import MarkdownParser, parse_line, strip_inline_markup, tokenize_inline

__all__ = ["MarkdownParser", "parse_line", "strip_inline_markup", "tokenize_inline"]
