#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for the export document model.

The DOCX export path parses markdown into this tree and renders it with a
visitor. The HTML export path does not use it.

Examples
--------
    >>> from careerdoc.ast import Document, Heading, Paragraph, Run
    >>> doc = Document(children=[
    ...     Heading(level=1, runs=[Run("Jane Doe")]),
    ...     Paragraph(runs=[Run("Senior "), Run("Engineer", bold=True)]),
    ... ])

"""

from __future__ import annotations

from careerdoc.ast.nodes import Block, BulletItem, Document, Heading, Node, Paragraph, Run
from careerdoc.ast.visitors import NodeVisitor

__all__ = [
    "Block",
    "BulletItem",
    "Document",
    "Heading",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Run",
]
