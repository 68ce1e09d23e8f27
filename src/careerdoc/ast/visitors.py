#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors keep rendering algorithms separate from the node classes: a
renderer implements one ``visit_*`` method per node type and lets
``node.accept(visitor)`` dispatch.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from careerdoc.ast.nodes import BulletItem, Document, Heading, Paragraph, Run


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node type. Visit methods
    return Any: typically None for side-effect visitors, or accumulated
    results for transforming visitors.

    Examples
    --------
    Visitor that counts bold runs:

        >>> class BoldCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for block in node.children:
        ...             block.accept(self)
        ...     def visit_heading(self, node):
        ...         self.visit_paragraph(node)
        ...     def visit_paragraph(self, node):
        ...         for run in node.runs:
        ...             run.accept(self)
        ...     def visit_bullet_item(self, node):
        ...         self.visit_paragraph(node)
        ...     def visit_run(self, node):
        ...         self.count += node.bold

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_bullet_item(self, node: BulletItem) -> Any:
        """Visit a BulletItem node."""
        pass

    @abstractmethod
    def visit_run(self, node: Run) -> Any:
        """Visit a Run node."""
        pass
