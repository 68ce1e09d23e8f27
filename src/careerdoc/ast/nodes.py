#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/ast/nodes.py
"""AST node classes for the rich-text export model.

This module defines the small node hierarchy that the DOCX export path
renders. A document is a flat, ordered sequence of blocks; each block holds
an ordered list of styled runs.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, BulletItem

Inline nodes:
    - Run (text plus bold/italic flags)

A Run never spans a block boundary. Documents are built fresh for each
export call and are not shared between calls.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Union

from careerdoc.constants import MAX_HEADING_LEVEL


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result of the visitor's method call

        """
        pass


@dataclass(frozen=True)
class Run(Node):
    """A contiguous span of text sharing one set of style flags.

    Parameters
    ----------
    text : str
        Visible text of the run. May be empty.
    bold : bool, default = False
        Whether the run is bold
    italic : bool, default = False
        Whether the run is italic

    """

    text: str
    bold: bool = False
    italic: bool = False

    @property
    def is_plain(self) -> bool:
        """Return True when the run carries no styling."""
        return not (self.bold or self.italic)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this run."""
        return visitor.visit_run(self)


@dataclass
class Heading(Node):
    """Heading block (levels 1-3).

    Parameters
    ----------
    level : int
        Heading level (1-3, where 1 is most important)
    runs : list of Run, default = empty list
        Styled runs making up the heading text

    """

    level: int
    runs: list[Run] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 3."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Plain paragraph block.

    Parameters
    ----------
    runs : list of Run, default = empty list
        Styled runs making up the paragraph

    """

    runs: list[Run] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class BulletItem(Node):
    """Bulleted list item block.

    Every bullet item references the single predefined bullet list
    definition; there is no nesting.

    Parameters
    ----------
    runs : list of Run, default = empty list
        Styled runs making up the item text

    """

    runs: list[Run] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bullet item."""
        return visitor.visit_bullet_item(self)


Block = Union[Heading, Paragraph, BulletItem]


@dataclass
class Document(Node):
    """Root node holding the ordered sequence of blocks.

    Parameters
    ----------
    children : list of Block, default = empty list
        Blocks in document order
    metadata : dict, default = empty dict
        Document-level metadata (for example the title)

    """

    children: list[Block] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Return True when the document has no blocks."""
        return not self.children

    def plain_text(self) -> str:
        """Return the visible text of the document, one block per line."""
        return "\n".join("".join(run.text for run in block.runs) for block in self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)
