#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/parsers/markdown.py
"""Line-based markdown parser for the DOCX export path.

Only the subset of markdown that language-model output for resumes and cover
letters actually uses is recognised:

- ``#``, ``##``, ``###`` headings (deeper headings are clamped to level 3)
- ``-`` / ``*`` bullet items
- ``**bold**`` and ``*italic*`` inline runs
- horizontal rules (`---`, `***`, `___`) are dropped
- everything else is a plain paragraph

Malformed input never fails: unterminated markers are kept as literal text,
and inline code, link and image syntax is reduced to its visible text.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from careerdoc.ast.nodes import Block, BulletItem, Document, Heading, Paragraph, Run
from careerdoc.constants import MAX_HEADING_LEVEL
from careerdoc.exceptions import InvalidOptionsError
from careerdoc.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

_HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.*)$")
_BULLET_PATTERN = re.compile(r"^[-*]\s+(.*)$")
_THEMATIC_BREAK_PATTERN = re.compile(r"^([-*_])(?:\s*\1){2,}$")

_INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
_IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\([^)]+\)")


def strip_inline_markup(text: str, options: Optional[MarkdownParserOptions] = None) -> str:
    """Remove markdown syntax that has no run-level representation.

    Bold and italic markers are left in place for :func:`tokenize_inline`.

    Parameters
    ----------
    text : str
        One line of markdown
    options : MarkdownParserOptions or None
        Controls which syntax is stripped

    Returns
    -------
    str
        Text with inline code, image and link syntax replaced by their
        visible text

    Examples
    --------
        >>> strip_inline_markup("See [my site](https://example.com) and `code`")
        'See my site and code'

    """
    options = options or MarkdownParserOptions()
    if options.strip_inline_code:
        text = _INLINE_CODE_PATTERN.sub(r"\1", text)
    if options.strip_links:
        # Images before links, the link pattern would otherwise leave a stray "!"
        text = _IMAGE_PATTERN.sub(r"\1", text)
        text = _LINK_PATTERN.sub(r"\1", text)
    return text


def tokenize_inline(text: str) -> list[Run]:
    """Split a line of text into bold, italic and plain runs.

    The line is scanned left to right. ``***`` opens a bold italic run that
    ends at the next ``***``; ``**`` opens a bold run that ends at the next
    ``**``; a single ``*`` opens an italic run that ends at the next single
    ``*``. Longer markers are checked first, so ``**x**`` is never read as
    italic and ``***x***`` leaves no asterisks behind. Markers without a
    matching closer are kept as literal text.

    Parameters
    ----------
    text : str
        Line content with block markers already removed

    Returns
    -------
    list of Run
        Runs in reading order. Plain text between styled runs is merged into
        a single run.

    Examples
    --------
        >>> tokenize_inline("**bold** and *italic*")
        [Run(text='bold', bold=True, italic=False), Run(text=' and ', bold=False, italic=False), \
Run(text='italic', bold=False, italic=True)]

    """
    runs: list[Run] = []
    buffer: list[str] = []

    def flush() -> None:
        if buffer:
            runs.append(Run("".join(buffer)))
            buffer.clear()

    length = len(text)
    i = 0
    while i < length:
        if text.startswith("***", i):
            end = text.find("***", i + 3)
            if end != -1:
                flush()
                runs.append(Run(text[i + 3 : end], bold=True, italic=True))
                i = end + 3
                continue

        if text.startswith("**", i):
            end = text.find("**", i + 2)
            if end != -1:
                flush()
                runs.append(Run(text[i + 2 : end], bold=True))
                i = end + 2
                continue
            logger.debug(f"Unterminated bold marker at column {i}, keeping literal text")
            buffer.append("**")
            i += 2
            continue

        if text[i] == "*":
            end = text.find("*", i + 1)
            if end != -1 and not text.startswith("**", end):
                flush()
                runs.append(Run(text[i + 1 : end], italic=True))
                i = end + 1
                continue
            logger.debug(f"Unmatched italic marker at column {i}, keeping literal text")

        buffer.append(text[i])
        i += 1

    flush()
    return runs


def parse_line(line: str, options: Optional[MarkdownParserOptions] = None) -> Optional[Block]:
    """Classify one line of markdown and build its block.

    Parameters
    ----------
    line : str
        Raw source line
    options : MarkdownParserOptions or None
        Parser options

    Returns
    -------
    Heading, BulletItem, Paragraph or None
        None for blank lines, horizontal rules and lines with no visible text

    """
    trimmed = line.strip()
    if not trimmed or _THEMATIC_BREAK_PATTERN.match(trimmed):
        return None

    block: Block
    heading_match = _HEADING_PATTERN.match(trimmed)
    bullet_match = _BULLET_PATTERN.match(trimmed)
    if heading_match:
        # Levels 4-6 are clamped to 3 rather than demoted to paragraphs
        level = min(len(heading_match.group(1)), MAX_HEADING_LEVEL)
        block = Heading(level=level)
        body = heading_match.group(2)
    elif bullet_match:
        block = BulletItem()
        body = bullet_match.group(1)
    else:
        block = Paragraph()
        body = trimmed

    block.runs = tokenize_inline(strip_inline_markup(body.strip(), options))
    if not block.runs:
        return None
    return block


class MarkdownParser:
    """Parse markdown text into the export document model.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Jane Doe\\n\\n- **Python**, *Go*")
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'BulletItem']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def parse(self, markdown: str) -> Document:
        """Parse markdown into a new Document.

        Parameters
        ----------
        markdown : str
            Markdown source. Line endings may be ``\\n``, ``\\r\\n`` or ``\\r``.

        Returns
        -------
        Document
            Fresh document; empty when the input has no visible text

        """
        children: list[Block] = []
        for line in (markdown or "").splitlines():
            block = parse_line(line, self.options)
            if block is not None:
                children.append(block)

        logger.debug(f"Parsed {len(children)} blocks from {len(markdown or '')} characters of markdown")
        return Document(children=children)
