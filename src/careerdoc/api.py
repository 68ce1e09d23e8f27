#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/api.py
"""Public export entry points.

The export functions take plain values (markdown text, a filename base and
an optional title) and return an :class:`ExportResult` holding the finished
byte blob. Nothing is cached between calls and nothing is written to disk
unless the caller asks for it with :meth:`ExportResult.write`.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from careerdoc.ast.nodes import Document
from careerdoc.constants import DOCX_EXTENSION, DOCX_MEDIA_TYPE, HTML_EXTENSION, HTML_MEDIA_TYPE
from careerdoc.exceptions import CareerDocError, OutputWriteError, RenderingError, ValidationError
from careerdoc.options.docx import DocxRendererOptions
from careerdoc.options.html import HtmlRendererOptions
from careerdoc.options.markdown import MarkdownParserOptions
from careerdoc.parsers.markdown import MarkdownParser
from careerdoc.renderers.docx import DocxRenderer
from careerdoc.renderers.html import HtmlRenderer
from careerdoc.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """Finished export handed back to the caller.

    Parameters
    ----------
    data : bytes
        Complete file contents
    filename : str
        Filename including extension
    media_type : str
        MIME type of the data

    """

    data: bytes
    filename: str
    media_type: str

    @property
    def size(self) -> int:
        """Return the size of the exported data in bytes."""
        return len(self.data)

    def write(self, directory: Union[str, Path] = ".") -> Path:
        """Write the exported data to ``directory/filename``.

        Parameters
        ----------
        directory : str or Path, default "."
            Target directory; created if it does not exist

        Returns
        -------
        Path
            Path of the written file

        Raises
        ------
        OutputWriteError
            If the directory cannot be created or the file cannot be written

        """
        target = Path(directory) / self.filename
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(self.data)
        except OSError as e:
            raise OutputWriteError(str(target), original_error=e) from e

        logger.info(f"Wrote {self.size} bytes to {target}")
        return target


def _validate_filename_base(filename_base: str) -> None:
    if not isinstance(filename_base, str) or not filename_base.strip():
        raise ValidationError(
            "filename_base must be a non-empty string",
            parameter_name="filename_base",
            parameter_value=filename_base,
        )
    if "/" in filename_base or "\\" in filename_base:
        raise ValidationError(
            "filename_base must not contain path separators",
            parameter_name="filename_base",
            parameter_value=filename_base,
        )


def to_ast(markdown_text: str, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse markdown into the export document model.

    Parameters
    ----------
    markdown_text : str
        Markdown source
    options : MarkdownParserOptions or None
        Parser options

    Returns
    -------
    Document
        Freshly built document

    Examples
    --------
        >>> doc = to_ast("# Jane Doe\\nBackend engineer")
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'Paragraph']

    """
    return MarkdownParser(options).parse(markdown_text)


def export_to_docx(
    markdown_text: str,
    filename_base: str,
    title: str = "",
    options: Optional[DocxRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> ExportResult:
    """Export markdown as a Word document.

    Parameters
    ----------
    markdown_text : str
        Markdown source (headings, bold, italic, bullet lists, paragraphs)
    filename_base : str
        Filename without extension, usually from
        :func:`~careerdoc.utils.filenames.generate_filename`
    title : str, default ""
        Document title. It is kept in ``Document.metadata`` for callers of
        the AST but is not written to the package, which has no
        ``docProps`` parts.
    options : DocxRendererOptions or None
        DOCX rendering options. The inherited ``creator`` field has no
        effect on DOCX output for the same reason.
    parser_options : MarkdownParserOptions or None
        Markdown parsing options

    Returns
    -------
    ExportResult
        ``.docx`` bytes with filename ``filename_base + ".docx"``

    Raises
    ------
    ValidationError
        If filename_base is empty or contains path separators, or an
        options object has the wrong type
    RenderingError
        If the package cannot be built

    Examples
    --------
        >>> result = export_to_docx("# Jane Doe", "Resume_SWE_Acme_2024-01-15")
        >>> result.filename
        'Resume_SWE_Acme_2024-01-15.docx'

    """
    _validate_filename_base(filename_base)

    with debug_timer(logger, "DOCX export"):
        try:
            document = to_ast(markdown_text, parser_options)
            if title:
                document.metadata["title"] = title
            data = DocxRenderer(options).render_to_bytes(document)
        except CareerDocError:
            raise
        except Exception as e:
            raise RenderingError(f"DOCX export failed: {e!r}", rendering_stage="export", original_error=e) from e

    return ExportResult(data=data, filename=filename_base + DOCX_EXTENSION, media_type=DOCX_MEDIA_TYPE)


def export_to_html(
    markdown_text: str,
    filename_base: str,
    title: str = "",
    options: Optional[HtmlRendererOptions] = None,
) -> ExportResult:
    """Export markdown as a print-ready HTML page.

    The page contains a print button and a print stylesheet, so opening it
    in a browser and printing produces a PDF.

    Parameters
    ----------
    markdown_text : str
        Markdown source
    filename_base : str
        Filename without extension
    title : str, default ""
        Page title; falls back to ``filename_base``
    options : HtmlRendererOptions or None
        HTML rendering options

    Returns
    -------
    ExportResult
        UTF-8 HTML bytes with filename ``filename_base + ".html"``

    Raises
    ------
    ValidationError
        If filename_base is invalid or the options have the wrong type
    RenderingError
        If the page cannot be rendered

    """
    _validate_filename_base(filename_base)

    with debug_timer(logger, "HTML export"):
        try:
            data = HtmlRenderer(options).render_to_bytes(markdown_text, title=title or filename_base)
        except CareerDocError:
            raise
        except Exception as e:
            raise RenderingError(f"HTML export failed: {e!r}", rendering_stage="export", original_error=e) from e

    return ExportResult(data=data, filename=filename_base + HTML_EXTENSION, media_type=HTML_MEDIA_TYPE)
