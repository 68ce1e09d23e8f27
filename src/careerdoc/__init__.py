#  Copyright (c) 2025 Tom Villani, Ph.D.
"""careerdoc - Export markdown resumes and cover letters to DOCX and HTML.

careerdoc turns the small markdown dialect used for generated resumes and
cover letters (headings, bold, italic, bullet lists and plain paragraphs)
into two self-contained outputs without any document or archive library:

- a Word document (``.docx``): the markdown is parsed into a small AST,
  rendered to WordprocessingML parts and packed into a stored ZIP archive
  with its own CRC-32 and central directory writer
- a print-ready HTML page: the markdown is converted by an ordered pipeline
  of string stages and wrapped in a page with a print stylesheet and a
  "Print / Save PDF" button

Export filenames are built deterministically from the document type, the
job title, the company and the date.

Examples
--------
Export a resume:

    >>> from careerdoc import export_to_docx, generate_filename
    >>> name = generate_filename("Resume", "Senior SWE", "PAYBACK GmbH")
    >>> result = export_to_docx("# Jane Doe\\n- **Python**", name)
    >>> result.write("exports")

Inspect the parsed document:

    >>> from careerdoc import to_ast
    >>> to_ast("## Skills").children[0].level
    2

"""

from __future__ import annotations

__version__ = "1.0.0"

from careerdoc.api import ExportResult, export_to_docx, export_to_html, to_ast
from careerdoc.ast import BulletItem, Document, Heading, Paragraph, Run
from careerdoc.exceptions import (
    ArchiveError,
    CareerDocError,
    ConfigError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from careerdoc.options import DocxRendererOptions, HtmlRendererOptions, MarkdownParserOptions
from careerdoc.utils.filenames import generate_filename, sanitize_filename_field

__all__ = [
    "__version__",
    # Export entry points
    "ExportResult",
    "export_to_docx",
    "export_to_html",
    "to_ast",
    "generate_filename",
    "sanitize_filename_field",
    # AST
    "BulletItem",
    "Document",
    "Heading",
    "Paragraph",
    "Run",
    # Options
    "DocxRendererOptions",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "ArchiveError",
    "CareerDocError",
    "ConfigError",
    "InvalidOptionsError",
    "OutputWriteError",
    "RenderingError",
    "ValidationError",
]
