#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/renderers/html.py
"""Print-ready HTML rendering from markdown.

This is the fallback path for PDF export: the markdown is converted to
semantic HTML and wrapped in a self-contained page with a print stylesheet
and a "Print / Save PDF" button, so the host browser's print pipeline
produces the PDF.

Unlike the DOCX path this renderer does not build an AST. Conversion is an
explicit, ordered pipeline of pure string-to-string stages (see
:data:`HTML_PIPELINE`). The order matters:

1. ``strip_code_fences``     - drop ``` fence lines, keep the fenced text
2. ``strip_inline_code``     - `code` -> code
3. ``drop_horizontal_rules`` - remove ---, ***, ___ lines
4. ``escape_special_chars``  - escape &, <, >, " before any tag is added
5. ``convert_headings``      - #, ##, ### -> h1..h3
6. ``convert_bold_italic``   - ***x*** -> <strong><em>
7. ``convert_bold``          - **x** -> <strong>
8. ``convert_italic``        - *x* -> <em>
9. ``convert_list_items``    - "- x" / "* x" -> <li>
10. ``group_list_items``     - consecutive <li> lines -> one <ul>
11. ``wrap_paragraphs``      - remaining non-empty lines -> <p>

Bold italic runs before bold so ``***x***`` nests its tags properly. Italic
runs after bold so ``**x**`` is never read as two italics, and list
items run after italic because the italic pattern requires a non-space
character after the opening asterisk, which a ``* item`` marker never has.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Callable, Union
from urllib.parse import quote

from careerdoc.options.html import HtmlRendererOptions
from careerdoc.renderers.base import BaseRenderer
from careerdoc.utils.escape import escape_html

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"^[ \t]*(```|~~~).*$", re.MULTILINE)
_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_HORIZONTAL_RULE = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$", re.MULTILINE)
_HEADING = re.compile(r"^[ \t]*(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE)
_BOLD_ITALIC = re.compile(r"\*\*\*(.+?)\*\*\*")
_BOLD = re.compile(r"\*\*(.+?)\*\*")
_ITALIC = re.compile(r"\*(?![\s*])([^*\n]*?[^\s*])\*")
_LIST_ITEM = re.compile(r"^[ \t]*[-*][ \t]+(\S.*?)[ \t]*$", re.MULTILINE)
_BLOCK_TAG = re.compile(r"^<(h[1-6]|ul|/ul|li)\b")
_BLANK_RUN = re.compile(r"\n{3,}")

Stage = Callable[[str], str]


def strip_code_fences(text: str) -> str:
    """Remove fence lines, keeping the fenced content as ordinary lines."""
    return _CODE_FENCE.sub("", text)


def strip_inline_code(text: str) -> str:
    """Remove backticks around inline code spans."""
    return _INLINE_CODE.sub(r"\1", text)


def drop_horizontal_rules(text: str) -> str:
    """Blank out horizontal rule lines."""
    return _HORIZONTAL_RULE.sub("", text)


def escape_special_chars(text: str) -> str:
    """Escape HTML special characters in the source text.

    Quotes are escaped too; markdown markers (``#``, ``*``, ``-``) are left
    alone for the later stages.
    """
    return escape_html(text, quote=True)


def convert_headings(text: str) -> str:
    """Convert ATX headings to h1-h3; deeper levels are clamped to h3."""

    def replace(match: re.Match[str]) -> str:
        # Levels 4-6 are clamped to h3, matching the DOCX path
        level = min(len(match.group(1)), 3)
        return f"<h{level}>{match.group(2)}</h{level}>"

    return _HEADING.sub(replace, text)


def convert_bold_italic(text: str) -> str:
    """Convert ``***x***`` to ``<strong><em>x</em></strong>``."""
    return _BOLD_ITALIC.sub(r"<strong><em>\1</em></strong>", text)


def convert_bold(text: str) -> str:
    """Convert ``**x**`` to ``<strong>x</strong>``."""
    return _BOLD.sub(r"<strong>\1</strong>", text)


def convert_italic(text: str) -> str:
    """Convert ``*x*`` to ``<em>x</em>`` when the asterisks hug the text."""
    return _ITALIC.sub(r"<em>\1</em>", text)


def convert_list_items(text: str) -> str:
    """Convert ``- x`` and ``* x`` lines to list items."""
    return _LIST_ITEM.sub(r"<li>\1</li>", text)


def group_list_items(text: str) -> str:
    """Wrap each run of consecutive ``<li>`` lines in a single ``<ul>``."""
    output: list[str] = []
    in_list = False
    for line in text.split("\n"):
        is_item = line.startswith("<li>")
        if is_item and not in_list:
            output.append("<ul>")
            in_list = True
        elif not is_item and in_list:
            output.append("</ul>")
            in_list = False
        output.append(line)
    if in_list:
        output.append("</ul>")
    return "\n".join(output)


def wrap_paragraphs(text: str) -> str:
    """Wrap every remaining non-empty line in ``<p>``; drop empty lines.

    Lines that already are block elements are kept as they are. No empty
    paragraph is ever produced.
    """
    output: list[str] = []
    for line in _BLANK_RUN.sub("\n\n", text).split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if _BLOCK_TAG.match(stripped):
            output.append(stripped)
        else:
            output.append(f"<p>{stripped}</p>")
    return "\n".join(output)


HTML_PIPELINE: tuple[Stage, ...] = (
    strip_code_fences,
    strip_inline_code,
    drop_horizontal_rules,
    escape_special_chars,
    convert_headings,
    convert_bold_italic,
    convert_bold,
    convert_italic,
    convert_list_items,
    group_list_items,
    wrap_paragraphs,
)


def markdown_to_html(markdown: str) -> str:
    """Convert markdown to an HTML fragment.

    Parameters
    ----------
    markdown : str
        Markdown source

    Returns
    -------
    str
        HTML fragment, one block element per line; empty for empty input

    Examples
    --------
        >>> markdown_to_html("Hello world")
        '<p>Hello world</p>'
        >>> markdown_to_html("## Skills\\n- **Python**")
        '<h2>Skills</h2>\\n<ul>\\n<li><strong>Python</strong></li>\\n</ul>'

    """
    if not markdown:
        return ""

    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    for stage in HTML_PIPELINE:
        text = stage(text)
    return text


def html_data_url(html_content: Union[str, bytes]) -> str:
    """Build a ``data:`` URL that opens the page directly in a browser tab.

    Parameters
    ----------
    html_content : str or bytes
        Complete HTML page; bytes are decoded as UTF-8

    Returns
    -------
    str
        ``data:text/html;charset=utf-8,`` followed by the percent-encoded page

    """
    if isinstance(html_content, bytes):
        html_content = html_content.decode("utf-8")
    return "data:text/html;charset=utf-8," + quote(html_content, safe="")


PRINT_STYLESHEET = """
* { margin: 0; padding: 0; box-sizing: border-box; }

body {
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
    font-size: 11pt;
    line-height: 1.6;
    color: #1a1a1a;
    padding: 40px;
    max-width: 800px;
    margin: 0 auto;
    background: white;
}

h1 {
    font-size: 20pt;
    font-weight: 700;
    margin-bottom: 12pt;
    color: #111;
    border-bottom: 2px solid #333;
    padding-bottom: 6pt;
}

h2 {
    font-size: 14pt;
    font-weight: 600;
    margin-top: 16pt;
    margin-bottom: 8pt;
    color: #222;
    border-bottom: 1px solid #ddd;
    padding-bottom: 4pt;
}

h3 {
    font-size: 12pt;
    font-weight: 600;
    margin-top: 12pt;
    margin-bottom: 6pt;
    color: #333;
}

p { margin-bottom: 10pt; }
ul { margin-left: 20pt; margin-bottom: 10pt; }
li { margin-bottom: 4pt; }
strong { font-weight: 600; }
em { font-style: italic; }

.toolbar {
    position: fixed;
    top: 0; left: 0; right: 0;
    background: linear-gradient(135deg, #6366f1, #8b5cf6);
    color: white;
    padding: 15px 25px;
    display: flex;
    justify-content: space-between;
    align-items: center;
    z-index: 1000;
    box-shadow: 0 2px 15px rgba(0,0,0,0.2);
}

.toolbar-text { font-size: 14px; }

.toolbar-btn {
    background: white;
    color: #6366f1;
    border: none;
    padding: 10px 20px;
    border-radius: 8px;
    font-weight: 600;
    font-size: 14px;
    cursor: pointer;
}

.toolbar-btn:hover { background: #f0f0f0; }

.with-toolbar .content { margin-top: 70px; }

@media print {
    .toolbar { display: none !important; }
    .with-toolbar .content { margin-top: 0; }
    body { padding: 0; }
}
"""

PRINT_SCRIPT = """
document.getElementById('printBtn').addEventListener('click', function () {
    window.print();
});
"""


class HtmlRenderer(BaseRenderer):
    """Render markdown to a self-contained, print-ready HTML page.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> renderer = HtmlRenderer()
        >>> page = renderer.render_to_string("# Jane Doe", title="Resume")
        >>> "<h1>Jane Doe</h1>" in page
        True

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def render_to_string(self, markdown: str, title: str = "") -> str:
        """Render markdown to a complete HTML page.

        Parameters
        ----------
        markdown : str
            Markdown source
        title : str, default ""
            Page title; "Document" when empty

        Returns
        -------
        str
            Complete HTML document

        """
        content = markdown_to_html(markdown)
        if not content:
            logger.debug("Markdown produced no HTML content, showing the empty message")
            content = f"<p>{escape_html(self.options.empty_message)}</p>"
        return self._wrap_in_document(content, title or "Document")

    def render(self, doc: str, output: Union[str, Path, IO[bytes]], title: str = "") -> None:
        """Render markdown to HTML and write it to output as UTF-8.

        Parameters
        ----------
        doc : str
            Markdown source
        output : str, Path, or IO[bytes]
            Output destination
        title : str, default ""
            Page title

        """
        self.write_text_output(self.render_to_string(doc, title=title), output)

    def render_to_bytes(self, doc: str, title: str = "") -> bytes:
        """Render markdown to UTF-8 encoded HTML bytes."""
        return self.render_to_string(doc, title=title).encode("utf-8")

    def _wrap_in_document(self, content: str, title: str) -> str:
        """Wrap rendered content in the print page shell."""
        options = self.options
        body_class = ' class="with-toolbar"' if options.show_toolbar else ""

        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        ]
        if options.creator:
            parts.append(f'<meta name="generator" content="{escape_html(options.creator)}">')
        parts.append(f"<title>{escape_html(title)}</title>")
        parts.append("<style>")
        parts.append(PRINT_STYLESHEET)
        parts.append("</style>")
        parts.append("</head>")
        parts.append(f"<body{body_class}>")

        if options.show_toolbar:
            parts.append('<div class="toolbar">')
            parts.append(f'<span class="toolbar-text">{escape_html(options.toolbar_text)}</span>')
            parts.append(
                f'<button class="toolbar-btn" id="printBtn" type="button">'
                f"{escape_html(options.print_button_label)}</button>"
            )
            parts.append("</div>")

        parts.append('<div class="content">')
        parts.append(content)
        parts.append("</div>")

        if options.show_toolbar:
            parts.append("<script>")
            parts.append(PRINT_SCRIPT)
            parts.append("</script>")

        parts.append("</body>")
        parts.append("</html>")

        return "\n".join(parts)
