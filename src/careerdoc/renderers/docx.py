#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/renderers/docx.py
"""DOCX rendering from AST.

This module turns the export AST into a WordprocessingML package without
any document library:

- :class:`OOXMLPartBuilder` visits the AST and produces the six XML parts of
  the package (content types, two relationship parts, the main document and
  the fixed style and numbering definitions).
- :class:`DocxRenderer` packs those parts into a stored ZIP archive with
  :class:`~careerdoc.packagers.zip.ZipArchiveWriter`.

Every block becomes one ``<w:p>``; every run becomes one ``<w:r>`` whose text
is escaped. Headings reference the ``Heading1``-``Heading3`` styles and bullet
items reference the single bullet numbering definition.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from careerdoc.ast.nodes import BulletItem, Document, Heading, Paragraph, Run
from careerdoc.ast.visitors import NodeVisitor
from careerdoc.constants import (
    BULLET_ABSTRACT_NUM_ID,
    BULLET_INDENT_HANGING_TWIPS,
    BULLET_INDENT_LEFT_TWIPS,
    BULLET_LEVEL_TEXT,
    BULLET_NUM_ID,
    CONTENT_TYPE_DOCUMENT_MAIN,
    CONTENT_TYPE_NUMBERING,
    CONTENT_TYPE_RELATIONSHIPS,
    CONTENT_TYPE_STYLES,
    CONTENT_TYPE_XML,
    HEADING_STYLE_IDS,
    NS_CONTENT_TYPES,
    NS_PACKAGE_RELATIONSHIPS,
    NS_WORDPROCESSINGML,
    OOXML_CONTENT_TYPES_PART,
    OOXML_DOCUMENT_PART,
    OOXML_DOCUMENT_RELS_PART,
    OOXML_NUMBERING_PART,
    OOXML_PACKAGE_RELS_PART,
    OOXML_STYLES_PART,
    REL_TYPE_NUMBERING,
    REL_TYPE_OFFICE_DOCUMENT,
    REL_TYPE_STYLES,
)
from careerdoc.exceptions import CareerDocError, RenderingError
from careerdoc.options.docx import DocxRendererOptions
from careerdoc.packagers.zip import ZipArchiveWriter
from careerdoc.renderers.base import BaseRenderer
from careerdoc.utils.escape import escape_xml, strip_invalid_xml_chars

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'

CONTENT_TYPES_XML = (
    XML_DECLARATION + f'<Types xmlns="{NS_CONTENT_TYPES}">'
    f'<Default Extension="rels" ContentType="{CONTENT_TYPE_RELATIONSHIPS}"/>'
    f'<Default Extension="xml" ContentType="{CONTENT_TYPE_XML}"/>'
    f'<Override PartName="/{OOXML_DOCUMENT_PART}" ContentType="{CONTENT_TYPE_DOCUMENT_MAIN}"/>'
    f'<Override PartName="/{OOXML_STYLES_PART}" ContentType="{CONTENT_TYPE_STYLES}"/>'
    f'<Override PartName="/{OOXML_NUMBERING_PART}" ContentType="{CONTENT_TYPE_NUMBERING}"/>'
    "</Types>"
)

PACKAGE_RELS_XML = (
    XML_DECLARATION + f'<Relationships xmlns="{NS_PACKAGE_RELATIONSHIPS}">'
    f'<Relationship Id="rId1" Type="{REL_TYPE_OFFICE_DOCUMENT}" Target="{OOXML_DOCUMENT_PART}"/>'
    "</Relationships>"
)

# Targets are relative to word/
DOCUMENT_RELS_XML = (
    XML_DECLARATION + f'<Relationships xmlns="{NS_PACKAGE_RELATIONSHIPS}">'
    f'<Relationship Id="rId1" Type="{REL_TYPE_STYLES}" Target="styles.xml"/>'
    f'<Relationship Id="rId2" Type="{REL_TYPE_NUMBERING}" Target="numbering.xml"/>'
    "</Relationships>"
)

STYLES_XML = (
    XML_DECLARATION + f'<w:styles xmlns:w="{NS_WORDPROCESSINGML}">'
    "<w:docDefaults>"
    "<w:rPrDefault><w:rPr>"
    '<w:rFonts w:ascii="Calibri" w:hAnsi="Calibri" w:eastAsia="Calibri" w:cs="Calibri"/>'
    '<w:sz w:val="22"/><w:szCs w:val="22"/>'
    "</w:rPr></w:rPrDefault>"
    '<w:pPrDefault><w:pPr><w:spacing w:after="120" w:line="264" w:lineRule="auto"/></w:pPr></w:pPrDefault>'
    "</w:docDefaults>"
    '<w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
    '<w:name w:val="Normal"/><w:qFormat/>'
    "</w:style>"
    '<w:style w:type="paragraph" w:styleId="Heading1">'
    '<w:name w:val="heading 1"/><w:basedOn w:val="Normal"/><w:next w:val="Normal"/><w:qFormat/>'
    '<w:pPr><w:keepNext/><w:spacing w:before="240" w:after="120"/><w:outlineLvl w:val="0"/></w:pPr>'
    '<w:rPr><w:b/><w:sz w:val="32"/><w:szCs w:val="32"/></w:rPr>'
    "</w:style>"
    '<w:style w:type="paragraph" w:styleId="Heading2">'
    '<w:name w:val="heading 2"/><w:basedOn w:val="Normal"/><w:next w:val="Normal"/><w:qFormat/>'
    '<w:pPr><w:keepNext/><w:spacing w:before="200" w:after="100"/><w:outlineLvl w:val="1"/></w:pPr>'
    '<w:rPr><w:b/><w:sz w:val="28"/><w:szCs w:val="28"/></w:rPr>'
    "</w:style>"
    '<w:style w:type="paragraph" w:styleId="Heading3">'
    '<w:name w:val="heading 3"/><w:basedOn w:val="Normal"/><w:next w:val="Normal"/><w:qFormat/>'
    '<w:pPr><w:keepNext/><w:spacing w:before="160" w:after="80"/><w:outlineLvl w:val="2"/></w:pPr>'
    '<w:rPr><w:b/><w:sz w:val="24"/><w:szCs w:val="24"/></w:rPr>'
    "</w:style>"
    "</w:styles>"
)

NUMBERING_XML = (
    XML_DECLARATION + f'<w:numbering xmlns:w="{NS_WORDPROCESSINGML}">'
    f'<w:abstractNum w:abstractNumId="{BULLET_ABSTRACT_NUM_ID}">'
    '<w:multiLevelType w:val="singleLevel"/>'
    '<w:lvl w:ilvl="0">'
    '<w:start w:val="1"/>'
    '<w:numFmt w:val="bullet"/>'
    f'<w:lvlText w:val="{BULLET_LEVEL_TEXT}"/>'
    '<w:lvlJc w:val="left"/>'
    f'<w:pPr><w:ind w:left="{BULLET_INDENT_LEFT_TWIPS}" w:hanging="{BULLET_INDENT_HANGING_TWIPS}"/></w:pPr>'
    "</w:lvl>"
    "</w:abstractNum>"
    f'<w:num w:numId="{BULLET_NUM_ID}"><w:abstractNumId w:val="{BULLET_ABSTRACT_NUM_ID}"/></w:num>'
    "</w:numbering>"
)

# US Letter with one-inch margins, in twips
SECTION_PROPERTIES_XML = (
    "<w:sectPr>"
    '<w:pgSz w:w="12240" w:h="15840"/>'
    '<w:pgMar w:top="1440" w:right="1440" w:bottom="1440" w:left="1440" '
    'w:header="720" w:footer="720" w:gutter="0"/>'
    "</w:sectPr>"
)

EMPTY_PARAGRAPH_XML = "<w:p/>"


class OOXMLPartBuilder(NodeVisitor):
    """Build the named XML parts of a WordprocessingML package.

    The builder is a visitor over the export AST. Only ``word/document.xml``
    depends on the document; every other part is fixed.

    Examples
    --------
        >>> from careerdoc.ast import Document, Paragraph, Run
        >>> parts = OOXMLPartBuilder().build(Document(children=[Paragraph(runs=[Run("Hi")])]))
        >>> list(parts)
        ['[Content_Types].xml', '_rels/.rels', 'word/_rels/document.xml.rels', \
'word/document.xml', 'word/styles.xml', 'word/numbering.xml']

    """

    def __init__(self) -> None:
        """Initialize the builder."""
        self._output: list[str] = []

    def build(self, document: Document) -> dict[str, bytes]:
        """Render every package part for a document.

        Parameters
        ----------
        document : Document
            Document to render

        Returns
        -------
        dict[str, bytes]
            UTF-8 encoded parts keyed by package path, in archive order

        """
        parts = {
            OOXML_CONTENT_TYPES_PART: CONTENT_TYPES_XML,
            OOXML_PACKAGE_RELS_PART: PACKAGE_RELS_XML,
            OOXML_DOCUMENT_RELS_PART: DOCUMENT_RELS_XML,
            OOXML_DOCUMENT_PART: self.render_document_xml(document),
            OOXML_STYLES_PART: STYLES_XML,
            OOXML_NUMBERING_PART: NUMBERING_XML,
        }
        return {path: xml.encode("utf-8") for path, xml in parts.items()}

    def render_document_xml(self, document: Document) -> str:
        """Render ``word/document.xml`` for a document."""
        self._output = []
        document.accept(self)
        return "".join(self._output)

    def visit_document(self, node: Document) -> None:
        """Render the document body; an empty document gets one empty paragraph."""
        self._output.append(XML_DECLARATION)
        self._output.append(f'<w:document xmlns:w="{NS_WORDPROCESSINGML}"><w:body>')

        if node.is_empty:
            logger.debug("Document has no blocks, rendering a single empty paragraph")
            self._output.append(EMPTY_PARAGRAPH_XML)
        for child in node.children:
            child.accept(self)

        self._output.append(SECTION_PROPERTIES_XML)
        self._output.append("</w:body></w:document>")

    def visit_heading(self, node: Heading) -> None:
        """Render a heading as a paragraph using the matching heading style."""
        style_id = HEADING_STYLE_IDS[node.level]
        self._render_paragraph(node.runs, f'<w:pPr><w:pStyle w:val="{style_id}"/></w:pPr>')

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a plain paragraph."""
        self._render_paragraph(node.runs)

    def visit_bullet_item(self, node: BulletItem) -> None:
        """Render a bullet item as a paragraph referencing the bullet list."""
        properties = f'<w:pPr><w:numPr><w:ilvl w:val="0"/><w:numId w:val="{BULLET_NUM_ID}"/></w:numPr></w:pPr>'
        self._render_paragraph(node.runs, properties)

    def visit_run(self, node: Run) -> None:
        """Render a run; empty runs are still emitted."""
        text = escape_xml(strip_invalid_xml_chars(node.text))
        properties = ""
        if not node.is_plain:
            flags = ("<w:b/>" if node.bold else "") + ("<w:i/>" if node.italic else "")
            properties = f"<w:rPr>{flags}</w:rPr>"
        self._output.append(f'<w:r>{properties}<w:t xml:space="preserve">{text}</w:t></w:r>')

    def _render_paragraph(self, runs: list[Run], properties: str = "") -> None:
        self._output.append(f"<w:p>{properties}")
        for run in runs:
            run.accept(self)
        self._output.append("</w:p>")


class DocxRenderer(BaseRenderer):
    """Render AST documents to DOCX bytes.

    Parameters
    ----------
    options : DocxRendererOptions or None, default = None
        DOCX rendering options

    Examples
    --------
        >>> from careerdoc.ast import Document, Heading, Run
        >>> doc = Document(children=[Heading(level=1, runs=[Run("Title")])])
        >>> data = DocxRenderer().render_to_bytes(doc)
        >>> data[:2]
        b'PK'

    """

    def __init__(self, options: DocxRendererOptions | None = None):
        """Initialize the DOCX renderer with options."""
        BaseRenderer._validate_options_type(options, DocxRendererOptions, "docx")
        options = options or DocxRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: DocxRendererOptions = options

    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the AST to a DOCX file or binary stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO[bytes]
            Output destination

        Raises
        ------
        RenderingError
            If DOCX generation fails

        """
        self.write_binary_output(self.render_to_bytes(doc), output)

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the AST to DOCX bytes.

        The archive is built completely in memory; on failure nothing is
        returned.

        Raises
        ------
        RenderingError
            If DOCX generation fails

        """
        try:
            parts = OOXMLPartBuilder().build(doc)
            writer = ZipArchiveWriter()
            for path, data in parts.items():
                writer.add_entry(path, data)
            archive = writer.generate()
        except CareerDocError:
            raise
        except Exception as e:
            raise RenderingError(f"Failed to render DOCX: {e!r}", rendering_stage="rendering", original_error=e) from e

        logger.debug(f"Rendered DOCX package with {len(doc.children)} blocks ({len(archive)} bytes)")
        return archive
