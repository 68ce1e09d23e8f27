"""Unit tests for the OOXML part builder and the DOCX renderer."""

import xml.etree.ElementTree as ET
import zipfile
from io import BytesIO

import pytest

from careerdoc.ast import BulletItem, Document, Heading, Paragraph, Run
from careerdoc.exceptions import InvalidOptionsError, RenderingError
from careerdoc.options import DocxRendererOptions, HtmlRendererOptions
from careerdoc.renderers.docx import DocxRenderer, OOXMLPartBuilder

W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
CT = "{http://schemas.openxmlformats.org/package/2006/content-types}"
REL = "{http://schemas.openxmlformats.org/package/2006/relationships}"

PART_ORDER = [
    "[Content_Types].xml",
    "_rels/.rels",
    "word/_rels/document.xml.rels",
    "word/document.xml",
    "word/styles.xml",
    "word/numbering.xml",
]


def _body(document: Document) -> ET.Element:
    xml = OOXMLPartBuilder().render_document_xml(document)
    return ET.fromstring(xml.encode("utf-8")).find(f"{W}body")


def _paragraphs(document: Document) -> list:
    return _body(document).findall(f"{W}p")


@pytest.mark.unit
class TestOOXMLPartBuilder:
    """Test the generated package parts."""

    def test_part_names_and_order(self):
        """Test that exactly six parts are produced in archive order."""
        parts = OOXMLPartBuilder().build(Document(children=[Paragraph(runs=[Run("Hi")])]))
        assert list(parts) == PART_ORDER
        assert all(isinstance(data, bytes) for data in parts.values())

    def test_every_part_is_well_formed(self):
        """Test that every part parses as XML."""
        doc = Document(children=[Heading(level=1, runs=[Run("A & B")]), BulletItem(runs=[Run("<x>")])])
        for name, data in OOXMLPartBuilder().build(doc).items():
            assert data.startswith(b"<?xml"), name
            ET.fromstring(data)

    def test_content_types(self):
        """Test defaults and overrides in the content types part."""
        root = ET.fromstring(OOXMLPartBuilder().build(Document())["[Content_Types].xml"])

        defaults = {el.get("Extension"): el.get("ContentType") for el in root.findall(f"{CT}Default")}
        assert defaults == {
            "rels": "application/vnd.openxmlformats-package.relationships+xml",
            "xml": "application/xml",
        }
        overrides = {el.get("PartName"): el.get("ContentType") for el in root.findall(f"{CT}Override")}
        assert overrides == {
            "/word/document.xml": "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml",
            "/word/styles.xml": "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml",
            "/word/numbering.xml": "application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml",
        }

    def test_relationships(self):
        """Test package and document relationships."""
        parts = OOXMLPartBuilder().build(Document())

        package_rels = ET.fromstring(parts["_rels/.rels"]).findall(f"{REL}Relationship")
        assert [rel.get("Target") for rel in package_rels] == ["word/document.xml"]
        assert package_rels[0].get("Type").endswith("/officeDocument")

        document_rels = ET.fromstring(parts["word/_rels/document.xml.rels"]).findall(f"{REL}Relationship")
        assert {rel.get("Target") for rel in document_rels} == {"styles.xml", "numbering.xml"}

    def test_styles_define_three_headings(self):
        """Test that Heading1-3 styles exist alongside Normal."""
        root = ET.fromstring(OOXMLPartBuilder().build(Document())["word/styles.xml"])
        style_ids = [style.get(f"{W}styleId") for style in root.findall(f"{W}style")]
        assert style_ids == ["Normal", "Heading1", "Heading2", "Heading3"]

    def test_numbering_defines_bullet(self):
        """Test the single bullet numbering definition."""
        root = ET.fromstring(OOXMLPartBuilder().build(Document())["word/numbering.xml"])
        level = root.find(f"{W}abstractNum/{W}lvl")
        assert level.find(f"{W}numFmt").get(f"{W}val") == "bullet"
        assert level.find(f"{W}lvlText").get(f"{W}val") == "•"
        num = root.find(f"{W}num")
        assert num.get(f"{W}numId") == "1"
        assert num.find(f"{W}abstractNumId").get(f"{W}val") == "0"

    @pytest.mark.parametrize("level", [1, 2, 3])
    def test_heading_paragraph_style(self, level):
        """Test that headings reference their heading style."""
        (paragraph,) = _paragraphs(Document(children=[Heading(level=level, runs=[Run("Title")])]))
        assert paragraph.find(f"{W}pPr/{W}pStyle").get(f"{W}val") == f"Heading{level}"

    def test_bullet_numbering_properties(self):
        """Test that bullet items reference numbering level 0 of list 1."""
        (paragraph,) = _paragraphs(Document(children=[BulletItem(runs=[Run("Python")])]))
        num_pr = paragraph.find(f"{W}pPr/{W}numPr")
        assert num_pr.find(f"{W}ilvl").get(f"{W}val") == "0"
        assert num_pr.find(f"{W}numId").get(f"{W}val") == "1"

    def test_plain_paragraph_has_no_properties(self):
        """Test that plain paragraphs carry no pPr."""
        (paragraph,) = _paragraphs(Document(children=[Paragraph(runs=[Run("Text")])]))
        assert paragraph.find(f"{W}pPr") is None

    def test_run_formatting(self):
        """Test bold, italic and plain run properties."""
        doc = Document(
            children=[
                Paragraph(
                    runs=[Run("plain"), Run("b", bold=True), Run("i", italic=True), Run("bi", bold=True, italic=True)]
                )
            ]
        )
        (paragraph,) = _paragraphs(doc)
        runs = paragraph.findall(f"{W}r")

        assert [run.find(f"{W}t").text for run in runs] == ["plain", "b", "i", "bi"]
        assert runs[0].find(f"{W}rPr") is None
        assert runs[1].find(f"{W}rPr/{W}b") is not None
        assert runs[1].find(f"{W}rPr/{W}i") is None
        assert runs[2].find(f"{W}rPr/{W}i") is not None
        assert runs[3].find(f"{W}rPr/{W}b") is not None
        assert runs[3].find(f"{W}rPr/{W}i") is not None

    def test_text_preserves_space(self):
        """Test that every text element keeps leading and trailing spaces."""
        (paragraph,) = _paragraphs(Document(children=[Paragraph(runs=[Run(" and ")])]))
        text = paragraph.find(f"{W}r/{W}t")
        assert text.text == " and "
        assert text.get("{http://www.w3.org/XML/1998/namespace}space") == "preserve"

    def test_special_characters_escaped(self):
        """Test that XML special characters survive as text."""
        xml = OOXMLPartBuilder().render_document_xml(Document(children=[Paragraph(runs=[Run("R&D <Team> \"A\" 'B'")])]))
        assert "R&amp;D &lt;Team&gt; &quot;A&quot; &apos;B&apos;" in xml

        (paragraph,) = _paragraphs(Document(children=[Paragraph(runs=[Run("R&D <Team>")])]))
        assert paragraph.find(f"{W}r/{W}t").text == "R&D <Team>"

    def test_invalid_characters_stripped(self):
        """Test that control characters do not break the document XML."""
        (paragraph,) = _paragraphs(Document(children=[Paragraph(runs=[Run("bell\x07here")])]))
        assert paragraph.find(f"{W}r/{W}t").text == "bellhere"

    def test_empty_run_is_emitted(self):
        """Test that an empty run still produces a w:r element."""
        (paragraph,) = _paragraphs(Document(children=[Paragraph(runs=[Run("", bold=True)])]))
        assert len(paragraph.findall(f"{W}r")) == 1

    def test_empty_document_has_one_empty_paragraph(self):
        """Test that an empty document renders a single empty paragraph."""
        body = _body(Document())
        paragraphs = body.findall(f"{W}p")
        assert len(paragraphs) == 1
        assert len(list(paragraphs[0])) == 0
        assert body.find(f"{W}sectPr") is not None

    def test_block_order_preserved(self):
        """Test that paragraphs appear in document order."""
        doc = Document(
            children=[
                Heading(level=1, runs=[Run("one")]),
                Paragraph(runs=[Run("two")]),
                BulletItem(runs=[Run("three")]),
            ]
        )
        texts = ["".join(t.text for t in p.iter(f"{W}t")) for p in _paragraphs(doc)]
        assert texts == ["one", "two", "three"]

    def test_builder_is_reusable(self):
        """Test that one builder renders independent documents."""
        builder = OOXMLPartBuilder()
        first = builder.render_document_xml(Document(children=[Paragraph(runs=[Run("first")])]))
        second = builder.render_document_xml(Document(children=[Paragraph(runs=[Run("second")])]))
        assert "first" not in second
        assert "second" in second and "first" in first


@pytest.mark.unit
class TestDocxRenderer:
    """Test packaging parts into a DOCX archive."""

    def test_render_to_bytes_is_zip(self):
        """Test that output is a stored ZIP with the six parts in order."""
        data = DocxRenderer().render_to_bytes(Document(children=[Paragraph(runs=[Run("Hi")])]))

        assert data[:4] == b"PK\x03\x04"
        with zipfile.ZipFile(BytesIO(data)) as zf:
            assert zf.namelist() == PART_ORDER
            assert zf.testzip() is None

    def test_render_to_stream_and_path(self, tmp_path):
        """Test render() with a binary stream and with a file path."""
        doc = Document(children=[Heading(level=1, runs=[Run("Title")])])
        expected = DocxRenderer().render_to_bytes(doc)

        buffer = BytesIO()
        DocxRenderer().render(doc, buffer)
        assert buffer.getvalue() == expected

        target = tmp_path / "out.docx"
        DocxRenderer().render(doc, target)
        assert target.read_bytes() == expected

    def test_output_is_deterministic(self):
        """Test that the same document always yields the same bytes."""
        doc = Document(children=[Paragraph(runs=[Run("same")])])
        assert DocxRenderer().render_to_bytes(doc) == DocxRenderer().render_to_bytes(doc)

    def test_wrong_options_type(self):
        """Test that HTML options are rejected by the DOCX renderer."""
        with pytest.raises(InvalidOptionsError):
            DocxRenderer(HtmlRendererOptions())

    def test_accepts_docx_options(self):
        """Test that DOCX options are accepted."""
        renderer = DocxRenderer(DocxRendererOptions(creator=None))
        assert renderer.options.creator is None

    def test_unexpected_error_wrapped(self, monkeypatch):
        """Test that internal failures surface as RenderingError."""

        def broken_build(self, document):
            raise RuntimeError("boom")

        monkeypatch.setattr(OOXMLPartBuilder, "build", broken_build)
        with pytest.raises(RenderingError) as exc_info:
            DocxRenderer().render_to_bytes(Document())

        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert exc_info.value.rendering_stage == "rendering"
