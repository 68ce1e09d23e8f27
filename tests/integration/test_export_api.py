"""Integration tests for the public export functions."""

import dataclasses
import zipfile
from concurrent.futures import ThreadPoolExecutor
from io import BytesIO

import pytest

from careerdoc import (
    ExportResult,
    OutputWriteError,
    RenderingError,
    ValidationError,
    export_to_docx,
    export_to_html,
    generate_filename,
    to_ast,
)
from careerdoc.ast import Heading
from careerdoc.options import HtmlRendererOptions, MarkdownParserOptions

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.mark.integration
class TestExportToDocx:
    """Test DOCX export through the public API."""

    def test_result(self, resume_markdown):
        """Test the filename, media type and archive contents."""
        result = export_to_docx(resume_markdown, "Resume_SWE_Acme_2024-01-15", title="Resume - SWE")

        assert isinstance(result, ExportResult)
        assert result.filename == "Resume_SWE_Acme_2024-01-15.docx"
        assert result.media_type == DOCX_MEDIA_TYPE
        assert result.size == len(result.data)
        with zipfile.ZipFile(BytesIO(result.data)) as zf:
            assert zf.testzip() is None
            document_xml = zf.read("word/document.xml").decode("utf-8")
        assert "Jane Doe" in document_xml
        assert "Cut latency by 40% &amp; costs by 20%" in document_xml
        assert 'w:val="Heading3"' in document_xml

    def test_title_not_written_to_package(self):
        """Test that a title adds no document properties part."""
        with_title = export_to_docx("# x", "Doc", title="Unique Title 42")
        without_title = export_to_docx("# x", "Doc")

        assert with_title.data == without_title.data
        with zipfile.ZipFile(BytesIO(with_title.data)) as zf:
            assert not any(name.startswith("docProps/") for name in zf.namelist())
            assert len(zf.namelist()) == 6

    def test_empty_markdown(self):
        """Test that empty input still yields a valid document."""
        result = export_to_docx("", "Empty")
        with zipfile.ZipFile(BytesIO(result.data)) as zf:
            assert "<w:p/>" in zf.read("word/document.xml").decode("utf-8")

    def test_parser_options(self):
        """Test that parser options reach the parser."""
        result = export_to_docx("[a](b)", "Links", parser_options=MarkdownParserOptions(strip_links=False))
        with zipfile.ZipFile(BytesIO(result.data)) as zf:
            assert "[a](b)" in zf.read("word/document.xml").decode("utf-8")

    @pytest.mark.parametrize("filename_base", ["", "   ", "dir/name", "dir\\name"])
    def test_invalid_filename_base(self, filename_base):
        """Test that unusable filename bases are rejected."""
        with pytest.raises(ValidationError):
            export_to_docx("# x", filename_base)

    def test_unexpected_error_wrapped(self, monkeypatch):
        """Test that internal failures surface as RenderingError."""

        def broken_parse(self, markdown):
            raise RuntimeError("boom")

        monkeypatch.setattr("careerdoc.api.MarkdownParser.parse", broken_parse)
        with pytest.raises(RenderingError) as exc_info:
            export_to_docx("# x", "Broken")
        assert exc_info.value.rendering_stage == "export"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_concurrent_exports_are_independent(self, resume_markdown):
        """Test that parallel exports give identical bytes."""
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: export_to_docx(resume_markdown, "Same").data, range(8)))
        assert len(set(results)) == 1


@pytest.mark.integration
class TestExportToHtml:
    """Test HTML export through the public API."""

    def test_result(self, resume_markdown):
        """Test the filename, media type and page contents."""
        result = export_to_html(resume_markdown, "Resume_SWE_Acme_2024-01-15", title="Resume - SWE")
        page = result.data.decode("utf-8")

        assert result.filename == "Resume_SWE_Acme_2024-01-15.html"
        assert result.media_type == "text/html;charset=utf-8"
        assert "<title>Resume - SWE</title>" in page
        assert "<h3>Acme Corp</h3>" in page
        assert "<li>Cut latency by 40% &amp; costs by 20%</li>" in page
        assert "<p></p>" not in page

    def test_title_falls_back_to_filename(self):
        """Test the title default."""
        page = export_to_html("x", "CoverLetter_SWE_Acme_2024-01-15").data.decode("utf-8")
        assert "<title>CoverLetter_SWE_Acme_2024-01-15</title>" in page

    def test_options(self):
        """Test that renderer options are applied."""
        page = export_to_html("x", "Page", options=HtmlRendererOptions(show_toolbar=False)).data.decode("utf-8")
        assert "printBtn" not in page

    def test_unexpected_error_wrapped(self, monkeypatch):
        """Test that internal failures surface as RenderingError."""

        def broken_render(self, doc, title=""):
            raise KeyError("boom")

        monkeypatch.setattr("careerdoc.api.HtmlRenderer.render_to_bytes", broken_render)
        with pytest.raises(RenderingError):
            export_to_html("x", "Broken")


@pytest.mark.integration
class TestExportResult:
    """Test persisting export results."""

    def test_write_creates_directory(self, tmp_path):
        """Test writing into a directory that does not exist yet."""
        result = export_to_html("# Hi", generate_filename("Resume", "SWE", "Acme"))
        path = result.write(tmp_path / "exports")

        assert path == tmp_path / "exports" / result.filename
        assert path.read_bytes() == result.data

    def test_write_failure(self, tmp_path):
        """Test that write errors become OutputWriteError."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file", encoding="utf-8")

        with pytest.raises(OutputWriteError) as exc_info:
            ExportResult(data=b"x", filename="a.html", media_type="text/html").write(blocker)
        assert exc_info.value.file_path.endswith("a.html")

    def test_frozen(self):
        """Test that results are immutable."""
        result = ExportResult(data=b"x", filename="a.html", media_type="text/html")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.filename = "b.html"


@pytest.mark.integration
def test_to_ast():
    """Test that to_ast exposes the parsed document."""
    doc = to_ast("#### Deep\ntext")
    assert isinstance(doc.children[0], Heading)
    assert doc.children[0].level == 3
    assert doc.plain_text() == "Deep\ntext"
