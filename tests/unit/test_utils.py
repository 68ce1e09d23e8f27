"""Unit tests for output writing, timing and logging helpers."""

import logging
from io import BytesIO, StringIO

import pytest

from careerdoc.logging_utils import configure_logging, resolve_log_level
from careerdoc.utils.decorators import debug_timer
from careerdoc.utils.io_utils import write_content


@pytest.mark.unit
class TestWriteContent:
    """Test writing rendered output to paths and streams."""

    def test_text_to_binary_stream(self):
        """Test that text is UTF-8 encoded for binary streams."""
        buffer = BytesIO()
        write_content("Grüße", buffer)
        assert buffer.getvalue() == "Grüße".encode("utf-8")

    def test_text_to_text_stream(self):
        """Test writing text to a text stream."""
        buffer = StringIO()
        write_content("<p>hi</p>", buffer)
        assert buffer.getvalue() == "<p>hi</p>"

    def test_bytes_to_text_stream_rejected(self):
        """Test that binary output cannot go to a text stream."""
        with pytest.raises(TypeError):
            write_content(b"PK", StringIO())

    def test_paths(self, tmp_path):
        """Test writing text and bytes to file paths."""
        write_content("text", tmp_path / "a.html")
        write_content(b"\x00\x01", str(tmp_path / "b.docx"))
        assert (tmp_path / "a.html").read_text(encoding="utf-8") == "text"
        assert (tmp_path / "b.docx").read_bytes() == b"\x00\x01"

    def test_unsupported_output(self):
        """Test that objects without write() are rejected."""
        with pytest.raises(TypeError):
            write_content("x", 42)


@pytest.mark.unit
class TestDebugTimer:
    """Test the timing context manager."""

    def test_logs_when_debug_enabled(self, caplog):
        """Test that elapsed time is logged at DEBUG."""
        logger = logging.getLogger("careerdoc.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="careerdoc.tests.timer"):
            with debug_timer(logger, "DOCX export"):
                pass
        assert any("DOCX export completed in" in record.message for record in caplog.records)

    def test_silent_otherwise(self, caplog):
        """Test that nothing is logged above DEBUG."""
        logger = logging.getLogger("careerdoc.tests.timer.quiet")
        with caplog.at_level(logging.WARNING, logger="careerdoc.tests.timer.quiet"):
            with debug_timer(logger, "HTML export"):
                pass
        assert not caplog.records


@pytest.mark.unit
@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    """Test CLI logging setup."""

    def test_level_by_name(self):
        """Test string level names."""
        package_logger = configure_logging("debug")
        assert package_logger.name == "careerdoc"
        assert package_logger.level == logging.DEBUG
        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.parametrize(
        "name,expected", [("info", logging.INFO), ("WARN", logging.WARNING), ("chatty", logging.WARNING)]
    )
    def test_resolve_log_level(self, name, expected):
        """Test level names, aliases and the fallback for unknown names."""
        assert resolve_log_level(name) == expected
        assert resolve_log_level(logging.ERROR) == logging.ERROR

    def test_debug_stays_in_package_namespace(self):
        """Test that a debug level does not enable debug output elsewhere."""
        configure_logging(logging.DEBUG)
        assert logging.getLogger("careerdoc.api").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("other_library").isEnabledFor(logging.DEBUG)
        assert logging.getLogger("other_library").isEnabledFor(logging.WARNING)

    def test_quiet_level_applies_everywhere(self):
        """Test that levels above WARNING also silence other libraries."""
        configure_logging("ERROR")
        assert not logging.getLogger("careerdoc.api").isEnabledFor(logging.WARNING)
        assert not logging.getLogger("other_library").isEnabledFor(logging.WARNING)

    def test_log_file(self, tmp_path):
        """Test teeing log output to a file."""
        log_file = tmp_path / "careerdoc.log"
        configure_logging(logging.INFO, log_file=str(log_file))
        root = logging.getLogger()
        assert len(root.handlers) == 2

        logging.getLogger("careerdoc.tests").info("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path, capsys):
        """Test that a bad log path only drops the file handler."""
        configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"))
        assert len(logging.getLogger().handlers) == 1
        assert "Could not open log file" in capsys.readouterr().err
