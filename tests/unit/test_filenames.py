"""Tests for deterministic export filename generation.

Test Coverage:
- Worked examples for resumes and cover letters
- Missing, empty and fully stripped fields
- Truncation of job title and company
- Property: generated names are always filesystem safe
"""

import re
from datetime import date, datetime, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from careerdoc.utils.filenames import generate_filename, sanitize_filename_field

TODAY = date(2024, 1, 15)
SAFE_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


@pytest.mark.unit
class TestSanitizeFilenameField:
    """Test cleaning of a single filename component."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Senior SWE!!", "Senior_SWE"),
            ("PAYBACK GmbH", "PAYBACK_GmbH"),
            ("  Data   Scientist  ", "Data_Scientist"),
            ("Full-Stack Dev", "Full-Stack_Dev"),
            ("C++ / C# Engineer", "C_C_Engineer"),
            ("Müller & Söhne", "Mller_Shne"),
        ],
    )
    def test_cleaning(self, value, expected):
        """Test character removal and whitespace collapsing."""
        assert sanitize_filename_field(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "!!!", "日本語"])
    def test_empty_becomes_default(self, value):
        """Test that nothing usable falls back to 'document'."""
        assert sanitize_filename_field(value) == "document"

    def test_truncation(self):
        """Test the 30 character limit."""
        assert sanitize_filename_field("A" * 50) == "A" * 30

    def test_truncation_strips_trailing_underscore(self):
        """Test that a cut right after a space does not leave a trailing underscore."""
        value = "x" * 29 + " tail"
        assert sanitize_filename_field(value) == "x" * 29

    def test_no_truncation(self):
        """Test that max_length=None keeps the whole value."""
        assert sanitize_filename_field("Cover Letter " * 5, max_length=None) == "_".join(["Cover_Letter"] * 5)


@pytest.mark.unit
class TestGenerateFilename:
    """Test full filename generation."""

    def test_resume_example(self):
        """Test the standard resume filename."""
        assert generate_filename("Resume", "Senior SWE!!", "PAYBACK GmbH", TODAY) == (
            "Resume_Senior_SWE_PAYBACK_GmbH_2024-01-15"
        )

    def test_empty_job_and_company(self):
        """Test placeholders for missing job metadata."""
        assert generate_filename("Resume", "", "", TODAY) == "Resume_document_document_2024-01-15"

    def test_cover_letter(self):
        """Test the cover letter type."""
        assert generate_filename("CoverLetter", "Backend Engineer", "Acme", TODAY) == (
            "CoverLetter_Backend_Engineer_Acme_2024-01-15"
        )

    def test_deterministic(self):
        """Test that the same inputs give the same name."""
        first = generate_filename("Resume", "SWE", "Acme", TODAY)
        second = generate_filename("Resume", "SWE", "Acme", TODAY)
        assert first == second

    def test_defaults_to_utc_today(self, monkeypatch):
        """Test that the current UTC date is used when none is given."""

        class FrozenClock(datetime):
            @classmethod
            def now(cls, tz=None):
                return datetime(2024, 1, 15, 23, 30, tzinfo=timezone.utc).astimezone(tz)

        monkeypatch.setattr("careerdoc.utils.filenames.datetime", FrozenClock)
        assert generate_filename("Resume", "SWE", "Acme") == "Resume_SWE_Acme_2024-01-15"

    def test_long_fields_truncated(self):
        """Test that long job titles and company names are capped."""
        name = generate_filename("Resume", "J" * 100, "C" * 100, TODAY)
        assert name == f"Resume_{'J' * 30}_{'C' * 30}_2024-01-15"

    @pytest.mark.fuzzing
    @given(
        st.one_of(st.none(), st.text(max_size=100)),
        st.one_of(st.none(), st.text(max_size=100)),
        st.one_of(st.none(), st.text(max_size=100)),
    )
    def test_always_safe(self, doc_type, job, company):
        """Property: any input produces a safe name with four components."""
        name = generate_filename(doc_type, job, company, TODAY)

        assert SAFE_NAME.match(name)
        assert "__" not in name
        assert not name.startswith("_")
        assert "/" not in name and "\\" not in name and "." not in name
        assert name.endswith("_2024-01-15")

        head = name[: -len("_2024-01-15")]
        job_part = sanitize_filename_field(job)
        company_part = sanitize_filename_field(company)
        assert head.endswith(f"_{job_part}_{company_part}")
        assert len(job_part) <= 30 and len(company_part) <= 30
