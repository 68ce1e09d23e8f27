#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/utils/filenames.py
"""Deterministic, filesystem-safe export filenames.

Export filenames are derived from free-text job metadata (document type,
job title, company) plus the export date, for example
``Resume_Senior_SWE_PAYBACK_GmbH_2024-01-15``.

"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timezone
from typing import Optional

from careerdoc.constants import DEFAULT_FILENAME_FIELD, DEFAULT_FILENAME_FIELD_MAX_LENGTH

logger = logging.getLogger(__name__)

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_filename_field(value: Optional[str], max_length: Optional[int] = DEFAULT_FILENAME_FIELD_MAX_LENGTH) -> str:
    """Reduce a free-text value to a filename-safe component.

    Characters outside ``[A-Za-z0-9 -]`` are removed, whitespace runs become a
    single underscore and the result is truncated to ``max_length``
    characters. Missing values, and values with nothing left after cleaning,
    become ``"document"``.

    Parameters
    ----------
    value : str or None
        Free-text value (job title, company name, document type)
    max_length : int or None, default 30
        Maximum length of the component. None disables truncation.

    Returns
    -------
    str
        Non-empty component containing only ASCII letters, digits, hyphens
        and single underscores

    Examples
    --------
        >>> sanitize_filename_field("Senior SWE!!")
        'Senior_SWE'
        >>> sanitize_filename_field("   ")
        'document'

    """
    if not value:
        return DEFAULT_FILENAME_FIELD

    cleaned = _DISALLOWED_CHARS.sub("", value).strip()
    cleaned = _WHITESPACE_RUN.sub("_", cleaned)
    if max_length is not None:
        cleaned = cleaned[:max_length]

    # Truncation can leave a trailing underscore that would double up at the join
    cleaned = cleaned.strip("_")
    if not cleaned:
        logger.debug(f"Filename field {value!r} is empty after sanitizing, using default")
        return DEFAULT_FILENAME_FIELD

    return cleaned


def generate_filename(
    doc_type: Optional[str],
    job_title: Optional[str],
    company: Optional[str],
    today: Optional[date] = None,
) -> str:
    """Build the base filename (without extension) for an exported document.

    Parameters
    ----------
    doc_type : str or None
        Document type, e.g. ``"Resume"`` or ``"CoverLetter"``
    job_title : str or None
        Job title; truncated to 30 characters after cleaning
    company : str or None
        Company name; truncated to 30 characters after cleaning
    today : date or None
        Export date. Defaults to the current UTC date.

    Returns
    -------
    str
        ``{type}_{job}_{company}_{YYYY-MM-DD}``, never empty and never
        containing path separators

    Examples
    --------
        >>> generate_filename("Resume", "Senior SWE!!", "PAYBACK GmbH", date(2024, 1, 15))
        'Resume_Senior_SWE_PAYBACK_GmbH_2024-01-15'
        >>> generate_filename("Resume", "", "", date(2024, 1, 15))
        'Resume_document_document_2024-01-15'

    """
    stamp = (today or datetime.now(timezone.utc).date()).isoformat()
    parts = [
        sanitize_filename_field(doc_type, max_length=None),
        sanitize_filename_field(job_title),
        sanitize_filename_field(company),
        stamp,
    ]
    return "_".join(parts)
