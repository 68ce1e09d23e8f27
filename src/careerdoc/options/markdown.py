#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for parsing markdown into the export document model."""

from __future__ import annotations

from dataclasses import dataclass, field

from careerdoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for the line-based markdown parser.

    Parameters
    ----------
    strip_links : bool, default True
        Replace ``[text](url)`` and ``![alt](src)`` with their visible text.
        When False the link syntax is kept as literal run text.
    strip_inline_code : bool, default True
        Remove the backticks around inline code spans, keeping the code text.

    """

    strip_links: bool = field(
        default=True,
        metadata={"help": "Replace link and image syntax with the visible text"},
    )
    strip_inline_code: bool = field(
        default=True,
        metadata={"help": "Remove backticks around inline code, keeping its text"},
    )
