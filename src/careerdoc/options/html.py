#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the print-ready HTML export."""

from __future__ import annotations

from dataclasses import dataclass, field

from careerdoc.constants import (
    DEFAULT_HTML_EMPTY_MESSAGE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_PRINT_BUTTON_LABEL,
    DEFAULT_HTML_SHOW_TOOLBAR,
    DEFAULT_HTML_TOOLBAR_TEXT,
)
from careerdoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for the print-ready HTML page.

    Parameters
    ----------
    language : str, default "en"
        Value of the ``lang`` attribute on the ``<html>`` element.
    show_toolbar : bool, default True
        Show the fixed toolbar with the print button. The toolbar is always
        hidden in print media.
    toolbar_text : str
        Hint text shown in the toolbar.
    print_button_label : str, default "Print / Save PDF"
        Label of the button that opens the print dialog.
    empty_message : str, default "No content available"
        Paragraph text shown when the markdown produces no content.

    """

    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Language code for the html lang attribute"},
    )
    show_toolbar: bool = field(
        default=DEFAULT_HTML_SHOW_TOOLBAR,
        metadata={"help": "Show the print toolbar (never printed)"},
    )
    toolbar_text: str = field(
        default=DEFAULT_HTML_TOOLBAR_TEXT,
        metadata={"help": "Hint text shown in the print toolbar"},
    )
    print_button_label: str = field(
        default=DEFAULT_HTML_PRINT_BUTTON_LABEL,
        metadata={"help": "Label of the print button"},
    )
    empty_message: str = field(
        default=DEFAULT_HTML_EMPTY_MESSAGE,
        metadata={"help": "Text shown when the document has no content"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If the language code is empty.

        """
        if not self.language.strip():
            raise ValueError("language must be a non-empty language code")
