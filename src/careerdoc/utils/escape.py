#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/utils/escape.py
"""Format-specific text escaping utilities.

This module provides escape functions for the two output markups so that
special characters in user text never reach the output stream unescaped.

"""

from __future__ import annotations

import html
import re

# Code points XML 1.0 does not allow anywhere in a document, not even escaped
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

_XML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def escape_xml(text: str) -> str:
    """Escape the five XML special characters in text content.

    All five characters are escaped in every context, so the result is safe
    both as element text and inside attribute values.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for XML

    Examples
    --------
        >>> escape_xml("R&D <Team> \\"A\\" 'B'")
        'R&amp;D &lt;Team&gt; &quot;A&quot; &apos;B&apos;'

    """
    if not text:
        return text

    # "&" goes first so entities produced later are not escaped twice
    result = text.replace("&", _XML_ENTITIES["&"])
    for char in ("<", ">", '"', "'"):
        result = result.replace(char, _XML_ENTITIES[char])

    return result


def strip_invalid_xml_chars(text: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document.

    Control characters other than tab, newline and carriage return, lone
    surrogates and the non-characters U+FFFE/U+FFFF are dropped.

    Examples
    --------
        >>> strip_invalid_xml_chars("bell\\x07 tab\\t")
        'bell tab\\t'

    """
    return _INVALID_XML_CHARS.sub("", text)


def escape_html(text: str, *, quote: bool = True) -> str:
    """Escape HTML special characters.

    Parameters
    ----------
    text : str
        Text to escape
    quote : bool, default True
        Also escape double and single quotes (needed inside attribute values)

    Returns
    -------
    str
        Escaped text safe for HTML

    """
    return html.escape(text, quote=quote)
