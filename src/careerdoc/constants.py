#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the careerdoc library.

This module centralizes hardcoded values, magic numbers, and default
configuration constants used across careerdoc.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Export Defaults - Filename and output settings
3. ZIP Container - PKZIP record signatures and layout
4. OOXML Package - Part names, content types and relationships
5. HTML Export - Print page defaults
6. Configuration - Environment variable names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ExportFormat = Literal["docx", "html", "both"]

# =============================================================================
# Export Defaults
# =============================================================================

DEFAULT_FILENAME_FIELD = "document"
DEFAULT_FILENAME_FIELD_MAX_LENGTH = 30
DEFAULT_EXPORT_FORMAT: ExportFormat = "docx"
DEFAULT_DOCUMENT_TYPE = "Document"
DEFAULT_CREATOR = "careerdoc"

MAX_HEADING_LEVEL = 3

DOCX_EXTENSION = ".docx"
HTML_EXTENSION = ".html"

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
HTML_MEDIA_TYPE = "text/html;charset=utf-8"

# =============================================================================
# ZIP Container
# =============================================================================

ZIP_LOCAL_FILE_HEADER_SIGNATURE = 0x04034B50
ZIP_CENTRAL_DIRECTORY_SIGNATURE = 0x02014B50
ZIP_END_OF_CENTRAL_DIRECTORY_SIGNATURE = 0x06054B50

# Fixed record sizes, excluding the variable-length filename
ZIP_LOCAL_FILE_HEADER_SIZE = 30
ZIP_CENTRAL_DIRECTORY_RECORD_SIZE = 46
ZIP_END_OF_CENTRAL_DIRECTORY_SIZE = 22

ZIP_VERSION = 20
ZIP_METHOD_STORED = 0

ZIP_MAX_UINT16 = 0xFFFF
ZIP_MAX_UINT32 = 0xFFFFFFFF

CRC32_POLYNOMIAL = 0xEDB88320

# =============================================================================
# OOXML Package
# =============================================================================

OOXML_CONTENT_TYPES_PART = "[Content_Types].xml"
OOXML_PACKAGE_RELS_PART = "_rels/.rels"
OOXML_DOCUMENT_RELS_PART = "word/_rels/document.xml.rels"
OOXML_DOCUMENT_PART = "word/document.xml"
OOXML_STYLES_PART = "word/styles.xml"
OOXML_NUMBERING_PART = "word/numbering.xml"

NS_WORDPROCESSINGML = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
NS_CONTENT_TYPES = "http://schemas.openxmlformats.org/package/2006/content-types"
NS_PACKAGE_RELATIONSHIPS = "http://schemas.openxmlformats.org/package/2006/relationships"

REL_TYPE_OFFICE_DOCUMENT = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"
REL_TYPE_STYLES = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles"
REL_TYPE_NUMBERING = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/numbering"

CONTENT_TYPE_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"
CONTENT_TYPE_XML = "application/xml"
CONTENT_TYPE_DOCUMENT_MAIN = "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
CONTENT_TYPE_STYLES = "application/vnd.openxmlformats-officedocument.wordprocessingml.styles+xml"
CONTENT_TYPE_NUMBERING = "application/vnd.openxmlformats-officedocument.wordprocessingml.numbering+xml"

HEADING_STYLE_IDS: dict[int, str] = {1: "Heading1", 2: "Heading2", 3: "Heading3"}

BULLET_NUM_ID = 1
BULLET_ABSTRACT_NUM_ID = 0
BULLET_LEVEL_TEXT = "•"
BULLET_INDENT_LEFT_TWIPS = 720
BULLET_INDENT_HANGING_TWIPS = 360

# =============================================================================
# HTML Export
# =============================================================================

DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_SHOW_TOOLBAR = True
DEFAULT_HTML_TOOLBAR_TEXT = "Use Ctrl+P (Cmd+P on Mac) or click the button to save as PDF"
DEFAULT_HTML_PRINT_BUTTON_LABEL = "Print / Save PDF"
DEFAULT_HTML_EMPTY_MESSAGE = "No content available"

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_PREFIX = "CAREERDOC_"
CONFIG_ENV_FILE = "CAREERDOC_CONFIG"
