#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/packagers/__init__.py
"""Packagers that assemble rendered parts into container formats.

Available packagers:
- ZipArchiveWriter: stored (uncompressed) PKZIP archives, used for DOCX

"""

from __future__ import annotations

from careerdoc.packagers.zip import ZipArchiveWriter, ZipEntry, crc32

__all__ = [
    "ZipArchiveWriter",
    "ZipEntry",
    "crc32",
]
