#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/packagers/zip.py
"""Minimal PKZIP writer for stored (uncompressed) entries.

The writer produces the three record types a ZIP reader needs and nothing
else:

- a 30-byte local file header per entry, followed by the entry name and the
  raw data
- a 46-byte central directory record per entry
- a 22-byte end-of-central-directory (EOCD) record

All multi-byte fields are little-endian. Timestamps, flags, extra fields and
comments are zero. There is no compression, encryption, ZIP64 or multi-disk
support.

The one invariant every reader depends on: the central directory offset in
the EOCD record must be the exact byte position of the first central
directory record, and the recorded directory size must be the exact byte
length of all central directory records.

"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import Union

from careerdoc.constants import (
    CRC32_POLYNOMIAL,
    ZIP_CENTRAL_DIRECTORY_RECORD_SIZE,
    ZIP_CENTRAL_DIRECTORY_SIGNATURE,
    ZIP_END_OF_CENTRAL_DIRECTORY_SIGNATURE,
    ZIP_END_OF_CENTRAL_DIRECTORY_SIZE,
    ZIP_LOCAL_FILE_HEADER_SIGNATURE,
    ZIP_LOCAL_FILE_HEADER_SIZE,
    ZIP_MAX_UINT16,
    ZIP_MAX_UINT32,
    ZIP_METHOD_STORED,
    ZIP_VERSION,
)
from careerdoc.exceptions import ArchiveError

logger = logging.getLogger(__name__)

# signature, version needed, flags, method, mod time, mod date, crc, compressed size,
# uncompressed size, name length, extra length
_LOCAL_FILE_HEADER = struct.Struct("<IHHHHHIIIHH")

# signature, version made by, version needed, flags, method, mod time, mod date, crc,
# compressed size, uncompressed size, name length, extra length, comment length,
# disk number start, internal attributes, external attributes, local header offset
_CENTRAL_DIRECTORY_RECORD = struct.Struct("<IHHHHHHIIIHHHHHII")

# signature, disk number, directory disk, entries on disk, total entries, directory size,
# directory offset, comment length
_END_OF_CENTRAL_DIRECTORY = struct.Struct("<IHHHHIIH")

assert _LOCAL_FILE_HEADER.size == ZIP_LOCAL_FILE_HEADER_SIZE
assert _CENTRAL_DIRECTORY_RECORD.size == ZIP_CENTRAL_DIRECTORY_RECORD_SIZE
assert _END_OF_CENTRAL_DIRECTORY.size == ZIP_END_OF_CENTRAL_DIRECTORY_SIZE


def _build_crc32_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ CRC32_POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC32_TABLE = _build_crc32_table()


def crc32(data: bytes) -> int:
    """Compute the CRC-32 checksum used by ZIP.

    Table-driven implementation of the reflected polynomial 0xEDB88320 with
    the standard initial value and final XOR of 0xFFFFFFFF.

    Parameters
    ----------
    data : bytes
        Bytes to checksum

    Returns
    -------
    int
        Unsigned 32-bit checksum; 0 for empty input

    Examples
    --------
        >>> crc32(b"")
        0
        >>> hex(crc32(b"123456789"))
        '0xcbf43926'

    """
    crc = 0xFFFFFFFF
    for byte in data:
        crc = (crc >> 8) ^ _CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFFFFFF


@dataclass(frozen=True)
class ZipEntry:
    """One stored entry as laid out in the archive.

    Parameters
    ----------
    path : str
        Entry name, forward slashes only
    data : bytes
        Raw entry bytes
    crc32 : int
        CRC-32 of ``data``
    local_header_offset : int
        Byte offset of the entry's local file header within the archive

    """

    path: str
    data: bytes
    crc32: int
    local_header_offset: int

    @property
    def encoded_path(self) -> bytes:
        """Entry name as written to the archive."""
        return self.path.encode("utf-8")

    @property
    def size(self) -> int:
        """Stored size, equal to the uncompressed size."""
        return len(self.data)


class ZipArchiveWriter:
    """Serialize named byte blobs into a single stored ZIP archive.

    Register entries with :meth:`add_entry`, then call :meth:`generate`
    exactly once. Entries are written in registration order.

    Examples
    --------
        >>> writer = ZipArchiveWriter()
        >>> writer.add_entry("hello.txt", b"Hello, world!")
        >>> archive = writer.generate()
        >>> archive[:4]
        b'PK\\x03\\x04'

    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._pending: list[tuple[str, bytes]] = []
        self._paths: set[str] = set()
        self._entries: list[ZipEntry] = []
        self._generated = False

    @property
    def entries(self) -> list[ZipEntry]:
        """Entries with their offsets, available after :meth:`generate`."""
        return list(self._entries)

    def add_entry(self, path: str, data: Union[bytes, str]) -> None:
        """Register one stored entry.

        Parameters
        ----------
        path : str
            Entry name using forward slashes, unique within the archive
        data : bytes or str
            Entry content. Text is encoded as UTF-8.

        Raises
        ------
        ArchiveError
            If the archive was already generated, or the path is empty,
            absolute, uses backslashes, or was already added

        """
        if self._generated:
            raise ArchiveError("Cannot add entries after the archive was generated", entry_path=path)
        if not path or path.startswith("/") or "\\" in path:
            raise ArchiveError(f"Invalid archive entry path: {path!r}", entry_path=path)
        if path in self._paths:
            raise ArchiveError(f"Duplicate archive entry path: {path}", entry_path=path)

        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
        self._paths.add(path)
        self._pending.append((path, payload))

    def generate(self) -> bytes:
        """Serialize all registered entries into archive bytes.

        Returns
        -------
        bytes
            Complete ZIP archive

        Raises
        ------
        ArchiveError
            If called more than once, or if a size, offset or count does not
            fit its fixed-width field

        """
        if self._generated:
            raise ArchiveError("generate() may only be called once per archive")
        self._generated = True

        if len(self._pending) > ZIP_MAX_UINT16:
            raise ArchiveError(f"Too many entries for a ZIP archive without ZIP64: {len(self._pending)}")

        parts: list[bytes] = []
        offset = 0
        entries: list[ZipEntry] = []

        for path, payload in self._pending:
            entry = ZipEntry(path=path, data=payload, crc32=crc32(payload), local_header_offset=offset)
            local_record = self._local_file_header(entry) + entry.encoded_path + entry.data
            parts.append(local_record)
            entries.append(entry)
            offset += len(local_record)
            self._check_uint32(offset, "archive offset", path)

        directory_offset = offset
        for entry in entries:
            central_record = self._central_directory_record(entry) + entry.encoded_path
            parts.append(central_record)
            offset += len(central_record)
            self._check_uint32(offset, "archive offset", entry.path)

        directory_size = offset - directory_offset
        expected_size = sum(ZIP_CENTRAL_DIRECTORY_RECORD_SIZE + len(entry.encoded_path) for entry in entries)
        if directory_size != expected_size:
            raise ArchiveError(
                f"Central directory size mismatch: wrote {directory_size} bytes, expected {expected_size}"
            )

        parts.append(
            _END_OF_CENTRAL_DIRECTORY.pack(
                ZIP_END_OF_CENTRAL_DIRECTORY_SIGNATURE,
                0,
                0,
                len(entries),
                len(entries),
                directory_size,
                directory_offset,
                0,
            )
        )

        archive = b"".join(parts)
        self._entries = entries
        logger.debug(
            f"Generated ZIP archive: {len(entries)} entries, {len(archive)} bytes, "
            f"central directory at {directory_offset} ({directory_size} bytes)"
        )
        return archive

    def _local_file_header(self, entry: ZipEntry) -> bytes:
        self._check_entry_fields(entry)
        return _LOCAL_FILE_HEADER.pack(
            ZIP_LOCAL_FILE_HEADER_SIGNATURE,
            ZIP_VERSION,
            0,
            ZIP_METHOD_STORED,
            0,
            0,
            entry.crc32,
            entry.size,
            entry.size,
            len(entry.encoded_path),
            0,
        )

    def _central_directory_record(self, entry: ZipEntry) -> bytes:
        return _CENTRAL_DIRECTORY_RECORD.pack(
            ZIP_CENTRAL_DIRECTORY_SIGNATURE,
            ZIP_VERSION,
            ZIP_VERSION,
            0,
            ZIP_METHOD_STORED,
            0,
            0,
            entry.crc32,
            entry.size,
            entry.size,
            len(entry.encoded_path),
            0,
            0,
            0,
            0,
            0,
            entry.local_header_offset,
        )

    def _check_entry_fields(self, entry: ZipEntry) -> None:
        if len(entry.encoded_path) > ZIP_MAX_UINT16:
            raise ArchiveError(f"Entry name too long: {len(entry.encoded_path)} bytes", entry_path=entry.path)
        self._check_uint32(entry.size, "entry size", entry.path)

    @staticmethod
    def _check_uint32(value: int, field_name: str, path: str) -> None:
        if value > ZIP_MAX_UINT32:
            raise ArchiveError(f"{field_name} {value} exceeds the 4 GiB ZIP limit", entry_path=path)
