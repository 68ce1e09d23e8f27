#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/utils/io_utils.py
"""I/O helpers for writing rendered output."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def write_content(content: Union[str, bytes], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write content to a file path or file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Text is encoded as UTF-8 for binary destinations.
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If the content or output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("<p>hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>hi</p>'

    """
    if not isinstance(content, (str, bytes)):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding="utf-8")
        else:
            output_path.write_bytes(content)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO) or isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    elif isinstance(output, (StringIO, io.TextIOBase)):
        is_binary_mode = False
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode("utf-8") if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        if isinstance(content, bytes):
            # Binary formats cannot be written to a text stream
            raise TypeError("Cannot write binary content to a text-mode output")
        text_output.write(content)
