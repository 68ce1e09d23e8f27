#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/careerdoc/utils/decorators.py
"""Timing helpers shared by the export entry points."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "DOCX export")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "DOCX export"):
        ...     result = renderer.render_to_bytes(document)
        ... # Logs: "DOCX export completed in 0.01s" at DEBUG level

    Notes
    -----
    Only measures time when the logger has DEBUG enabled, so there is no
    overhead otherwise.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
