"""Logging setup for the careerdoc command-line interface.

Library modules only create loggers under the ``careerdoc`` namespace and
never attach handlers. :func:`configure_logging` is called once by the CLI:
it installs the handlers on the root logger and applies the requested level
to the ``careerdoc`` logger only, so ``--log-level debug`` shows export
internals without turning on debug output from unrelated libraries.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "careerdoc"

# Loggers outside the package never go below this level
THIRD_PARTY_LEVEL = logging.WARNING

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric logging level.

    Unknown names fall back to ``logging.WARNING``, the CLI default.

    Examples
    --------
        >>> resolve_log_level("debug")
        10
        >>> resolve_log_level("chatty")
        30

    """
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Configure logging for a CLI run.

    Parameters
    ----------
    log_level : int | str
        Level for the ``careerdoc`` loggers, numeric or by name (e.g. "INFO")
    log_file : str, optional
        Path of a log file that receives the same records as stderr
    trace_mode : bool, default False
        Add timestamps and logger names to every record

    Returns
    -------
    logging.Logger
        The ``careerdoc`` package logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(max(level, THIRD_PARTY_LEVEL))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if trace_mode:
        formatter = logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(CONSOLE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        package_logger.warning(f"Could not open log file {log_file}: {file_error}")
    elif log_file:
        package_logger.info(f"Logging to file: {log_file}")
    return package_logger
