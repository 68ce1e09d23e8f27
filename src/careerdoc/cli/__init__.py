#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the careerdoc export library.

Configuration is read from ``--config``, the ``CAREERDOC_CONFIG``
environment variable, or a discovered ``.careerdoc.toml``/``.yaml``/``.json``
or ``pyproject.toml`` ``[tool.careerdoc]`` table. Top-level keys can also be
set with ``CAREERDOC_<KEY>`` environment variables. CLI arguments always
override both.

Examples
--------
Export a resume to Word::

    $ careerdoc export resume.md --type Resume --job "Senior SWE" --company "PAYBACK GmbH"

Export both formats from stdin and open the print page::

    $ cat letter.md | careerdoc export - --format both --type CoverLetter --open

Print the filename an export would get::

    $ careerdoc filename Resume "Senior SWE" "PAYBACK GmbH"
    Resume_Senior_SWE_PAYBACK_GmbH_2024-01-15

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import webbrowser
from pathlib import Path
from typing import Any, Dict, Optional

from careerdoc import __version__
from careerdoc.api import ExportResult, export_to_docx, export_to_html
from careerdoc.cli.config import (
    VALID_FORMATS,
    apply_env_overrides,
    build_options,
    load_config_with_priority,
    merge_configs,
)
from careerdoc.constants import CONFIG_ENV_FILE, DEFAULT_DOCUMENT_TYPE, DEFAULT_EXPORT_FORMAT
from careerdoc.exceptions import CareerDocError, ConfigError, ValidationError
from careerdoc.logging_utils import configure_logging
from careerdoc.utils.filenames import generate_filename

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the ``export`` and ``filename`` commands."""
    parser = argparse.ArgumentParser(
        prog="careerdoc",
        description="Export markdown resumes and cover letters to DOCX and print-ready HTML.",
    )
    parser.add_argument("--version", action="version", version=f"careerdoc {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    export_parser = subparsers.add_parser("export", help="Export a markdown file")
    export_parser.add_argument("input", help="Markdown file to export, or - to read stdin")
    export_parser.add_argument(
        "--format",
        choices=VALID_FORMATS,
        default=None,
        help=f"Output format (default: {DEFAULT_EXPORT_FORMAT})",
    )
    export_parser.add_argument("--type", dest="doc_type", default=None, help="Document type, e.g. Resume or CoverLetter")
    export_parser.add_argument("--job", default="", help="Job title used in the filename")
    export_parser.add_argument("--company", default="", help="Company name used in the filename")
    export_parser.add_argument("--title", default="", help="Document title (defaults to the filename)")
    export_parser.add_argument("--output-dir", default=None, help="Directory for exported files (default: .)")
    export_parser.add_argument("--open", action="store_true", help="Open the HTML export in the default browser")
    export_parser.add_argument("--config", default=None, help="Path to a configuration file")
    export_parser.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Logging level (default: WARNING)")
    export_parser.add_argument("--log-file", default=None, help="Also write log output to this file")
    export_parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    filename_parser = subparsers.add_parser("filename", help="Print the generated export filename")
    filename_parser.add_argument("doc_type", metavar="TYPE", help="Document type")
    filename_parser.add_argument("job", metavar="JOB", help="Job title")
    filename_parser.add_argument("company", metavar="COMPANY", help="Company name")

    return parser


def _read_input(source: str) -> str:
    """Read markdown from a file path or stdin."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_settings(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Combine config file, environment and CLI values (CLI wins)."""
    config = load_config_with_priority(
        explicit_path=parsed_args.config,
        env_var_path=os.environ.get(CONFIG_ENV_FILE),
    )
    config = apply_env_overrides(config)

    cli_values = {
        "format": parsed_args.format,
        "type": parsed_args.doc_type,
        "output_dir": parsed_args.output_dir,
        "log_level": parsed_args.log_level,
    }
    return merge_configs(config, {key: value for key, value in cli_values.items() if value is not None})


def _setup_logging_level(parsed_args: argparse.Namespace, settings: Dict[str, Any]) -> None:
    if parsed_args.trace:
        log_level: int | str = logging.DEBUG
    else:
        log_level = str(settings.get("log_level", "WARNING")).upper()
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _run_export(parsed_args: argparse.Namespace) -> int:
    try:
        settings = _resolve_settings(parsed_args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args, settings)

    fmt = settings.get("format", DEFAULT_EXPORT_FORMAT)
    if fmt not in VALID_FORMATS:
        print(f"Error: invalid format {fmt!r}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        markdown_text = _read_input(parsed_args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    filename_base = generate_filename(
        settings.get("type", DEFAULT_DOCUMENT_TYPE),
        parsed_args.job,
        parsed_args.company,
    )
    output_dir = Path(settings.get("output_dir", "."))

    try:
        parser_options = build_options(settings, section="markdown")
        html_options = build_options(settings, section="html")

        results: list[ExportResult] = []
        if fmt in ("docx", "both"):
            results.append(export_to_docx(markdown_text, filename_base, parsed_args.title, parser_options=parser_options))
        if fmt in ("html", "both"):
            results.append(export_to_html(markdown_text, filename_base, parsed_args.title, options=html_options))

        written = [result.write(output_dir) for result in results]
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except CareerDocError as e:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    for path in written:
        print(path)
        if parsed_args.open and path.suffix == ".html":
            webbrowser.open(path.resolve().as_uri())

    return EXIT_SUCCESS


def main(args: Optional[list[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits with 2 on usage errors and 0 for --help/--version
        return int(e.code or 0)

    if parsed_args.command == "filename":
        print(generate_filename(parsed_args.doc_type, parsed_args.job, parsed_args.company))
        return EXIT_SUCCESS

    if parsed_args.command == "export":
        return _run_export(parsed_args)

    parser.print_help()
    return EXIT_VALIDATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
