"""Command-line interface for blockdown.

Usage
-----
    blockdown page.html                  # print Markdown to stdout
    blockdown page.html -o page.md       # write Markdown to a file
    cat page.html | blockdown            # read HTML from stdin
    blockdown page.html --keep-img-tags  # keep <img> tags as HTML

Every option can also be defaulted through an environment variable named
``BLOCKDOWN_<OPTION>``, e.g. ``BLOCKDOWN_KEEP_IMG_TAGS=1`` or
``BLOCKDOWN_HTML_PARSER=lxml``. Command-line flags take precedence.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .constants import (
    DEFAULT_HTML_PARSER,
    ENV_VAR_PREFIX,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    HTML_PARSERS,
)
from .exceptions import BlockdownError, DependencyError, FileError, ParsingError, ValidationError
from .html2markdown import html_to_markdown
from .logging_utils import configure_logging
from .options import HtmlOptions

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get an environment variable with the ``BLOCKDOWN_`` prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'keep_img_tags', 'log-level')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set
    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    CLI arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_key = f"{ENV_VAR_PREFIX}{action.dest.upper()}"
        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in _TRUTHY
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(f"Invalid choice for {env_key}: {env_value}. Choices: {list(action.choices)}")
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the blockdown package."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("blockdown")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="blockdown",
        description="Convert HTML to Markdown.",
        epilog=f"Options may be defaulted with {ENV_VAR_PREFIX}<OPTION> environment variables.",
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to convert, or '-' to read from stdin (default)",
    )
    parser.add_argument("-o", "--out", help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--keep-img-tags",
        action="store_true",
        help="Keep raw <img> tags instead of converting them to Markdown images",
    )
    parser.add_argument(
        "--html-parser",
        choices=list(HTML_PARSERS),
        default=DEFAULT_HTML_PARSER,
        help="BeautifulSoup tree builder (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Include timestamps and logger names in log output",
    )
    parser.add_argument("--version", action="version", version=f"blockdown {_get_version()}")

    apply_env_vars_to_parser(parser)

    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    return EXIT_ERROR


def main(args: Optional[list[str]] = None) -> int:
    """Run the command-line interface."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = HtmlOptions(keep_img_tags=parsed_args.keep_img_tags, html_parser=parsed_args.html_parser)

    if parsed_args.input == "-":
        input_source: bytes | Path = sys.stdin.buffer.read()
        if not input_source:
            print("Error: No data received from stdin", file=sys.stderr)
            return EXIT_FILE_ERROR
        source_label = "stdin"
    else:
        input_source = Path(parsed_args.input)
        source_label = str(input_source)

    try:
        markdown = html_to_markdown(input_source, options=options)
    except BlockdownError as e:
        logger.debug("Conversion of %s failed", source_label, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(markdown + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write {output_path}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info("Converted %s -> %s", source_label, output_path)
    else:
        print(markdown)

    return EXIT_SUCCESS
