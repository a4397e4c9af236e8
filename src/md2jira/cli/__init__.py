"""Command-line interface for md2jira.

Reads Markdown from a file argument or from piped stdin and writes JIRA wiki
markup to stdout or to the file given with ``-o``.

Environment Variable Support
----------------------------
Option flags take their defaults from ``MD2JIRA_<OPTION_FIELD>`` environment
variables (``MD2JIRA_PRESERVE_RAW_HTML=true``, ``MD2JIRA_PARSE_TABLES=false``,
``MD2JIRA_LOG_LEVEL=DEBUG``). ``MD2JIRA_CONFIG`` names a configuration file.
Priority, lowest first: defaults, configuration file, environment, flags.

Examples
--------
Convert a file::

    $ md2jira README.md

Write to a file, showing warnings::

    $ md2jira --verbose README.md -o README.jira

Convert from a pipe::

    $ cat CHANGELOG.md | md2jira

"""

import argparse
import logging
import os
import sys
from pathlib import Path

from md2jira.api import Converter, load_markdown_file
from md2jira.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    USAGE_TEXT,
    build_options,
    create_parser,
    get_exit_code_for_exception,
)
from md2jira.cli.config import load_config_with_priority
from md2jira.constants import ENV_CONFIG_VAR
from md2jira.exceptions import Md2JiraError, OutputWriteError
from md2jira.logging_utils import configure_logging
from md2jira.utils.encoding import normalize_stream_to_text
from md2jira.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _read_input(parsed_args: argparse.Namespace) -> str | None:
    """Return the Markdown to convert, or None when there is nothing to read.

    Stdin is only read when it is not attached to a terminal.
    """
    if parsed_args.input:
        return load_markdown_file(parsed_args.input)

    if sys.stdin is None or sys.stdin.isatty():
        return None

    logger.debug("Reading markdown from stdin")
    return normalize_stream_to_text(getattr(sys.stdin, "buffer", sys.stdin))


def _print_warnings(warnings: list[str]) -> None:
    print("Warnings:", file=sys.stderr)
    for warning in warnings:
        print(f"  - {warning}", file=sys.stderr)
    print(file=sys.stderr)


def _write_output(output: str, output_path: str | None) -> None:
    """Print to stdout with a trailing newline, or write the file as is."""
    if not output_path:
        print(output)
        return
    try:
        write_content(output, Path(output_path))
    except OSError as e:
        raise OutputWriteError(output_path, original_error=e) from e
    logger.info(f"Wrote JIRA markup to {output_path}")


def main(args: list[str] | None = None) -> int:
    """Execute the md2jira command line tool.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments (default: ``sys.argv[1:]``)

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file)

    try:
        config = {}
        if not parsed_args.no_config:
            config = load_config_with_priority(parsed_args.config, os.environ.get(ENV_CONFIG_VAR))
        options, parser_options = build_options(parsed_args, config)

        markdown = _read_input(parsed_args)
        if markdown is None:
            print(USAGE_TEXT, file=sys.stderr)
            return EXIT_ERROR

        output, warnings = Converter(options, parser_options).convert_with_warnings(markdown)

        if options.verbose and warnings:
            _print_warnings(warnings)

        _write_output(output, parsed_args.output)
    except Md2JiraError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
