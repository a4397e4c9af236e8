#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/cli/builder.py
"""Argument parser construction and option mapping for the md2jira CLI.

Option flags are generated from the ``cli_name`` metadata of the option
dataclass fields, so a new boolean option only needs a field declaration.
Fields defaulting to True get a ``store_false`` flag (``--no-tables``), fields
defaulting to False a ``store_true`` flag (``--frontmatter``).
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import fields
from typing import Any, Dict, Type

from md2jira import __version__
from md2jira.cli.custom_actions import (
    TrackingStoreAction,
    TrackingStoreFalseAction,
    TrackingStoreTrueAction,
    env_key_for,
)
from md2jira.exceptions import (
    DependencyError,
    FileError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2jira.options import JiraRendererOptions, MarkdownParserOptions
from md2jira.options.base import CloneFrozenMixin

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

EXAMPLES_TEXT = """Examples:
  md2jira input.md                  Convert file to stdout
  md2jira input.md -o output.txt    Convert file to output file
  cat README.md | md2jira           Convert from stdin
  md2jira --verbose input.md        Convert with warnings
"""

USAGE_TEXT = f"""md2jira - Markdown to JIRA Markup Converter

Usage:
  md2jira [options] [input.md]
  cat file.md | md2jira

{EXAMPLES_TEXT}"""


def add_options_class_arguments(
    parser: argparse.ArgumentParser, options_class: Type[CloneFrozenMixin], group_name: str
) -> None:
    """Add one flag per option field that declares a ``cli_name``.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser to extend
    options_class : type
        Frozen options dataclass
    group_name : str
        Title of the argument group in ``--help``

    """
    group = parser.add_argument_group(group_name)
    for field in fields(options_class):  # type: ignore[arg-type]
        cli_name = field.metadata.get("cli_name")
        if not cli_name:
            continue

        help_text = field.metadata.get("help", "")
        if field.default is True:
            group.add_argument(
                f"--{cli_name}",
                action=TrackingStoreFalseAction,
                dest=field.name,
                default=True,
                help=f"Disable: {help_text}",
            )
        else:
            group.add_argument(
                f"--{cli_name}",
                action=TrackingStoreTrueAction,
                dest=field.name,
                default=bool(field.default),
                help=help_text,
            )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Every option flag also reads a ``MD2JIRA_<DEST>`` environment variable as
    its default (e.g. ``MD2JIRA_PRESERVE_RAW_HTML=true``).
    """
    parser = argparse.ArgumentParser(
        prog="md2jira",
        usage="md2jira [options] [input.md]",
        description="Convert GitHub flavored Markdown to JIRA wiki markup.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EXAMPLES_TEXT,
    )

    parser.add_argument("input", nargs="?", help="Markdown file to convert (default: stdin)")
    parser.add_argument(
        "-o",
        "--output",
        action=TrackingStoreAction,
        metavar="PATH",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--verbose",
        action=TrackingStoreTrueAction,
        help="Show conversion warnings",
    )
    parser.add_argument("--version", action="version", version=f"md2jira version {__version__}")

    add_options_class_arguments(parser, JiraRendererOptions, "JIRA output options")
    add_options_class_arguments(parser, MarkdownParserOptions, "Markdown parsing options")

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        metavar="PATH",
        help="Configuration file (.toml, .yaml, .json or pyproject.toml). Without it, the MD2JIRA_CONFIG "
        "environment variable is used, then .md2jira.* files searched from the current directory upwards.",
    )
    config_group.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help="Disable loading of configuration files, including MD2JIRA_CONFIG",
    )

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        action=TrackingStoreAction,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        type=str.upper,
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument(
        "--log-file",
        action=TrackingStoreAction,
        metavar="PATH",
        help="Write log messages to this file in addition to stderr",
    )

    return parser


def _option_value(parsed_args: argparse.Namespace, name: str, config: Dict[str, Any], default: Any) -> Any:
    """Resolve one option: command line, then environment, then config file, then default."""
    provided = getattr(parsed_args, "_provided_args", set())
    if name in provided:
        return getattr(parsed_args, name)
    if hasattr(parsed_args, name) and os.environ.get(env_key_for(name)) is not None:
        return getattr(parsed_args, name)
    if name in config:
        return config[name]
    return getattr(parsed_args, name, default)


def build_options(
    parsed_args: argparse.Namespace, config: Dict[str, Any] | None = None
) -> tuple[JiraRendererOptions, MarkdownParserOptions]:
    """Build option records from parsed arguments and a loaded config mapping.

    ``verbose`` (from ``--verbose``, ``MD2JIRA_VERBOSE`` or the config file)
    also turns on ``warn_on_unsupported``.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Result of :func:`create_parser` parsing
    config : dict, optional
        Validated configuration mapping

    Returns
    -------
    tuple[JiraRendererOptions, MarkdownParserOptions]
        Renderer and parser options

    """
    config = config or {}

    def resolve(options_class: Type[CloneFrozenMixin]) -> Dict[str, Any]:
        return {
            f.name: _option_value(parsed_args, f.name, config, f.default)
            for f in fields(options_class)  # type: ignore[arg-type]
        }

    renderer_kwargs = resolve(JiraRendererOptions)
    if renderer_kwargs["verbose"]:
        renderer_kwargs["warn_on_unsupported"] = True

    return JiraRendererOptions(**renderer_kwargs), MarkdownParserOptions(**resolve(MarkdownParserOptions))


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
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR
