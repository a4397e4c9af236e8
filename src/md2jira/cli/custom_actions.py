"""Custom argparse actions for md2jira.

The actions record which destinations were given explicitly on the command
line, and take their default from a ``MD2JIRA_<DEST>`` environment variable
when one is set. Together these let the CLI layer command line flags over
environment variables over configuration files.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from md2jira.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for an argparse destination.

    Examples
    --------
    >>> env_key_for("parse_tables")
    'MD2JIRA_PARSE_TABLES'

    """
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


class TrackingStoreAction(argparse.Action):
    """Store action that tracks explicit use and reads an environment default."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the action, replacing ``default`` from the environment if set."""
        env_key = env_key_for(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")
            if choices is not None and default not in choices:
                logger.warning(f"Ignoring environment variable {env_key}={env_value}: not one of {list(choices)}")
                default = None

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value and mark it as explicitly provided."""
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class TrackingStoreTrueAction(argparse.Action):
    """store_true action that tracks explicit use and reads an environment default."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the action, replacing ``default`` from the environment if set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=True,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True and mark as explicitly provided."""
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)


class TrackingStoreFalseAction(argparse.Action):
    """store_false action that tracks explicit use and reads an environment default.

    The environment variable names the option field, not the flag:
    ``MD2JIRA_PARSE_TABLES=false`` has the same effect as ``--no-tables``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = True,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the action, replacing ``default`` from the environment if set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in _TRUE_VALUES

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=False,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store False and mark as explicitly provided."""
        setattr(namespace, self.dest, False)
        _mark_provided(namespace, self.dest)
