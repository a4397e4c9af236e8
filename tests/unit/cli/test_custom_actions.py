"""Test custom argparse actions for the CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import os
from unittest.mock import patch

import pytest

from md2jira.cli.custom_actions import (
    TrackingStoreAction,
    TrackingStoreFalseAction,
    TrackingStoreTrueAction,
    env_key_for,
)


@pytest.mark.unit
@pytest.mark.cli
class TestEnvKey:
    """Test environment variable naming."""

    def test_simple_dest(self) -> None:
        """Test a plain destination name."""
        assert env_key_for("parse_tables") == "MD2JIRA_PARSE_TABLES"

    def test_dashes_and_dots(self) -> None:
        """Test dashes and dots become underscores."""
        assert env_key_for("log-level") == "MD2JIRA_LOG_LEVEL"
        assert env_key_for("a.b") == "MD2JIRA_A_B"


@pytest.mark.unit
@pytest.mark.cli
class TestTrackingStoreAction:
    """Test TrackingStoreAction."""

    def test_tracks_provided(self) -> None:
        """Test explicit values are recorded in _provided_args."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--output", action=TrackingStoreAction)
        args = parser.parse_args(["--output", "out.txt"])
        assert args.output == "out.txt"
        assert "output" in args._provided_args

    def test_not_provided(self) -> None:
        """Test defaults are not recorded as provided."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--output", action=TrackingStoreAction, default="x")
        with patch.dict(os.environ, {}, clear=True):
            args = parser.parse_args([])
        assert args.output == "x"
        assert "output" not in getattr(args, "_provided_args", set())

    def test_env_default(self) -> None:
        """Test the environment supplies the default."""
        with patch.dict(os.environ, {"MD2JIRA_OUTPUT": "env.txt"}):
            parser = argparse.ArgumentParser()
            parser.add_argument("--output", action=TrackingStoreAction)
            args = parser.parse_args([])
        assert args.output == "env.txt"

    def test_env_default_with_type(self) -> None:
        """Test environment defaults go through the type converter."""
        with patch.dict(os.environ, {"MD2JIRA_LOG_LEVEL": "debug"}):
            parser = argparse.ArgumentParser()
            parser.add_argument(
                "--log-level", action=TrackingStoreAction, type=str.upper, choices=["DEBUG", "INFO"], default="INFO"
            )
            args = parser.parse_args([])
        assert args.log_level == "DEBUG"

    def test_env_value_outside_choices_ignored(self) -> None:
        """Test invalid environment values do not become defaults."""
        with patch.dict(os.environ, {"MD2JIRA_LOG_LEVEL": "LOUD"}):
            parser = argparse.ArgumentParser()
            parser.add_argument("--log-level", action=TrackingStoreAction, choices=["DEBUG", "INFO"], default="INFO")
            args = parser.parse_args([])
        assert args.log_level is None


@pytest.mark.unit
@pytest.mark.cli
class TestBooleanActions:
    """Test TrackingStoreTrueAction and TrackingStoreFalseAction."""

    def test_store_true(self) -> None:
        """Test the flag stores True and is tracked."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--frontmatter", action=TrackingStoreTrueAction, dest="parse_frontmatter")
        with patch.dict(os.environ, {}, clear=True):
            args = parser.parse_args(["--frontmatter"])
        assert args.parse_frontmatter is True
        assert "parse_frontmatter" in args._provided_args

    def test_store_true_default(self) -> None:
        """Test the default without flag or environment."""
        parser = argparse.ArgumentParser()
        with patch.dict(os.environ, {}, clear=True):
            parser.add_argument("--frontmatter", action=TrackingStoreTrueAction, dest="parse_frontmatter")
            args = parser.parse_args([])
        assert args.parse_frontmatter is False

    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("off", False)])
    def test_store_true_env(self, value: str, expected: bool) -> None:
        """Test truthy and falsy environment values."""
        with patch.dict(os.environ, {"MD2JIRA_PARSE_FRONTMATTER": value}):
            parser = argparse.ArgumentParser()
            parser.add_argument("--frontmatter", action=TrackingStoreTrueAction, dest="parse_frontmatter")
            args = parser.parse_args([])
        assert args.parse_frontmatter is expected

    def test_store_false(self) -> None:
        """Test the flag stores False and is tracked."""
        parser = argparse.ArgumentParser()
        with patch.dict(os.environ, {}, clear=True):
            parser.add_argument("--no-tables", action=TrackingStoreFalseAction, dest="parse_tables")
            args = parser.parse_args(["--no-tables"])
        assert args.parse_tables is False
        assert "parse_tables" in args._provided_args

    def test_store_false_env_names_field(self) -> None:
        """Test the environment variable sets the field value, not the flag."""
        with patch.dict(os.environ, {"MD2JIRA_PARSE_TABLES": "false"}):
            parser = argparse.ArgumentParser()
            parser.add_argument("--no-tables", action=TrackingStoreFalseAction, dest="parse_tables")
            args = parser.parse_args([])
        assert args.parse_tables is False
