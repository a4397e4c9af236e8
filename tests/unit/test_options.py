#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the option records."""

from dataclasses import FrozenInstanceError, fields

import pytest

from md2jira.options import JiraRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestJiraRendererOptions:
    """Test renderer option defaults and cloning."""

    def test_defaults(self) -> None:
        """Test every renderer switch is off by default."""
        options = JiraRendererOptions()
        assert options.preserve_raw_html is False
        assert options.warn_on_unsupported is False
        assert options.verbose is False

    def test_frozen(self) -> None:
        """Test options cannot be mutated."""
        options = JiraRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.verbose = True  # type: ignore[misc]

    def test_create_updated(self) -> None:
        """Test cloning with changes leaves the original untouched."""
        options = JiraRendererOptions()
        updated = options.create_updated(preserve_raw_html=True)
        assert updated.preserve_raw_html is True
        assert options.preserve_raw_html is False
        assert updated.warn_on_unsupported is options.warn_on_unsupported

    def test_field_names(self) -> None:
        """Test field names in declaration order."""
        assert JiraRendererOptions.field_names() == ["preserve_raw_html", "warn_on_unsupported", "verbose"]


@pytest.mark.unit
class TestMarkdownParserOptions:
    """Test parser option defaults and metadata."""

    def test_defaults(self) -> None:
        """Test GFM extensions are on and front matter is off by default."""
        options = MarkdownParserOptions()
        assert options.parse_tables is True
        assert options.parse_strikethrough is True
        assert options.parse_task_lists is True
        assert options.parse_autolinks is True
        assert options.parse_frontmatter is False

    def test_every_field_has_help(self) -> None:
        """Test every field carries help text for the CLI."""
        for options_class in (MarkdownParserOptions, JiraRendererOptions):
            for field in fields(options_class):
                assert field.metadata.get("help"), field.name

    def test_cli_names_unique(self) -> None:
        """Test no two fields share a command line flag."""
        names = [
            field.metadata["cli_name"]
            for options_class in (MarkdownParserOptions, JiraRendererOptions)
            for field in fields(options_class)
            if "cli_name" in field.metadata
        ]
        assert len(names) == len(set(names))
