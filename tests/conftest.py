"""Pytest configuration and shared fixtures for the md2jira test suite.

This module registers the test markers, the Hypothesis profiles and a few
fixtures shared by the unit and integration tests.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from md2jira.cli.custom_actions import env_key_for
from md2jira.constants import ENV_CONFIG_VAR
from md2jira.options import JiraRendererOptions, MarkdownParserOptions

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full Markdown to JIRA conversions")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every md2jira environment variable for the duration of a test."""
    monkeypatch.delenv(ENV_CONFIG_VAR, raising=False)
    for options_class in (JiraRendererOptions, MarkdownParserOptions):
        for name in options_class.field_names():
            monkeypatch.delenv(env_key_for(name), raising=False)
    for name in ("output", "log_level", "log_file"):
        monkeypatch.delenv(env_key_for(name), raising=False)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> Path:
    """Run a test from an empty directory with no md2jira environment.

    Config discovery walks up from the working directory, so the tests that
    rely on "no config found" run from here.
    """
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    return work_dir


@pytest.fixture
def restore_logging():
    """Restore the root logger after a test that runs the CLI's logging setup."""
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield
    root_logger.setLevel(level)
    root_logger.handlers[:] = handlers
