"""Unit tests for the command line logging setup."""

import logging
from pathlib import Path

import pytest

from md2jira.logging_utils import CONSOLE_LOG_FORMAT, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Test level name resolution."""

    @pytest.mark.parametrize(
        "name,expected",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("Error", logging.ERROR), (logging.ERROR, logging.ERROR)],
    )
    def test_known_levels(self, name, expected: int) -> None:
        """Test names in any case and numeric levels."""
        assert resolve_log_level(name) == expected

    def test_unknown_name(self) -> None:
        """Test an unknown name falls back to WARNING."""
        assert resolve_log_level("chatty") == logging.WARNING


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler installation on the root logger."""

    def test_console_handler(self, restore_logging) -> None:
        """Test one stderr handler with the md2jira format is installed."""
        root_logger = configure_logging("INFO")
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == CONSOLE_LOG_FORMAT

    def test_replaces_existing_handlers(self, restore_logging) -> None:
        """Test repeated calls do not stack handlers."""
        configure_logging("INFO")
        root_logger = configure_logging("DEBUG")
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG

    def test_log_file(self, tmp_path: Path, restore_logging) -> None:
        """Test records are also written to the log file."""
        log_file = tmp_path / "md2jira.log"
        root_logger = configure_logging("INFO", log_file=str(log_file))
        assert len(root_logger.handlers) == 2
        logging.getLogger("md2jira.test").info("hello file")
        for handler in root_logger.handlers:
            handler.flush()
        root_logger.handlers[1].close()
        assert "[INFO] [md2jira.test] hello file" in log_file.read_text(encoding="utf-8")

    def test_unwritable_log_file(self, tmp_path: Path, restore_logging) -> None:
        """Test an unopenable log file only drops the file handler."""
        root_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "x.log"))
        assert len(root_logger.handlers) == 1
