"""Tests for the md2jira command line entry point.

These tests run ``main()`` end to end with temporary files, a patched stdin
and captured stdout/stderr, and check output and exit codes.
"""

import io
import sys
from pathlib import Path

import pytest

from md2jira import __version__
from md2jira.cli import main
from md2jira.cli.builder import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_options,
    create_parser,
    get_exit_code_for_exception,
)
from md2jira.exceptions import (
    ConfigError,
    DependencyError,
    FileNotFoundError,
    Md2JiraError,
    OutputWriteError,
    ParsingError,
)


class _TtyStdin(io.StringIO):
    def isatty(self) -> bool:
        return True


def _piped_stdin(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


@pytest.fixture
def cli_env(isolated_cwd: Path, restore_logging: None) -> Path:
    """Run from an empty directory with a clean environment and logging state."""
    return isolated_cwd


@pytest.mark.unit
@pytest.mark.cli
class TestMainConversion:
    """Test conversions through main()."""

    def test_file_to_stdout(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test converting a file prints the markup with a trailing newline."""
        md_file = cli_env / "in.md"
        md_file.write_text("# Title\n\n**bold**\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "h1. Title\n\n*bold*\n"

    def test_file_to_file(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test -o writes the markup without a trailing newline."""
        md_file = cli_env / "in.md"
        md_file.write_text("- a\n- b\n", encoding="utf-8")
        out_file = cli_env / "out.jira"

        assert main([str(md_file), "-o", str(out_file)]) == EXIT_SUCCESS
        assert out_file.read_text(encoding="utf-8") == "* a\n* b"
        assert capsys.readouterr().out == ""

    def test_stdin(self, cli_env: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
        """Test Markdown piped on stdin."""
        monkeypatch.setattr(sys, "stdin", _piped_stdin(b"*it*"))

        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "_it_\n"

    def test_stdin_with_bom(
        self, cli_env: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a UTF-8 byte order mark on stdin is dropped."""
        monkeypatch.setattr(sys, "stdin", _piped_stdin(b"\xef\xbb\xbf## Hi"))

        assert main([]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "h2. Hi\n"

    def test_no_input_prints_usage(
        self, cli_env: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test running on a terminal without a file argument."""
        monkeypatch.setattr(sys, "stdin", _TtyStdin())

        assert main([]) == EXIT_ERROR
        captured = capsys.readouterr()
        assert "Usage:" in captured.err
        assert captured.out == ""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert f"md2jira version {__version__}" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestMainOptions:
    """Test option flags, environment variables and config files."""

    def test_preserve_html_flag(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --preserve-html keeps HTML blocks."""
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file), "--preserve-html"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<div>x</div>\n"

    def test_html_downgraded_by_default(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test HTML blocks are downgraded without the flag."""
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_verbose_prints_warnings(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --verbose lists warnings on stderr."""
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file), "--verbose"]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert "Warnings:" in captured.err
        assert "  - HTML block found - converted with best effort" in captured.err
        assert captured.out == "x\n"

    def test_no_warnings_without_verbose(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test warnings stay quiet by default."""
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert "Warnings:" not in capsys.readouterr().err

    def test_no_tables_flag(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --no-tables leaves pipe tables as text."""
        md_file = cli_env / "in.md"
        md_file.write_text("| a |\n|---|\n| 1 |\n", encoding="utf-8")

        assert main([str(md_file), "--no-tables"]) == EXIT_SUCCESS
        assert "||a||" not in capsys.readouterr().out

    def test_env_variable(
        self, cli_env: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test an option taken from the environment."""
        monkeypatch.setenv("MD2JIRA_PRESERVE_RAW_HTML", "true")
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<div>x</div>\n"

    def test_discovered_config(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a config file in the working directory is applied."""
        (cli_env / ".md2jira.toml").write_text("preserve_raw_html = true\n")
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "<div>x</div>\n"

    def test_no_config_flag(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --no-config ignores discovered files."""
        (cli_env / ".md2jira.toml").write_text("preserve_raw_html = true\n")
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file), "--no-config"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_env_overrides_config(
        self, cli_env: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the environment takes priority over the config file."""
        (cli_env / ".md2jira.toml").write_text("preserve_raw_html = true\n")
        monkeypatch.setenv("MD2JIRA_PRESERVE_RAW_HTML", "false")
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "x\n"

    def test_explicit_config(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --config names the file to load."""
        config_file = cli_env / "settings.yaml"
        config_file.write_text("verbose: true\n")
        md_file = cli_env / "in.md"
        md_file.write_text("<div>x</div>\n", encoding="utf-8")

        assert main([str(md_file), "--config", str(config_file)]) == EXIT_SUCCESS
        assert "Warnings:" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestMainErrors:
    """Test error reporting and exit codes."""

    def test_missing_input_file(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a missing input file."""
        assert main([str(cli_env / "missing.md")]) == EXIT_FILE_ERROR
        assert "Error: File not found" in capsys.readouterr().err

    def test_invalid_config(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an invalid config file is a validation error."""
        config_file = cli_env / "bad.toml"
        config_file.write_text("unknown_key = true\n")
        md_file = cli_env / "in.md"
        md_file.write_text("x", encoding="utf-8")

        assert main([str(md_file), "--config", str(config_file)]) == EXIT_VALIDATION_ERROR
        assert "Unknown configuration key" in capsys.readouterr().err

    def test_unwritable_output(self, cli_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test writing into a missing directory."""
        md_file = cli_env / "in.md"
        md_file.write_text("x", encoding="utf-8")
        out_file = cli_env / "no" / "such" / "dir" / "out.jira"

        assert main([str(md_file), "-o", str(out_file)]) == EXIT_RENDERING_ERROR
        assert "Failed to write output file" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestBuilder:
    """Test parser construction and option mapping."""

    def test_option_flags_generated(self) -> None:
        """Test every option field with a CLI name has a flag."""
        help_text = create_parser().format_help()
        for flag in ("--preserve-html", "--no-tables", "--no-strikethrough", "--no-task-lists", "--no-autolinks"):
            assert flag in help_text
        assert "--frontmatter" in help_text

    def test_build_options_defaults(self, clean_env: None) -> None:
        """Test defaults when nothing is set."""
        args = create_parser().parse_args([])
        options, parser_options = build_options(args, {})
        assert options.preserve_raw_html is False
        assert options.warn_on_unsupported is False
        assert parser_options.parse_tables is True

    def test_verbose_enables_warnings(self, clean_env: None) -> None:
        """Test verbose turns on warning collection."""
        args = create_parser().parse_args(["--verbose"])
        options, _parser_options = build_options(args, {})
        assert options.verbose is True
        assert options.warn_on_unsupported is True

    def test_config_applied(self, clean_env: None) -> None:
        """Test config values fill options not given on the command line."""
        args = create_parser().parse_args([])
        options, parser_options = build_options(args, {"preserve_raw_html": True, "parse_task_lists": False})
        assert options.preserve_raw_html is True
        assert parser_options.parse_task_lists is False

    def test_flag_overrides_config(self, clean_env: None) -> None:
        """Test an explicit flag beats the config file."""
        args = create_parser().parse_args(["--no-autolinks"])
        _options, parser_options = build_options(args, {"parse_autolinks": True})
        assert parser_options.parse_autolinks is False

    @pytest.mark.parametrize(
        "exception,code",
        [
            (DependencyError("markdown", [("mistune", ">=3.0.0")]), EXIT_DEPENDENCY_ERROR),
            (ConfigError("bad"), EXIT_VALIDATION_ERROR),
            (FileNotFoundError("x.md"), EXIT_FILE_ERROR),
            (ParsingError("boom"), EXIT_PARSING_ERROR),
            (OutputWriteError("out.jira"), EXIT_RENDERING_ERROR),
            (Md2JiraError("generic"), EXIT_ERROR),
        ],
    )
    def test_exit_codes(self, exception: Exception, code: int) -> None:
        """Test the exception to exit code table."""
        assert get_exit_code_for_exception(exception) == code
