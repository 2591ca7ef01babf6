"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from calcline.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.mark.usefixtures("isolated_cwd")
class TestEvalCommand:
    def test_precedence(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    def test_leading_minus_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-2 * 3"])
        assert result.exit_code == 0
        assert result.output.strip() == "-6"

    def test_multiple_terms(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 + 2 3 * 4"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["3", "12"]

    def test_precision(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--precision", "2", "1 / 3"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.33"

    def test_division_by_zero_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "5 / 0"])
        assert result.exit_code == 1
        assert "division by zero" in result.output

    def test_lex_error_shows_caret(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "3 & 2"])
        assert result.exit_code == 1
        assert result.output.splitlines()[-2:] == ["3 & 2", "  ^"]


@pytest.mark.usefixtures("isolated_cwd")
class TestInspectCommands:
    def test_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 + 2.5"])
        assert result.exit_code == 0
        assert "number" in result.output
        assert "plus" in result.output
        assert "2.5" in result.output

    def test_tokens_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 ? 2"])
        assert result.exit_code == 1
        assert "unexpected character '?'" in result.output

    def test_ast(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["ast", "1 - 2 - 3 4 / 2"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["((1 - 2) - 3)", "(4 / 2)"]

    def test_ast_parse_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["ast", "3 +"])
        assert result.exit_code == 1
        assert "expected number, found end of input" in result.output


@pytest.mark.usefixtures("isolated_cwd")
class TestReplCommand:
    def test_repl(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="1 + 2\n")
        assert result.exit_code == 0
        assert "> 3" in result.output

    def test_default_command_is_repl(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="2 * 3\nquit\n")
        assert result.exit_code == 0
        assert "> 6" in result.output

    def test_show_ast_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--show-ast"], input="1 + 2\n")
        assert "ast: (1 + 2)" in result.output

    def test_prompt_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--prompt", "calc> "], input="7\n")
        assert "calc> 7" in result.output


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "calcline" in result.output

    def test_config_from_cwd(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "calcline.toml").write_text('[repl]\nprompt = "$ "\n')
        result = cli_runner.invoke(app, ["repl"], input="1\n")
        assert "$ 1" in result.output

    def test_config_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        path = isolated_cwd / "custom.toml"
        path.write_text("[output]\nprecision = 1\n")
        result = cli_runner.invoke(app, ["--config", str(path), "eval", "2 / 3"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.7"

    def test_log_level_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["--log-level", "debug", "eval", "4 / 2"])
        assert result.exit_code == 0
        assert "2" in result.output.splitlines()

    def test_invalid_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        path = isolated_cwd / "bad.toml"
        path.write_text("[output]\nprecision = -3\n")
        result = cli_runner.invoke(app, ["--config", str(path), "eval", "1"])
        assert result.exit_code == 2
        assert "config error" in result.output

    def test_invalid_log_level_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["--log-level", "LOUD", "eval", "1"])
        assert result.exit_code == 2
        assert "config error" in result.output
        assert "'LOUD'" in result.output
