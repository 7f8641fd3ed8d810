"""Tests for the interactive shell command."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from fibmat.cli import cli
from fibmat.config.models import DEFAULT_PROMPT


def _run(cli_runner: CliRunner, stdin: str) -> tuple[int, list[str]]:
    result = cli_runner.invoke(cli, ["shell"], input=stdin)
    return result.exit_code, result.stdout.split("\n")


@pytest.mark.usefixtures("_isolated_cwd")
class TestShell:
    def test_quit_immediately(self, cli_runner: CliRunner) -> None:
        code, lines = _run(cli_runner, "q\n")
        assert code == 0
        assert lines == [DEFAULT_PROMPT, ""]

    def test_computes_then_quits(self, cli_runner: CliRunner) -> None:
        code, lines = _run(cli_runner, "10\nq\n")
        assert code == 0
        assert lines == [
            DEFAULT_PROMPT,
            "The 10th Fibonnaci number is: 55",
            "",
            DEFAULT_PROMPT,
            "",
        ]

    def test_negative_and_zero(self, cli_runner: CliRunner) -> None:
        _, lines = _run(cli_runner, "-8\n-7\n0\nq\n")
        assert "The -8th Fibonnaci number is: -21" in lines
        assert "The -7th Fibonnaci number is: 13" in lines
        assert "The 0th Fibonnaci number is: 0" in lines

    @pytest.mark.parametrize("line", ["", " 5", "5 ", "3.0", "abc", "+5", "Q", "q "])
    def test_rejects_non_integers(self, cli_runner: CliRunner, line: str) -> None:
        code, lines = _run(cli_runner, f"{line}\nq\n")
        assert code == 0
        assert lines[1:3] == ["Not an integer!", ""]
        assert lines[3] == DEFAULT_PROMPT

    def test_end_of_input_exits_cleanly(self, cli_runner: CliRunner) -> None:
        code, lines = _run(cli_runner, "5")
        assert code == 0
        assert lines[1] == "The 5th Fibonnaci number is: 5"
        assert lines[-2] == DEFAULT_PROMPT

    def test_crlf_line_endings(self, cli_runner: CliRunner) -> None:
        _, lines = _run(cli_runner, "12\r\nq\r\n")
        assert "The 12th Fibonnaci number is: 144" in lines

    def test_custom_quit_token_and_prompt(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fibmat.toml").write_text('[shell]\nprompt = "N?"\nquit_token = "exit"\n')
        code, lines = _run(cli_runner, "q\nexit\n")
        assert code == 0
        assert lines == ["N?", "Not an integer!", "", "N?", ""]

    def test_index_limit_reported_on_stderr(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "fibmat.toml").write_text("[engine]\nmax_abs_index = 3\n")
        result = cli_runner.invoke(cli, ["shell"], input="4\nq\n")
        assert result.exit_code == 0
        assert "exceeds the configured limit of 3" in result.stderr
        assert "Fibonnaci number is" not in result.stdout

    def test_over_long_input_reported_on_stderr(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FIBMAT_ENGINE__MAX_STR_DIGITS", "640")
        result = cli_runner.invoke(cli, ["shell"], input="1" * 700 + "\nq\n")
        assert result.exit_code == 0
        assert "integer string limit" in result.stderr
        assert "Not an integer!" not in result.stdout
