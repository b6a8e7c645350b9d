"""Tests for operator-facing UI pieces (cli/prompt.py, cli/reporter.py,
cli/console.py).

questionary is mocked; Rich is either used for real (output captured)
or hidden via ``sys.modules`` to exercise the plain fallback.
"""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from k8squest_installer.cli.console import console, escape_markup, strip_markup
from k8squest_installer.cli.prompt import QuestionaryPrompter
from k8squest_installer.cli.reporter import ConsoleReporter, echo_command
from k8squest_installer.exceptions import EnvironmentError, InvalidInputError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


# ---------------------------------------------------------------------------
# QuestionaryPrompter
# ---------------------------------------------------------------------------

class TestQuestionaryPrompter:
    @patch("k8squest_installer.cli.prompt._import_questionary")
    def test_returns_answer_verbatim(self, mock_q: MagicMock) -> None:
        questionary_mod = MagicMock()
        questionary_mod.text.return_value.ask.return_value = " 2 "
        mock_q.return_value = questionary_mod

        assert QuestionaryPrompter().ask("Enter your choice (1 or 2) [1]:") == " 2 "
        questionary_mod.text.assert_called_once_with("Enter your choice (1 or 2) [1]:")

    @patch("k8squest_installer.cli.prompt._import_questionary")
    def test_empty_answer_is_returned(self, mock_q: MagicMock) -> None:
        mock_q.return_value.text.return_value.ask.return_value = ""
        assert QuestionaryPrompter().ask("?") == ""

    @patch("k8squest_installer.cli.prompt._import_questionary")
    def test_cancel_raises(self, mock_q: MagicMock) -> None:
        mock_q.return_value.text.return_value.ask.return_value = None

        with pytest.raises(InvalidInputError, match="No answer given") as exc_info:
            QuestionaryPrompter().ask("?")
        assert exc_info.value.hint is not None
        assert "--kind" in exc_info.value.hint

    def test_missing_questionary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "questionary", None)
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            QuestionaryPrompter().ask("?")


# ---------------------------------------------------------------------------
# ConsoleReporter
# ---------------------------------------------------------------------------

class TestConsoleReporter:
    def test_messages_reach_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        reporter = ConsoleReporter()
        reporter.section("Cluster Selection")
        reporter.info("Creating Kubernetes cluster...")
        reporter.success("Prerequisites OK")
        reporter.warning("RBAC config not found, skipping")

        err = capsys.readouterr().err
        assert "Cluster Selection" in err
        assert "Creating Kubernetes cluster..." in err
        assert "Prerequisites OK" in err
        assert "Warning: RBAC config not found, skipping" in err

    def test_choices_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleReporter().show_choices("Available cluster contexts", ["alpha", "beta[x]"])

        err = capsys.readouterr().err
        assert "alpha" in err
        assert "beta[x]" in err

    def test_choices_plain(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)

        ConsoleReporter().show_choices("Available cluster contexts", ["alpha", "beta", "gamma"])

        err = capsys.readouterr().err
        assert " 1) alpha" in err
        assert " 3) gamma" in err

    def test_working_plain(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        ran = []

        with ConsoleReporter().working("Installing Python dependencies..."):
            ran.append(True)

        assert ran == [True]
        err = capsys.readouterr().err
        assert "Installing Python dependencies..." in err
        assert "[bold" not in err

    def test_bracketed_messages_are_printed_verbatim(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        reporter = ConsoleReporter()
        reporter.success("Using context: team[/x]")
        reporter.warning("[red]not a style")

        err = capsys.readouterr().err
        assert "Using context: team[/x]" in err
        assert "[red]not a style" in err

    def test_bracketed_messages_plain(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)

        ConsoleReporter().info("Using context: team[/x]")

        assert capsys.readouterr().err == "> Using context: team[/x]\n"

    def test_echo_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        echo_command(["kind", "create", "cluster", "--name", "k8squest"])
        assert "$ kind create cluster --name k8squest" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Console proxy
# ---------------------------------------------------------------------------

class TestConsole:
    def test_plain_fallback_strips_markup(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        console.print("[bold red]Error:[/bold red] boom")
        assert capsys.readouterr().err == "Error: boom\n"

    def test_strip_markup_keeps_numbers(self) -> None:
        assert strip_markup("[green]OK[/green] choice [1]") == "OK choice [1]"

    def test_strip_markup_keeps_escaped_brackets(self) -> None:
        assert strip_markup("[bold]Error:[/bold] \\[/x]") == "Error: [/x]"

    def test_escape_markup_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        assert strip_markup(escape_markup("team[/x] [bold]")) == "team[/x] [bold]"
