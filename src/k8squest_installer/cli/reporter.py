"""Rich rendering of installer progress.

:class:`ConsoleReporter` satisfies
:class:`~k8squest_installer.core.protocols.Reporter`; the orchestrator
calls it, and it decides how each message looks on the terminal.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from k8squest_installer.cli.console import console, escape_markup
from k8squest_installer.infra.runner import format_command


class ConsoleReporter:
    """Prints stage progress through the shared console proxy."""

    def section(self, title: str) -> None:
        console.print()
        console.print(f"[bold cyan]{escape_markup(title)}[/bold cyan]")

    def info(self, message: str) -> None:
        console.print(f"[bold]>[/bold] {escape_markup(message)}")

    def success(self, message: str) -> None:
        console.print(f"[green]OK[/green] {escape_markup(message)}")

    def warning(self, message: str) -> None:
        console.print(f"[yellow]Warning:[/yellow] {escape_markup(message)}")

    def show_choices(self, title: str, choices: Sequence[str]) -> None:
        """Render *choices* as a numbered table."""
        try:
            from rich.markup import escape
            from rich.table import Table
        except ModuleNotFoundError:
            print(f"\n{title}:", file=sys.stderr)
            for i, choice in enumerate(choices, start=1):
                print(f"  {i:>2}) {choice}", file=sys.stderr)
            print(file=sys.stderr)
            return

        table = Table(
            title=title,
            show_header=False,
            border_style="dim",
        )
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Option")
        for i, choice in enumerate(choices, start=1):
            table.add_row(str(i), escape(choice))

        console.print()
        console.print(table)

    @contextmanager
    def working(self, message: str) -> Iterator[None]:
        with console.status(f"[bold blue]{escape_markup(message)}[/bold blue]"):
            yield


def echo_command(args: Sequence[str]) -> None:
    """Verbose-mode callback for :class:`CommandRunner`."""
    console.print(f"[dim]$ {escape_markup(format_command(args))}[/dim]")
