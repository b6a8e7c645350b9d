"""``k8squest-install --doctor`` — environment diagnostics.

Gathers system information and renders a Rich table summarising whether
the machine can run the installer.  Nothing is created or modified.
"""

from __future__ import annotations

import platform
import sys

from k8squest_installer.cli import exit_codes
from k8squest_installer.cli.console import console, escape_markup
from k8squest_installer.core.installer import REQUIRED_BINARIES
from k8squest_installer.infra.binaries import BinaryStatus, detect_binary
from k8squest_installer.version import __version__

OPTIONAL_BINARIES: tuple[str, ...] = ("kind", "brew")


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the running interpreter."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _binary_check(status_obj: BinaryStatus, *, required: bool) -> tuple[str, str, str]:
    """Return (label, value, status) for one probed executable."""
    name = status_obj.name
    if status_obj.found:
        return name, str(status_obj.path), "[green]OK[/green]"
    if required:
        return name, "not found", "[red]FAIL[/red]"
    return name, "not found", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    system_raw = platform.system()
    system_display = {"Darwin": "macOS"}.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def probe_binaries() -> dict[str, BinaryStatus]:
    """Look up every required and optional executable once."""
    return {name: detect_binary(name) for name in REQUIRED_BINARIES + OPTIONAL_BINARIES}


def collect_checks(binaries: dict[str, BinaryStatus]) -> list[tuple[str, str, str]]:
    checks = [
        ("k8squest-install", __version__, "[green]OK[/green]"),
        _python_version_check(),
    ]
    checks.extend(_binary_check(binaries[name], required=True) for name in REQUIRED_BINARIES)
    checks.extend(_binary_check(binaries[name], required=False) for name in OPTIONAL_BINARIES)
    checks.append(_os_check())
    return checks


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    print("\nk8squest-install doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<36} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<36} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when every required check passes,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Missing optional
        tools only warn.
    """
    binaries = probe_binaries()
    checks = collect_checks(binaries)
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="k8squest-install doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, escape_markup(value), status)
        console.print()
        console.print(table)
        console.print()

    for name, status_obj in binaries.items():
        if not status_obj.found and status_obj.install_commands:
            console.print(f"[yellow]{name} is not installed.[/yellow] Install using one of:")
            for cmd in status_obj.install_commands:
                console.print(f"  [bold]{cmd}[/bold]")

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
