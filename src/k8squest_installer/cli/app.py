"""CLI application entry point and command routing for k8squest-install.

This module is the **sole error boundary** for the entire application.
It catches :class:`~k8squest_installer.exceptions.InstallerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  orchestrator and the infrastructure adapters.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, NoReturn

from k8squest_installer.cli import exit_codes
from k8squest_installer.cli.console import console, escape_markup
from k8squest_installer.core.installer import Installer
from k8squest_installer.core.models import ClusterMode, InstallConfig, InstallOptions
from k8squest_installer.exceptions import InstallerError
from k8squest_installer.version import __version__

PROG = "k8squest-install"
HELP_FLAGS = frozenset({"-h", "--help"})

EPILOG = f"""\
examples:
  {PROG}                                  interactive mode
  {PROG} --kind                           create a kind cluster (k8squest)
  {PROG} --cluster-context my-cluster     use an existing context
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _InstallerArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with ``GENERAL_ERROR``."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        console.print(f"[bold red]Error:[/bold red] {escape_markup(message)}")
        console.print(f"Run '{self.prog} --help' for usage information")
        self.exit(exit_codes.GENERAL_ERROR)


class _ClusterContextAction(argparse.Action):
    """``--cluster-context NAME`` selects existing-context mode."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        namespace.mode = ClusterMode.EXISTING
        namespace.cluster_context = values


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``--kind`` and ``--cluster-context`` share one destination, so the
    last one given wins.
    """
    parser = _InstallerArgumentParser(
        prog=PROG,
        description="K8sQuest installation: prepare a Python environment and a cluster.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.set_defaults(mode=None, cluster_context=None)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--kind",
        dest="mode",
        action="store_const",
        const=ClusterMode.KIND,
        help="Create a new kind cluster (k8squest).",
    )
    parser.add_argument(
        "--cluster-context",
        metavar="NAME",
        action=_ClusterContextAction,
        help="Use an existing cluster context.",
    )
    parser.add_argument(
        "--project-dir",
        metavar="PATH",
        type=Path,
        default=None,
        help="Directory holding venv/, requirements.txt and rbac/ (default: current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo every external command before running it.",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the environment and exit without changing anything.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def build_installer(config: InstallConfig, *, verbose: bool = False) -> Installer:
    """Wire the orchestrator to the real adapters."""
    from k8squest_installer.cli.prompt import QuestionaryPrompter
    from k8squest_installer.cli.reporter import ConsoleReporter, echo_command
    from k8squest_installer.infra import (
        CommandRunner,
        HomebrewPackageManager,
        KindClusterTool,
        KubectlClient,
        PathBinaryLocator,
        PipVirtualEnvironment,
    )

    runner = CommandRunner(on_command=echo_command if verbose else None)
    return Installer(
        config,
        locator=PathBinaryLocator(),
        venv=PipVirtualEnvironment(runner),
        kube=KubectlClient(runner),
        cluster_tool=KindClusterTool(runner),
        package_manager=HomebrewPackageManager(runner),
        prompter=QuestionaryPrompter(),
        reporter=ConsoleReporter(),
    )


def _handle_install(args: argparse.Namespace) -> int:
    """Run the full installation."""
    project_dir = args.project_dir.resolve() if args.project_dir else None
    config = InstallConfig.from_env(project_dir)
    options = InstallOptions(
        mode=args.mode,
        context=args.cluster_context if args.mode is ClusterMode.EXISTING else None,
    )

    console.print("\n[bold]K8sQuest Installation[/bold]\n")
    state = build_installer(config, verbose=args.verbose).run(options)

    console.print(
        f"\n[bold green]Setup complete![/bold green]  context={escape_markup(state.context)}\n"
    )
    console.print("To start playing, use the shortcut:")
    console.print(f"  [bold]{escape_markup(config.play_script)}[/bold]\n")
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from k8squest_installer.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the k8squest-install CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.  Usage errors and ``--version`` exit via
        ``SystemExit`` from the parser.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()

    # Help wins over everything else on the line, valid or not.
    if HELP_FLAGS.intersection(arguments):
        parser.print_help()
        return exit_codes.SUCCESS

    args = parser.parse_args(arguments)

    if args.doctor:
        return _handle_doctor()

    return _handle_install(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except InstallerError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
