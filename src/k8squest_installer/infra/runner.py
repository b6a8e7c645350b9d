"""Infrastructure: blocking execution of external commands.

This module is the **only** place in the codebase that calls
:mod:`subprocess`.  Failures to start a command and non-zero exits
(when ``check`` is set) are re-raised as
:class:`~k8squest_installer.exceptions.ExternalCommandError`.

Rules
-----
* No timeouts — the external tool decides when it is done.
* No ``print()`` — an optional ``on_command`` callback lets the CLI
  echo commands in verbose mode.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable, Sequence

from k8squest_installer.core.models import CommandResult
from k8squest_installer.exceptions import ExternalCommandError

CommandCallback = Callable[[Sequence[str]], None]


class CommandRunner:
    """Thin wrapper over :func:`subprocess.run`.

    Parameters
    ----------
    on_command:
        Optional callable invoked with the argument list before each
        command starts.
    """

    def __init__(self, on_command: CommandCallback | None = None) -> None:
        self._on_command = on_command

    def run(
        self,
        args: Sequence[str],
        *,
        capture: bool = False,
        input_text: str | None = None,
        check: bool = True,
    ) -> CommandResult:
        """Run *args* to completion.

        Parameters
        ----------
        capture:
            Collect stdout/stderr instead of inheriting the terminal.
        input_text:
            Text written to the command's stdin.
        check:
            Raise on a non-zero exit status.

        Raises
        ------
        ExternalCommandError
            When the command cannot be started, or exits non-zero and
            *check* is set.
        """
        argv = [str(arg) for arg in args]
        if self._on_command is not None:
            self._on_command(argv)

        try:
            completed = subprocess.run(  # noqa: S603
                argv,
                input=input_text,
                capture_output=capture,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ExternalCommandError(
                f"Could not run '{argv[0]}': {exc.strerror or exc}",
                command=argv,
            ) from exc

        result = CommandResult(
            args=tuple(argv),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if check and not result.ok:
            raise ExternalCommandError(
                f"Command failed with exit code {result.returncode}: {format_command(argv)}",
                command=argv,
                returncode=result.returncode,
                hint=result.stderr.strip() or None,
            )
        return result


def format_command(args: Sequence[str]) -> str:
    """Render *args* as a copy-pasteable shell line."""
    return shlex.join(str(arg) for arg in args)
