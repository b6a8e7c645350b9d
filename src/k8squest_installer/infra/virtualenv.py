"""Virtual-environment adapter using ``python3 -m venv`` and ``pip``.

Satisfies :class:`~k8squest_installer.core.protocols.VirtualEnvironment`.
"""

from __future__ import annotations

from pathlib import Path

from k8squest_installer.exceptions import ExternalCommandError, MissingResourceError
from k8squest_installer.infra.runner import CommandRunner, format_command

# POSIX layout first, then Windows.
_INTERPRETER_CANDIDATES: tuple[Path, ...] = (
    Path("bin") / "python",
    Path("Scripts") / "python.exe",
)


def venv_interpreter(venv_dir: Path) -> Path | None:
    """Return the interpreter inside *venv_dir*, or ``None``."""
    for candidate in _INTERPRETER_CANDIDATES:
        path = venv_dir / candidate
        if path.is_file():
            return path
    return None


class PipVirtualEnvironment:
    """Creates ``venv_dir`` and installs requirements with its own pip."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def exists(self, venv_dir: Path) -> bool:
        return venv_dir.is_dir()

    def create(self, venv_dir: Path, python: Path) -> None:
        self._runner.run([str(python), "-m", "venv", str(venv_dir)])
        if not venv_dir.is_dir():
            raise ExternalCommandError(
                "Failed to create virtual environment.",
                command=[str(python), "-m", "venv", str(venv_dir)],
            )

    def install_requirements(self, venv_dir: Path, requirements: Path) -> None:
        interpreter = venv_interpreter(venv_dir)
        if interpreter is None:
            raise MissingResourceError(
                "Virtual environment interpreter not found.",
                hint=f"Expected {venv_dir / 'bin' / 'python'} or "
                f"{venv_dir / 'Scripts' / 'python.exe'}. "
                f"Remove {venv_dir} and re-run the installer.",
            )
        if not requirements.is_file():
            raise MissingResourceError(f"Requirements file not found: {requirements}")

        args = [str(interpreter), "-m", "pip", "install", "-q", "-r", str(requirements)]
        try:
            self._runner.run(args)
        except ExternalCommandError as exc:
            raise ExternalCommandError(
                "Failed to install Python dependencies.",
                command=exc.command,
                returncode=exc.returncode,
                hint=f"Re-run manually to see the full output:\n  {format_command(args)}",
            ) from exc
