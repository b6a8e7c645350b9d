"""Infrastructure: executable detection and platform guidance.

Locates the external tools the installer drives (``kubectl``,
``python3``, ``kind``, ``brew``) and provides platform-specific
installation hints when one is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from k8squest_installer.exceptions import MissingPrerequisiteError


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BinaryStatus:
    """Result of probing PATH for one executable.

    Attributes
    ----------
    name : str
        Executable that was looked up.
    found : bool
        Whether it was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty when
        the binary is present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_binary(name: str) -> BinaryStatus:
    """Probe PATH for *name*.

    Returns a :class:`BinaryStatus` regardless of the outcome — the
    caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)
    if result is not None:
        return BinaryStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return BinaryStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )


def require_binary(name: str) -> Path:
    """Locate *name* or raise :class:`MissingPrerequisiteError`."""
    status = detect_binary(name)
    if not status.found or status.path is None:
        hint: str | None = None
        if status.install_commands:
            hint = "\n".join(
                [f"Install {name} using one of:"]
                + [f"  {cmd}" for cmd in status.install_commands]
            )
        raise MissingPrerequisiteError(f"{name} not found on PATH.", hint=hint)
    return status.path


class PathBinaryLocator:
    """:class:`~k8squest_installer.core.protocols.BinaryLocator` over PATH."""

    def is_available(self, name: str) -> bool:
        return detect_binary(name).found

    def require(self, name: str) -> Path:
        return require_binary(name)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_INSTALL_COMMANDS: dict[str, dict[str, tuple[str, ...]]] = {
    "kubectl": {
        "darwin": ("brew install kubectl",),
        "linux": (
            "sudo snap install kubectl --classic",
            "brew install kubectl",
        ),
        "windows": (
            "winget install Kubernetes.kubectl",
            "choco install kubernetes-cli",
        ),
    },
    "python3": {
        "darwin": ("brew install python",),
        "linux": (
            "sudo apt install python3 python3-venv",
            "sudo dnf install python3",
        ),
        "windows": ("winget install Python.Python.3.12",),
    },
    "kind": {
        "darwin": ("brew install kind",),
        "linux": ("brew install kind", "go install sigs.k8s.io/kind@latest"),
        "windows": ("choco install kind", "winget install Kubernetes.kind"),
    },
    "brew": {
        "darwin": ("See https://brew.sh",),
        "linux": ("See https://docs.brew.sh/Homebrew-on-Linux",),
    },
}


def platform_install_commands(name: str) -> tuple[str, ...]:
    """Return install commands for *name* on the current OS."""
    system = platform.system().lower()
    return _INSTALL_COMMANDS.get(name, {}).get(system, ())
