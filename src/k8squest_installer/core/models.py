"""Domain models for k8squest-installer.

Configuration and results are **frozen** dataclasses.  The only mutable
model is :class:`InstallState`, which carries the resolved cluster mode
and context between stages of a single run and never outlives it.
"""

from __future__ import annotations

import enum
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


# ---------------------------------------------------------------------------
# Cluster mode
# ---------------------------------------------------------------------------

class ClusterMode(str, enum.Enum):
    """How the installer obtains a cluster."""

    KIND = "kind"
    """Create (or reuse) a local ephemeral kind cluster."""

    EXISTING = "existing"
    """Switch to a context already present in the kubeconfig."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_CLUSTER_NAME = "k8squest"
DEFAULT_NAMESPACE = "k8squest"


@dataclass(frozen=True, slots=True)
class InstallConfig:
    """Fixed names and paths used by the installer.

    Relative paths resolve against :attr:`project_dir`.
    """

    project_dir: Path = field(default_factory=Path.cwd)
    cluster_name: str = DEFAULT_CLUSTER_NAME
    namespace: str = DEFAULT_NAMESPACE
    venv_dir: Path = Path("venv")
    requirements_file: Path = Path("requirements.txt")
    rbac_manifest: Path = Path("rbac/k8squest-rbac.yaml")
    play_script: str = "./play.sh"

    @classmethod
    def from_env(
        cls,
        project_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> InstallConfig:
        """Build a config, honouring ``K8SQUEST_*`` overrides."""
        env = os.environ if environ is None else environ
        return cls(
            project_dir=Path.cwd() if project_dir is None else project_dir,
            cluster_name=env.get("K8SQUEST_CLUSTER_NAME") or DEFAULT_CLUSTER_NAME,
            namespace=env.get("K8SQUEST_NAMESPACE") or DEFAULT_NAMESPACE,
        )

    @property
    def kind_context(self) -> str:
        """Context name kind registers for :attr:`cluster_name`."""
        return f"kind-{self.cluster_name}"

    def resolve(self, path: Path) -> Path:
        """Return *path* anchored at the project directory."""
        return path if path.is_absolute() else self.project_dir / path

    @property
    def venv_path(self) -> Path:
        return self.resolve(self.venv_dir)

    @property
    def requirements_path(self) -> Path:
        return self.resolve(self.requirements_file)

    @property
    def rbac_path(self) -> Path:
        return self.resolve(self.rbac_manifest)


# ---------------------------------------------------------------------------
# Per-run data
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallOptions:
    """Flags parsed by the CLI layer."""

    mode: ClusterMode | None = None
    """Requested cluster mode, or ``None`` to prompt interactively."""

    context: str | None = None
    """Context supplied via ``--cluster-context``."""


@dataclass(slots=True)
class InstallState:
    """Mode and context resolved while the stages run."""

    mode: ClusterMode | None = None
    context: str | None = None
    created_venv: bool = False
    created_cluster: bool = False
    rbac_applied: bool = False


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one external command."""

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def lines(self) -> list[str]:
        """Non-empty, stripped lines of stdout."""
        return [line.strip() for line in self.stdout.splitlines() if line.strip()]
