"""Core layer — stage orchestration and pure selection logic.

Rules
-----
* No ``print()`` calls.
* No subprocess calls; external tools are reached through protocols.
* No imports from ``cli`` or ``infra``.
"""

from k8squest_installer.core.installer import Installer
from k8squest_installer.core.models import (
    ClusterMode,
    CommandResult,
    InstallConfig,
    InstallOptions,
    InstallState,
)
from k8squest_installer.core.protocols import (
    BinaryLocator,
    ClusterTool,
    KubeClient,
    PackageManager,
    Prompter,
    Reporter,
    VirtualEnvironment,
)

__all__: list[str] = [
    "BinaryLocator",
    "ClusterMode",
    "ClusterTool",
    "CommandResult",
    "InstallConfig",
    "InstallOptions",
    "InstallState",
    "Installer",
    "KubeClient",
    "PackageManager",
    "Prompter",
    "Reporter",
    "VirtualEnvironment",
]
