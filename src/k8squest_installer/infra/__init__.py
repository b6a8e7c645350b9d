"""Infrastructure layer — external tool integration.

This layer wraps every interaction with ``kubectl``, ``kind``, ``brew``,
``python3 -m venv`` and ``pip``.  Every raw ``subprocess``/``OSError``
failure must be caught here and re-raised as a
:class:`~k8squest_installer.exceptions.InstallerError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from k8squest_installer.infra.binaries import (
    BinaryStatus,
    PathBinaryLocator,
    detect_binary,
    require_binary,
)
from k8squest_installer.infra.kind import HomebrewPackageManager, KindClusterTool
from k8squest_installer.infra.kubectl import KubectlClient
from k8squest_installer.infra.runner import CommandRunner
from k8squest_installer.infra.virtualenv import PipVirtualEnvironment

__all__: list[str] = [
    "BinaryStatus",
    "CommandRunner",
    "HomebrewPackageManager",
    "KindClusterTool",
    "KubectlClient",
    "PathBinaryLocator",
    "PipVirtualEnvironment",
    "detect_binary",
    "require_binary",
]
