"""Local cluster and package-manager adapters.

:class:`KindClusterTool` drives ``kind`` for the ephemeral cluster;
:class:`HomebrewPackageManager` is the fallback used to install
``kind`` itself when it is missing.
"""

from __future__ import annotations

from k8squest_installer.infra.runner import CommandRunner


class KindClusterTool:
    """:class:`~k8squest_installer.core.protocols.ClusterTool` backed by kind."""

    binary = "kind"

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list_clusters(self) -> list[str]:
        result = self._runner.run([self.binary, "get", "clusters"], capture=True)
        return result.lines()

    def create_cluster(self, name: str) -> None:
        self._runner.run([self.binary, "create", "cluster", "--name", name])


class HomebrewPackageManager:
    """:class:`~k8squest_installer.core.protocols.PackageManager` backed by brew."""

    binary = "brew"

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def install(self, package: str) -> None:
        self._runner.run([self.binary, "install", package])
