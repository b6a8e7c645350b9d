"""``kubectl``-backed :class:`~k8squest_installer.core.protocols.KubeClient`.

Reads and switches kubeconfig contexts and applies manifests.  All
commands go through :class:`~k8squest_installer.infra.runner.CommandRunner`,
so failures surface as
:class:`~k8squest_installer.exceptions.ExternalCommandError`.
"""

from __future__ import annotations

from pathlib import Path

from k8squest_installer.infra.runner import CommandRunner


class KubectlClient:
    """Context store and manifest application via ``kubectl``."""

    binary = "kubectl"

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def list_contexts(self) -> list[str]:
        """Return context names in kubeconfig order."""
        result = self._runner.run(
            [self.binary, "config", "get-contexts", "-o", "name"],
            capture=True,
        )
        return result.lines()

    def use_context(self, name: str) -> None:
        self._runner.run([self.binary, "config", "use-context", name])

    def apply_namespace(self, name: str) -> None:
        """Render the namespace client-side and apply it.

        Unlike ``kubectl create namespace``, this succeeds when the
        namespace already exists.
        """
        rendered = self._runner.run(
            [
                self.binary,
                "create",
                "namespace",
                name,
                "--dry-run=client",
                "-o",
                "yaml",
            ],
            capture=True,
        )
        self._runner.run(
            [self.binary, "apply", "-f", "-"],
            input_text=rendered.stdout,
        )

    def apply_manifest(self, path: Path) -> None:
        self._runner.run([self.binary, "apply", "-f", str(path)])
