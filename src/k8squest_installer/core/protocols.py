"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
layer must satisfy.  Core code depends ONLY on these protocols — never
on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol


class BinaryLocator(Protocol):
    """Finds executables on the system PATH."""

    def is_available(self, name: str) -> bool:
        """Return whether *name* resolves on PATH."""
        ...  # pragma: no cover

    def require(self, name: str) -> Path:
        """Return the resolved path of *name*.

        Raises
        ------
        MissingPrerequisiteError
            When *name* is not on PATH.
        """
        ...  # pragma: no cover


class VirtualEnvironment(Protocol):
    """Creates an isolated environment and installs requirements into it."""

    def exists(self, venv_dir: Path) -> bool:
        ...  # pragma: no cover

    def create(self, venv_dir: Path, python: Path) -> None:
        """Create *venv_dir* with the interpreter at *python*.

        Raises
        ------
        ExternalCommandError
            When creation fails or leaves no directory behind.
        """
        ...  # pragma: no cover

    def install_requirements(self, venv_dir: Path, requirements: Path) -> None:
        """Install *requirements* into *venv_dir*.

        Raises
        ------
        MissingResourceError
            When the venv has no interpreter or *requirements* is absent.
        ExternalCommandError
            When the package installer fails.
        """
        ...  # pragma: no cover


class KubeClient(Protocol):
    """Kubeconfig queries and manifest application."""

    def list_contexts(self) -> list[str]:
        ...  # pragma: no cover

    def use_context(self, name: str) -> None:
        ...  # pragma: no cover

    def apply_namespace(self, name: str) -> None:
        """Create-or-update namespace *name* (never fails if it exists)."""
        ...  # pragma: no cover

    def apply_manifest(self, path: Path) -> None:
        ...  # pragma: no cover


class ClusterTool(Protocol):
    """Local ephemeral-cluster manager (kind)."""

    binary: str

    def list_clusters(self) -> list[str]:
        ...  # pragma: no cover

    def create_cluster(self, name: str) -> None:
        ...  # pragma: no cover


class PackageManager(Protocol):
    """Fallback installer for missing tools."""

    binary: str

    def install(self, package: str) -> None:
        ...  # pragma: no cover


class Prompter(Protocol):
    """Free-text question asked to the operator."""

    def ask(self, message: str) -> str:
        """Return the raw answer.

        Raises
        ------
        InvalidInputError
            When the operator cancels the prompt.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Receives progress messages from the orchestrator."""

    def section(self, title: str) -> None:
        ...  # pragma: no cover

    def info(self, message: str) -> None:
        ...  # pragma: no cover

    def success(self, message: str) -> None:
        ...  # pragma: no cover

    def warning(self, message: str) -> None:
        ...  # pragma: no cover

    def show_choices(self, title: str, choices: Sequence[str]) -> None:
        """Display *choices* numbered from 1."""
        ...  # pragma: no cover

    def working(self, message: str) -> AbstractContextManager[object]:
        """Context manager wrapping a long-running step."""
        ...  # pragma: no cover
