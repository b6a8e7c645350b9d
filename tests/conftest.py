"""Shared pytest fixtures and configuration for the k8squest-installer suite.

Guidelines
----------
* No real subprocess is ever started; adapters are faked at the
  protocol boundary or ``subprocess.run`` is mocked.
* No real terminal interaction; prompts are scripted.
* Filesystem state lives under ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from k8squest_installer.core.installer import Installer
from k8squest_installer.core.models import InstallConfig
from k8squest_installer.exceptions import MissingPrerequisiteError


# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------

class FakeLocator:
    def __init__(self, available: Iterable[str] = ("kubectl", "python3", "kind", "brew")) -> None:
        self.available: set[str] = set(available)

    def is_available(self, name: str) -> bool:
        return name in self.available

    def require(self, name: str) -> Path:
        if name not in self.available:
            raise MissingPrerequisiteError(f"{name} not found on PATH.")
        return Path("/usr/bin") / name


class FakeVenv:
    def __init__(self, present: bool = False) -> None:
        self.present = present
        self.created = 0
        self.installs = 0

    def exists(self, venv_dir: Path) -> bool:
        return self.present

    def create(self, venv_dir: Path, python: Path) -> None:
        self.present = True
        self.created += 1

    def install_requirements(self, venv_dir: Path, requirements: Path) -> None:
        self.installs += 1


class FakeKube:
    def __init__(self, contexts: Iterable[str] = ()) -> None:
        self.contexts: list[str] = list(contexts)
        self.current: str | None = None
        self.switches: list[str] = []
        self.namespaces: set[str] = set()
        self.manifests: list[Path] = []

    def list_contexts(self) -> list[str]:
        return list(self.contexts)

    def use_context(self, name: str) -> None:
        self.current = name
        self.switches.append(name)

    def apply_namespace(self, name: str) -> None:
        self.namespaces.add(name)

    def apply_manifest(self, path: Path) -> None:
        self.manifests.append(path)


class FakeClusterTool:
    binary = "kind"

    def __init__(self, kube: FakeKube, clusters: Iterable[str] = ()) -> None:
        self._kube = kube
        self.clusters: list[str] = list(clusters)
        self.created: list[str] = []

    def list_clusters(self) -> list[str]:
        return list(self.clusters)

    def create_cluster(self, name: str) -> None:
        self.clusters.append(name)
        self.created.append(name)
        self._kube.contexts.append(f"kind-{name}")


class FakePackageManager:
    binary = "brew"

    def __init__(self, locator: FakeLocator) -> None:
        self._locator = locator
        self.installed: list[str] = []

    def install(self, package: str) -> None:
        self.installed.append(package)
        self._locator.available.add(package)


class FakePrompter:
    def __init__(self, answers: Iterable[str] = ()) -> None:
        self.answers: list[str] = list(answers)
        self.questions: list[str] = []

    def ask(self, message: str) -> str:
        self.questions.append(message)
        return self.answers.pop(0)


class RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.choices: list[tuple[str, list[str]]] = []

    def section(self, title: str) -> None:
        self.events.append(("section", title))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def success(self, message: str) -> None:
        self.events.append(("success", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def show_choices(self, title: str, choices: list[str]) -> None:
        self.choices.append((title, list(choices)))

    @contextmanager
    def working(self, message: str) -> Iterator[None]:
        self.events.append(("working", message))
        yield


# ---------------------------------------------------------------------------
# Harness
# ---------------------------------------------------------------------------

@dataclass
class Harness:
    """An :class:`Installer` wired to fakes, plus handles on each fake."""

    config: InstallConfig
    locator: FakeLocator = field(default_factory=FakeLocator)
    venv: FakeVenv = field(default_factory=FakeVenv)
    kube: FakeKube = field(default_factory=FakeKube)
    prompter: FakePrompter = field(default_factory=FakePrompter)
    reporter: RecordingReporter = field(default_factory=RecordingReporter)
    cluster_tool: FakeClusterTool | None = None
    package_manager: FakePackageManager | None = None

    def __post_init__(self) -> None:
        if self.cluster_tool is None:
            self.cluster_tool = FakeClusterTool(self.kube)
        if self.package_manager is None:
            self.package_manager = FakePackageManager(self.locator)

    def installer(self) -> Installer:
        return Installer(
            self.config,
            locator=self.locator,
            venv=self.venv,
            kube=self.kube,
            cluster_tool=self.cluster_tool,
            package_manager=self.package_manager,
            prompter=self.prompter,
            reporter=self.reporter,
        )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project directory with requirements and the RBAC manifest."""
    (tmp_path / "requirements.txt").write_text("rich\n")
    rbac = tmp_path / "rbac"
    rbac.mkdir()
    (rbac / "k8squest-rbac.yaml").write_text("kind: Role\n")
    return tmp_path


@pytest.fixture
def harness(project_dir: Path) -> Harness:
    return Harness(config=InstallConfig(project_dir=project_dir))
