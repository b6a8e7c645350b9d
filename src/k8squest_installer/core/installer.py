"""Installer orchestrator — runs the setup stages in order.

Every collaborator is injected at construction time and satisfies a
protocol from :mod:`k8squest_installer.core.protocols`.  The run is a
fixed list of stages; the first stage that raises an
:class:`~k8squest_installer.exceptions.InstallerError` aborts it.

Guarantees
----------
* No ``print()``; progress goes through the injected reporter.
* No subprocess calls of its own; the only filesystem probe is the
  RBAC manifest existence check.
* Re-running against an already-prepared environment is a no-op apart
  from dependency installation, context switching and the
  apply-style manifest steps.
"""

from __future__ import annotations

from collections.abc import Callable

from k8squest_installer.core.models import (
    ClusterMode,
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
from k8squest_installer.core.selection import (
    resolve_cluster_choice,
    resolve_context_choice,
    validate_context,
)
from k8squest_installer.exceptions import (
    MissingPrerequisiteError,
    MissingResourceError,
)

REQUIRED_BINARIES: tuple[str, ...] = ("kubectl", "python3")

KIND_INSTALL_URL = "https://kind.sigs.k8s.io/docs/user/quick-start/#installation"

Stage = Callable[[InstallState], None]


class Installer:
    """Sequential orchestrator for a K8sQuest installation.

    Parameters
    ----------
    config:
        Names and paths the run operates on.
    locator, venv, kube, cluster_tool, package_manager:
        Infrastructure adapters.
    prompter, reporter:
        Operator interaction, supplied by the CLI layer.
    """

    def __init__(
        self,
        config: InstallConfig,
        *,
        locator: BinaryLocator,
        venv: VirtualEnvironment,
        kube: KubeClient,
        cluster_tool: ClusterTool,
        package_manager: PackageManager,
        prompter: Prompter,
        reporter: Reporter,
    ) -> None:
        self._config = config
        self._locator = locator
        self._venv = venv
        self._kube = kube
        self._cluster_tool = cluster_tool
        self._package_manager = package_manager
        self._prompter = prompter
        self._reporter = reporter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def stages(self) -> list[Stage]:
        """Return the ordered stage list."""
        return [
            self.check_prerequisites,
            self.bootstrap_environment,
            self.resolve_cluster_mode,
            self.acquire_cluster,
            self.apply_baseline,
        ]

    def run(self, options: InstallOptions) -> InstallState:
        """Run every stage, stopping at the first failure.

        Returns
        -------
        InstallState
            The resolved mode and context plus what was created.
        """
        state = InstallState(mode=options.mode, context=options.context)
        for stage in self.stages():
            stage(state)
        return state

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def check_prerequisites(self, state: InstallState) -> None:
        for name in REQUIRED_BINARIES:
            self._locator.require(name)
        self._reporter.success("Prerequisites OK")

    def bootstrap_environment(self, state: InstallState) -> None:
        venv_dir = self._config.venv_path
        if not self._venv.exists(venv_dir):
            self._reporter.info("Creating Python virtual environment...")
            self._venv.create(venv_dir, self._locator.require("python3"))
            state.created_venv = True

        with self._reporter.working("Installing Python dependencies..."):
            self._venv.install_requirements(venv_dir, self._config.requirements_path)
        self._reporter.success("Python packages installed")

    def resolve_cluster_mode(self, state: InstallState) -> None:
        if state.mode is not None:
            return
        self._reporter.section("Cluster Selection")
        self._reporter.show_choices(
            "Choose your cluster option",
            [
                f"Create a new kind cluster ({self._config.cluster_name}) (default)",
                "Use an existing cluster context",
            ],
        )
        state.mode = resolve_cluster_choice(
            self._prompter.ask("Enter your choice (1 or 2) [1]:")
        )

    def acquire_cluster(self, state: InstallState) -> None:
        if state.mode is ClusterMode.KIND:
            self._acquire_kind_cluster(state)
        else:
            self._acquire_existing_context(state)

    def apply_baseline(self, state: InstallState) -> None:
        namespace = self._config.namespace
        self._reporter.info(f"Setting up {namespace} namespace...")
        self._kube.apply_namespace(namespace)

        self._reporter.info("Configuring safety guards (RBAC)...")
        manifest = self._config.rbac_path
        if manifest.is_file():
            self._kube.apply_manifest(manifest)
            state.rbac_applied = True
            self._reporter.success("Safety guards configured")
        else:
            self._reporter.warning("RBAC config not found, skipping")

    # ------------------------------------------------------------------
    # Cluster paths
    # ------------------------------------------------------------------

    def _acquire_kind_cluster(self, state: InstallState) -> None:
        self._ensure_cluster_tool()

        name = self._config.cluster_name
        if name in self._cluster_tool.list_clusters():
            self._reporter.success("Cluster already exists")
        else:
            self._reporter.info("Creating Kubernetes cluster...")
            self._cluster_tool.create_cluster(name)
            state.created_cluster = True

        state.context = self._config.kind_context
        self._kube.use_context(state.context)

    def _ensure_cluster_tool(self) -> None:
        tool = self._cluster_tool.binary
        if self._locator.is_available(tool):
            self._reporter.success(f"{tool} is already installed")
            return

        manager = self._package_manager.binary
        self._reporter.info(f"{tool} not found. Installing {tool}...")
        if not self._locator.is_available(manager):
            raise MissingPrerequisiteError(
                f"{tool} is not installed and {manager} was not found.",
                hint=f"Please install {tool} manually: {KIND_INSTALL_URL}",
            )
        self._package_manager.install(tool)
        self._reporter.success(f"{tool} installed successfully")

    def _acquire_existing_context(self, state: InstallState) -> None:
        contexts = self._kube.list_contexts()
        if not state.context:
            if not contexts:
                raise MissingResourceError(
                    "No cluster contexts found in KUBECONFIG.",
                    hint="Configure a cluster first, or re-run with --kind.",
                )
            self._reporter.show_choices("Available cluster contexts", contexts)
            state.context = resolve_context_choice(
                self._prompter.ask("Enter the number or name of the context to use:"),
                contexts,
            )

        validate_context(state.context, contexts)
        self._reporter.success(f"Using context: {state.context}")
        self._kube.use_context(state.context)
