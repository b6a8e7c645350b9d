"""k8squest-installer — bootstrap a local K8sQuest environment.

Checks prerequisites, prepares a Python virtual environment, provisions
or selects a Kubernetes cluster, and applies the baseline manifests.
"""

from k8squest_installer.version import __version__

__all__: list[str] = ["__version__"]
