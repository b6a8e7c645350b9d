"""Allow ``python -m k8squest_installer`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m k8squest_installer`` behaves identically to the
``k8squest-install`` console script.
"""

from __future__ import annotations

from k8squest_installer.cli.app import cli

if __name__ == "__main__":
    cli()
