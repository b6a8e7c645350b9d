"""Custom exception hierarchy for k8squest-installer.

All exceptions that cross layer boundaries must inherit from
:class:`InstallerError`.  Raw ``subprocess`` and ``OSError`` failures
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
InstallerError
├── MissingPrerequisiteError
├── InvalidInputError
├── MissingResourceError
│   └── ContextNotFoundError
├── ExternalCommandError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Sequence


class InstallerError(Exception):
    """Base exception for all installer errors.

    Every user-visible failure maps to a subclass of this exception so
    that the CLI error boundary can render a single-line diagnostic and
    exit without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Prerequisites ---------------------------------------------------------

class MissingPrerequisiteError(InstallerError):
    """Raised when a required external binary cannot be found on PATH."""


# --- Operator input --------------------------------------------------------

class InvalidInputError(InstallerError):
    """Raised when an interactive answer is invalid or the prompt is cancelled."""


# --- Files / contexts ------------------------------------------------------

class MissingResourceError(InstallerError):
    """Raised when a required file or cluster context is not available."""


class ContextNotFoundError(MissingResourceError):
    """Raised when a context name is absent from the kubeconfig."""


# --- External commands -----------------------------------------------------

class ExternalCommandError(InstallerError):
    """Raised when an external command fails or cannot be started."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int | None = returncode


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(InstallerError):
    """Raised when an optional UI dependency (rich, questionary) is missing."""
