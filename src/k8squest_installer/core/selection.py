"""Pure resolution of operator answers.

Turns raw prompt input into a :class:`ClusterMode` or a context name.
No I/O; every invalid answer raises :class:`InvalidInputError`.
"""

from __future__ import annotations

from collections.abc import Sequence

from k8squest_installer.core.models import ClusterMode
from k8squest_installer.exceptions import ContextNotFoundError, InvalidInputError

CLUSTER_CHOICES: tuple[tuple[str, ClusterMode], ...] = (
    ("1", ClusterMode.KIND),
    ("2", ClusterMode.EXISTING),
)
DEFAULT_CLUSTER_CHOICE = "1"


def resolve_cluster_choice(raw: str) -> ClusterMode:
    """Map the answer to the cluster-option prompt onto a mode.

    Empty input selects the default (``1``).
    """
    answer = raw.strip() or DEFAULT_CLUSTER_CHOICE
    for key, mode in CLUSTER_CHOICES:
        if answer == key:
            return mode
    raise InvalidInputError(
        f"Invalid choice {answer!r}.",
        hint="Please run the installer again and select 1 or 2.",
    )


def resolve_context_choice(raw: str, contexts: Sequence[str]) -> str:
    """Map the answer to the context prompt onto a context name.

    An answer made only of ASCII digits is a 1-based index into
    *contexts*; anything else is taken literally and validated later.
    """
    answer = raw.strip()
    if answer.isascii() and answer.isdigit():
        index = int(answer) - 1
        if 0 <= index < len(contexts):
            return contexts[index]
        raise InvalidInputError(
            f"Invalid selection {answer!r}.",
            hint=f"Pick a number between 1 and {len(contexts)}.",
        )
    return answer


def validate_context(name: str, contexts: Sequence[str]) -> str:
    """Return *name* if it is one of *contexts*, else raise."""
    if name and name in contexts:
        return name
    raise ContextNotFoundError(
        f"Context '{name}' not found.",
        hint="List available contexts with: kubectl config get-contexts -o name",
    )
