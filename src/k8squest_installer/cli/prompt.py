"""Interactive prompts for the CLI layer.

Asks the operator free-text questions via questionary and hands the raw
answer back to the core layer, which owns the validation rules.
"""

from __future__ import annotations

from typing import Any

from k8squest_installer.exceptions import EnvironmentError, InvalidInputError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """:class:`~k8squest_installer.core.protocols.Prompter` using questionary."""

    def ask(self, message: str) -> str:
        """Ask *message* and return the answer verbatim.

        Raises
        ------
        InvalidInputError
            If the operator cancels the prompt (Ctrl+C / Esc).
        """
        questionary = _import_questionary()

        answer: str | None = questionary.text(message).ask()  # None on Ctrl+C
        if answer is None:
            raise InvalidInputError(
                "No answer given.",
                hint="Run the installer again, or pass --kind / --cluster-context.",
            )
        return answer
