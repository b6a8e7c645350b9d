"""CLI console helpers with optional Rich support.

This module avoids module-level imports of optional UI dependencies so
bootstrap paths (``--help``, ``--version``) keep working even when Rich
is not installed.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from k8squest_installer.exceptions import EnvironmentError

_MARKUP = re.compile(r"(?<!\\)\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def strip_markup(text: str) -> str:
    """Remove simple ``[style]...[/style]`` tags for plain output.

    Escaped brackets (``\\[``) are kept as literal ``[``.
    """
    return _MARKUP.sub("", text).replace("\\[", "[")


def escape_markup(text: object) -> str:
    """Make *text* safe to embed in a markup string.

    Context names, exception messages and tool output are operator or
    tool supplied and may contain square brackets.
    """
    try:
        from rich.markup import escape
    except ModuleNotFoundError:
        return str(text).replace("[", "\\[")
    return escape(str(text))


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(
                *(strip_markup(o) if isinstance(o, str) else o for o in objects),
                file=sys.stderr,
            )
            return
        rich_console.print(*objects)

    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        """Show a spinner while the block runs (plain line without Rich)."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(strip_markup(message), file=sys.stderr)
            yield
            return
        with rich_console.status(message):
            yield


console = _ConsoleProxy()
