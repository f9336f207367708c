"""Shared rich Console used by the CLI commands."""

from __future__ import annotations

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get the shared Console instance.

    Returns:
        The Console set up by configure_console(), or a default one.
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def configure_console(*, quiet: bool = False) -> None:
    """Replace the shared Console, optionally silencing all output.

    Call once from the CLI group after parsing flags.
    """
    global _console
    _console = Console(quiet=quiet)
