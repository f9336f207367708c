"""Centralized error handling decorators for CLI commands."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar, cast

import click
from rich.markup import escape

from console_singleton import get_console
from exceptions import SublangError

F = TypeVar("F", bound=Callable)


def handle_cli_errors(func: F) -> F:
    """Decorator to standardize error handling for sublang errors.

    Catches SublangError (unknown languages, unreadable input), prints it in
    red, and exits with code 1.

    Usage:
        @click.command()
        @handle_cli_errors
        def my_command(ctx: click.Context):
            read_paragraphs(path, encoding)  # May raise SubtitleReadError
            ...
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SublangError as e:
            get_console().print(f"[red]{escape(str(e))}[/red]", highlight=False)
            raise click.exceptions.Exit(1)

    return cast(F, wrapper)
