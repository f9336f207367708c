"""CLI commands module."""

import click

from cli.commands.config import config
from cli.commands.detect import detect
from cli.commands.list_languages import list_languages
from cli.commands.lookup import lookup


def register_commands(app: click.Group) -> None:
    """Register all CLI commands with the app."""
    app.add_command(detect)
    app.add_command(lookup)
    app.add_command(list_languages, name="list")
    app.add_command(config)
