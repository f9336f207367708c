"""sublang CLI main entry point."""

from __future__ import annotations

from pathlib import Path

import click

from cli.commands import register_commands
from cli.core import prepare_initial_settings
from console_singleton import configure_console


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config.yaml or .env file.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging for debugging.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Suppress all console output.",
)
@click.pass_context
def app(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """sublang: subtitle language detection and language-name lookup."""
    configure_console(quiet=quiet)
    settings = prepare_initial_settings(config_file, verbose)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


register_commands(app)


if __name__ == "__main__":
    app()
