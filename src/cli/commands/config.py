"""Config command implementation."""

from __future__ import annotations

from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.panel import Panel

from config import AppSettings
from config.loader import GLOBAL_CONFIG_PATH, _parse_yaml_file
from console_singleton import get_console


@click.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the effective settings after all config sources are merged."""
    settings: AppSettings = ctx.obj["settings"]
    get_console().print_json(settings.model_dump_json())


@config.command()
@click.option(
    "--file",
    "config_file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to specific config file to validate.",
)
def validate(config_file_path: Path | None) -> None:
    """Validate configuration file syntax and values.

    Examples:
      sublang config validate                    # Validate global config
      sublang config validate --file path.yaml   # Validate specific file
    """
    console = get_console()
    config_path = config_file_path or GLOBAL_CONFIG_PATH

    if not config_path.exists():
        console.print(Panel(
            f"[yellow]Config file not found:[/yellow]\n{config_path}",
            title="Configuration Not Found",
            border_style="yellow",
        ))
        raise click.Abort()

    try:
        yaml_data = _parse_yaml_file(config_path)
    except yaml.YAMLError as e:
        console.print(Panel(
            f"[red]YAML Syntax Error:[/red]\n{str(e)}",
            title="Validation Failed",
            border_style="red",
        ))
        raise click.exceptions.Exit(1)

    try:
        AppSettings(**yaml_data)
    except ValidationError as e:
        lines = [
            f"[red]{'.'.join(str(loc) for loc in error['loc'])}[/red]: {error['msg']}"
            for error in e.errors()
        ]
        console.print(Panel("\n".join(lines), title="Validation Failed", border_style="red"))
        raise click.exceptions.Exit(1)

    console.print(Panel(
        f"[green]Configuration is valid[/green]\n[dim]File: {config_path}[/dim]",
        border_style="green",
    ))
