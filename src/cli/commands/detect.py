"""Detect command implementation."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from cli.core import read_paragraphs, registry_for
from cli.errors import handle_cli_errors
from config import AppSettings
from console_singleton import get_console
from detection import detect_paragraphs, detect_paragraphs_or_none


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--encoding",
    "encoding",
    help="Encoding of the input file; legacy code pages also decide the language.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with code 1 instead of assuming the default language when nothing matches.",
)
@click.pass_context
@handle_cli_errors
def detect(ctx: click.Context, input_file: Path, encoding: str | None, strict: bool) -> None:
    """Guess the language of a plain-text subtitle dump (one paragraph per line)."""
    settings: AppSettings = ctx.obj["settings"]
    console = get_console()
    registry = registry_for(settings)

    paragraphs = read_paragraphs(input_file, encoding or settings.default_encoding)
    per = settings.paragraphs_per_baseline

    if strict:
        info = detect_paragraphs_or_none(paragraphs, registry=registry, per=per)
        if info is None:
            console.print("[yellow]No language could be detected.[/yellow]")
            raise click.exceptions.Exit(1)
    else:
        info = detect_paragraphs(
            paragraphs,
            encoding=encoding,
            registry=registry,
            per=per,
            default=settings.default_language,
        )

    console.print(f"{escape(info.name)}\t{escape(info.display_name)}", highlight=False)
