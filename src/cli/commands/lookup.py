"""Lookup command implementation."""

from __future__ import annotations

import click
from rich.markup import escape

from cli.core import registry_for
from cli.errors import handle_cli_errors
from config import AppSettings
from console_singleton import get_console


def _value(value: str | None) -> str:
    return escape(value) if value else "[dim]-[/dim]"


@click.command()
@click.argument("tag")
@click.pass_context
@handle_cli_errors
def lookup(ctx: click.Context, tag: str) -> None:
    """Show every name of a language tag (dictionary, translation and OCR codes)."""
    settings: AppSettings = ctx.obj["settings"]
    registry = registry_for(settings)
    info = registry[tag]
    neutral = registry.neutral_info(info)

    console = get_console()
    rows = [
        ("Name", info.name),
        ("Display name", info.display_name),
        ("English name", info.english_name),
        ("Full name", info.full_name),
        ("ISO 639-2", info.three_letter_iso_name),
        ("Neutral", "yes" if info.is_neutral else f"no ({neutral.name})"),
        ("Google", info.google_name),
        ("Hunspell", info.hunspell_name),
        ("Tesseract", info.tesseract_name),
    ]
    for label, value in rows:
        console.print(f"[bold]{label}:[/bold] {_value(value)}", highlight=False)
