"""List command implementation."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from cli.core import registry_for
from config import AppSettings
from console_singleton import get_console

_VIEWS = {
    "all": ("all_languages", "All languages"),
    "neutral": ("neutral_languages", "Neutral languages"),
    "google": ("google_languages", "Google Translate languages"),
    "hunspell": ("hunspell_languages", "Hunspell dictionaries"),
    "tesseract": ("tesseract_languages", "Tesseract languages"),
}


@click.command(name="list")
@click.option("--neutral", "view", flag_value="neutral", help="Only languages without a territory.")
@click.option("--google", "view", flag_value="google", help="Only languages Google Translate supports.")
@click.option("--hunspell", "view", flag_value="hunspell", help="Only languages with a Hunspell dictionary.")
@click.option("--tesseract", "view", flag_value="tesseract", help="Only languages Tesseract can read.")
@click.pass_context
def list_languages(ctx: click.Context, view: str | None) -> None:
    """List registered languages in display order."""
    settings: AppSettings = ctx.obj["settings"]
    registry = registry_for(settings)
    attribute, title = _VIEWS[view or "all"]
    languages = getattr(registry, attribute)

    table = Table(title=f"{title} ({len(languages)})")
    table.add_column("Name", no_wrap=True)
    table.add_column("Display name")
    table.add_column("ISO")
    table.add_column("Google")
    table.add_column("Hunspell")
    table.add_column("Tesseract")
    for info in languages:
        table.add_row(
            escape(info.name),
            escape(info.display_name),
            info.three_letter_iso_name,
            info.google_name or "",
            info.hunspell_name or "",
            info.tesseract_name or "",
        )
    get_console().print(table)
