"""Shared CLI utilities and common operations."""

from __future__ import annotations

import logging
from pathlib import Path

from config import AppSettings, load_settings_from_cli
from exceptions import SubtitleReadError
from languages import LanguageRegistry, build_registry, get_registry
from languages.registry import DEFAULT_DISPLAY_LOCALE
from logging_utils.logger import configure_logging


def prepare_initial_settings(config_file: str | Path | None, verbose: bool) -> AppSettings:
    """Initialize settings and logging from CLI arguments.

    Args:
        config_file: Optional path to config file
        verbose: Enable verbose logging

    Returns:
        Configured AppSettings instance
    """
    settings = load_settings_from_cli(config_file)
    configure_logging(level=logging.DEBUG if verbose else settings.log_level_number)
    return settings


def registry_for(settings: AppSettings) -> LanguageRegistry:
    """Shared registry, or a fresh one when another display locale is configured."""
    if settings.display_locale.casefold() == DEFAULT_DISPLAY_LOCALE:
        return get_registry()
    return build_registry(settings.display_locale)


def read_paragraphs(path: Path, encoding: str) -> list[str]:
    """Read a plain-text subtitle dump; every non-blank line is one paragraph.

    Raises:
        SubtitleReadError: If the file cannot be read or decoded
    """
    try:
        text = path.read_text(encoding=encoding)
    except LookupError:
        raise SubtitleReadError(path, f"unknown encoding '{encoding}'")
    except UnicodeDecodeError as exc:
        raise SubtitleReadError(path, f"not valid {encoding} ({exc.reason} at byte {exc.start})")
    except OSError as exc:
        raise SubtitleReadError(path, exc.strerror or str(exc))
    return [line.strip() for line in text.splitlines() if line.strip()]
