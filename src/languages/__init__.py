"""Language metadata: names, ISO codes and external-system identifiers."""

from __future__ import annotations

from languages.info import LanguageInfo, LocaleResolution, derive_full_name, resolve_display_name
from languages.registry import (
    DEFAULT_LANGUAGE,
    LanguageRegistry,
    build_registry,
    get_language_info,
    get_registry,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "LanguageInfo",
    "LanguageRegistry",
    "LocaleResolution",
    "build_registry",
    "derive_full_name",
    "get_language_info",
    "get_registry",
    "resolve_display_name",
]
