"""Language entries and the name conventions attached to them."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from functools import total_ordering

import langcodes
from langcodes.tag_parser import LanguageTagError

INVARIANT_CULTURE = langcodes.Language.get("und")

# Windows legacy locales (0x0004 zh-CHS, 0x7C04 zh-CHT) for the script-only Chinese entries
_LEGACY_CULTURES = {
    "zh-Hans": "zh-CN",
    "zh-Hant": "zh-TW",
}

_UNKNOWN_PREFIX = "Unknown language"


@dataclass(frozen=True)
class LocaleResolution:
    culture: langcodes.Language
    display_name: str
    resolved: bool
    reason: str | None = None


def derive_full_name(name: str) -> str:
    """Turn ``language[-script]-region`` into ``language[-script]_region``.

    Only the last hyphen is replaced, so ``tg-Cyrl-TJ`` becomes ``tg-Cyrl_TJ``.
    """
    index = name.rfind("-")
    if index < 0:
        raise ValueError(f"Cannot derive a territory name from '{name}'")
    return f"{name[:index]}_{name[index + 1:]}"


def split_variant(name: str) -> tuple[str, str]:
    """Split ``ca:valencia [AVL]`` into ``("ca", "Valencia [AVL]")``."""
    colon = name.find(":", 2)
    if colon > 0 and len(name) - colon > 1:
        variant = name[colon + 1:]
        return name[:colon], variant[:1].upper() + variant[1:]
    return name, ""


def _display_name_for(tag: str, display_locale: str) -> tuple[langcodes.Language, str] | None:
    culture = langcodes.Language.get(tag)
    display = culture.display_name(display_locale)
    if not display or display.startswith(_UNKNOWN_PREFIX):
        return None
    return culture, display


def resolve_display_name(tag: str, english_name: str, display_locale: str = "en") -> LocaleResolution:
    """Resolve a display name for ``tag`` through the CLDR locale data.

    Failures are not raised: the result falls back to ``english_name`` and the
    invariant culture, with ``reason`` telling why.
    """
    try:
        found = _display_name_for(tag, display_locale)
        reason = "unknown-language"
    except LanguageTagError:
        found = None
        reason = "invalid-tag"
    if found is not None:
        return LocaleResolution(culture=found[0], display_name=found[1], resolved=True)

    legacy = _LEGACY_CULTURES.get(tag)
    if legacy is not None:
        try:
            found = _display_name_for(legacy, display_locale)
        except LanguageTagError:
            found = None
        if found is not None:
            return LocaleResolution(
                culture=found[0], display_name=found[1], resolved=False, reason="legacy-locale"
            )

    return LocaleResolution(
        culture=INVARIANT_CULTURE, display_name=english_name, resolved=False, reason=reason
    )


def _append_variant(display_name: str, variant: str) -> str:
    index = display_name.rfind(")")
    if index > 0:
        return f"{display_name[:index]}, {variant}{display_name[index:]}"
    return f"{display_name} ({variant})"


@total_ordering
@dataclass(frozen=True, eq=False)
class LanguageInfo:
    """One language or territory locale and its names in external systems.

    ``full_name`` is given in the table for neutral languages only; territory
    locales (``de-AT``) derive it from ``name``.
    """

    name: str
    three_letter_iso_name: str
    english_name: str
    full_name: str | None = None
    google_name: str | None = None
    hunspell_name: str | None = None
    tesseract_name: str | None = None
    display_locale: InitVar[str] = "en"

    display_name: str = field(init=False)
    culture: langcodes.Language = field(init=False, repr=False)
    is_neutral: bool = field(init=False)
    resolution: LocaleResolution = field(init=False, repr=False)

    def __post_init__(self, display_locale: str) -> None:
        key, variant = split_variant(self.name)
        resolution = resolve_display_name(key, self.english_name, display_locale)
        display_name = resolution.display_name
        if variant:
            display_name = _append_variant(display_name, variant)

        is_neutral = self.full_name is not None
        full_name = self.full_name if is_neutral else derive_full_name(key)

        object.__setattr__(self, "resolution", resolution)
        object.__setattr__(self, "culture", resolution.culture)
        object.__setattr__(self, "display_name", display_name)
        object.__setattr__(self, "is_neutral", is_neutral)
        object.__setattr__(self, "full_name", full_name)

    @property
    def neutral_name(self) -> str:
        if self.is_neutral:
            return self.name
        return self.full_name[: self.full_name.rfind("_")]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageInfo):
            return NotImplemented
        return self.name.casefold() == other.name.casefold()

    def __hash__(self) -> int:
        return hash(self.name.casefold())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LanguageInfo):
            return NotImplemented
        return (self.display_name.casefold(), self.name.casefold()) < (
            other.display_name.casefold(),
            other.name.casefold(),
        )

    def __str__(self) -> str:
        return self.display_name


__all__ = [
    "INVARIANT_CULTURE",
    "LanguageInfo",
    "LocaleResolution",
    "derive_full_name",
    "resolve_display_name",
    "split_variant",
]
